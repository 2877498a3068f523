from apscheduler.schedulers.asyncio import AsyncIOScheduler
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from src import load_settings
from src.routers import matrix
from src.routers import session
from src.services.calculator import purge_expired_sessions

logging.basicConfig(level=getattr(logging, load_settings.log_level, logging.INFO))


async def purge_job():
    await purge_expired_sessions(load_settings.session_expire_hours)


@asynccontextmanager
async def lifespan(app):
    """Start the scheduler that drops idle calculator sessions.
    This function is called to start the server.
    """
    scheduler = AsyncIOScheduler()
    # If a session is idle for too long, delete it
    scheduler.add_job(
        purge_job,
        "interval",
        minutes=load_settings.purge_interval_minutes,
        id="purge_expired_sessions",
        replace_existing=True,
    )
    scheduler.start()
    logging.info("Start Server")
    try:
        yield
    finally:
        scheduler.shutdown()
        logging.info("Stop Server")


app = FastAPI(title="Matrix Calculator", lifespan=lifespan)
app.include_router(matrix.matrix_router)
app.include_router(session.session_router)
