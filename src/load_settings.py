import os
from dotenv import load_dotenv

load_dotenv()

# Cosmetic pause before generated matrices are returned to a session caller.
generation_delay_seconds = float(os.getenv("GENERATION_DELAY_SECONDS", "0.5"))
session_expire_hours = float(os.getenv("SESSION_EXPIRE_HOURS", "24"))
purge_interval_minutes = float(os.getenv("PURGE_INTERVAL_MINUTES", "60"))
log_level = os.getenv("LOG_LEVEL", "INFO").upper()

if __name__ == "__main__":
    print(generation_delay_seconds, session_expire_hours, purge_interval_minutes, log_level)
