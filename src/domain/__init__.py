"""Domain layer (pure logic).

- Keep matrix rules and calculator state transitions here.
- Avoid I/O: no HTTP/FastAPI, no session store, no scheduler.
- Prefer deterministic functions (timestamps are stamped by the service layer).
"""
