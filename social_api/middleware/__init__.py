# Middleware package init
"""
Social API — Middleware Package
=================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: assigns the correlation ID used by every log line
    2. Logging: one access log entry per request, with status and duration
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
