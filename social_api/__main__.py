"""
Run the API with uvicorn: ``python -m social_api``.

Host, port and log level come from Settings (BACKEND_HOST, BACKEND_PORT,
LOG_LEVEL environment variables or .env).
"""

import uvicorn

from social_api.config import settings


def main() -> None:
    uvicorn.run(
        "social_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
