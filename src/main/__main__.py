"""
Main module entry point.

Runs the API server: python -m src.main
"""

import uvicorn

from src.main.config import get_settings


def main() -> None:
    """Serve the FastAPI application with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "src.main.app:app",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
