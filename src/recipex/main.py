"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn recipex.main:app --reload --port 4000

    # Or run the module directly
    python -m recipex.main
"""

from recipex.factory import create_app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    from recipex.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "recipex.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )
