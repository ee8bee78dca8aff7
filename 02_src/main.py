"""Main entry point for chatbridge."""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from chatbridge.api import create_fastapi_app
from chatbridge.app import Application
from chatbridge.config import Settings
from chatbridge.logging_config import setup_logging


def main():
    """Run the service."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    setup_logging()

    settings = Settings.from_env()
    app = create_fastapi_app(Application(settings=settings))

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
