"""Run the API server: python -m guardwatch"""

import logging

import uvicorn
from dotenv import load_dotenv

from .core.config import get_settings
from .main import configure_logging


def main() -> None:
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.log_level)
    logging.getLogger(__name__).info(f"Server running on port {settings.port}")
    uvicorn.run("guardwatch.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
