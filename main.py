#!/usr/bin/env python3
"""
Movie Catalog API

REST backend for browsing a movie catalog and keeping a personal list
of favorite movies.

Architecture:
- Domain: entities, repository interfaces, validation, errors
- Application: auth, user, favorites and catalog services
- Infrastructure: SQLite repositories, argon2 password hashing
- Presentation: FastAPI routes
"""

import logging

import uvicorn

from presentation.api.app import create_app
from shared.config.settings import Settings
from shared.container import Container
from shared.logging.config import setup_logging

logger = logging.getLogger(__name__)


def build_app():
    """Load settings, configure logging and wire the application."""
    settings = Settings.from_env()
    setup_logging(settings.log_level, settings.log_dir)
    container = Container(settings)
    return create_app(container), settings


def main() -> None:
    app, settings = build_app()
    logger.info("Starting Movie Catalog API on %s:%d", settings.api.host, settings.api.port)
    uvicorn.run(app, host=settings.api.host, port=settings.api.port, log_config=None)


if __name__ == "__main__":
    main()
