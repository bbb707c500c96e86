"""CLI entry point for launching the movie search API with Uvicorn."""
import logging

import uvicorn

from .app import create_app
from .settings import MovieApiSettings


def main() -> None:
    """Start a development server for the movie search API."""
    settings = MovieApiSettings()
    logging.basicConfig(level=settings.log_level.upper())
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
