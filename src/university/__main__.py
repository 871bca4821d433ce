"""Run the registry API with uvicorn: ``python -m university``."""

from __future__ import annotations

import uvicorn

from university.api.app import create_app
from university.config import load_settings
from university.logging import get_logger, setup_logging


def main() -> None:
    settings = load_settings()
    setup_logging(log_dir=settings.log_dir, level=settings.log_level)
    logger = get_logger("main")
    logger.info("Serving %s on %s:%s", settings.db_path, settings.host, settings.port)
    uvicorn.run(create_app(settings.db_path), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
