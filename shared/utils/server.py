"""
Process entry point helper
"""

from typing import Callable, Type

import structlog
import uvicorn
from fastapi import FastAPI

from shared.utils.config import BaseServiceSettings, load_settings
from shared.utils.logger import setup_logging

logger = structlog.get_logger(__name__)


def serve(settings_cls: Type[BaseServiceSettings], app_factory: Callable[..., FastAPI]) -> None:
    """Load settings (exit on error), configure logging and run uvicorn"""
    settings = load_settings(settings_cls)
    setup_logging(settings.service_name, settings.log_level, settings.log_config)

    app = app_factory(settings)
    logger.info("Starting service", service=settings.service_name, host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
