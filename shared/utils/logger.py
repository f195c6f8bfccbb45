"""
Logging utilities

Configures stdlib logging and structlog the same way for every process.
"""

import logging
import logging.config
import os
from typing import Any, Dict, Optional

import structlog
import yaml

DEFAULT_LOGGING_CONFIG: Dict[str, Any] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'plain': {
            'format': '%(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'INFO',
            'formatter': 'plain',
            'stream': 'ext://sys.stdout',
        },
    },
    'root': {
        'level': 'INFO',
        'handlers': ['console'],
    },
}


def _load_config_file(config_path: str) -> Optional[Dict[str, Any]]:
    if not os.path.exists(config_path):
        return None
    with open(config_path, 'r') as f:
        return yaml.safe_load(f)


def setup_logging(
    service_name: str,
    log_level: str = "INFO",
    config_path: Optional[str] = None,
) -> None:
    """
    Setup logging configuration

    Args:
        service_name: Bound to every log event as ``service``
        log_level: Root log level override
        config_path: Optional YAML file with a ``logging.config`` dict
    """
    config = _load_config_file(config_path) if config_path else None
    if not config:
        config = {
            **DEFAULT_LOGGING_CONFIG,
            'handlers': {k: dict(v) for k, v in DEFAULT_LOGGING_CONFIG['handlers'].items()},
            'root': dict(DEFAULT_LOGGING_CONFIG['root']),
        }

    level = log_level.upper()
    config.setdefault('root', {})['level'] = level
    for handler_config in config.get('handlers', {}).values():
        handler_config['level'] = level

    logging.config.dictConfig(config)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(service=service_name)

