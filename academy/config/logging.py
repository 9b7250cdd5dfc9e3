"""
Logging configuration for the academy service.
Provides console logging with optional rotating file and JSON handlers.
"""

import os
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any, Dict, List

from pythonjsonlogger import jsonlogger

from academy.config.settings import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with additional fields"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['environment'] = settings.ENVIRONMENT

        for key in ('operation', 'entity_ref', 'exception_type'):
            if hasattr(record, key):
                log_record[key] = getattr(record, key)

        if record.exc_info:
            log_record['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info)
            }


def build_logging_config(log_dir: str = None) -> Dict[str, Any]:
    """Build the dictConfig mapping from current settings"""
    log_dir = log_dir or settings.LOG_DIR
    handlers: List[str] = ['console']

    config: Dict[str, Any] = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
            },
            'json': {
                '()': CustomJsonFormatter,
                'format': '%(timestamp)s %(level)s %(logger)s %(message)s'
            },
            'colored': {
                '()': 'colorlog.ColoredFormatter',
                'format': '%(log_color)s%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                'log_colors': {
                    'DEBUG': 'cyan',
                    'INFO': 'green',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'red,bg_white',
                }
            }
        },
        'handlers': {
            'console': {
                'level': 'DEBUG' if settings.DEBUG else 'INFO',
                'class': 'logging.StreamHandler',
                'formatter': 'colored' if settings.is_development() else 'standard'
            },
        },
    }

    if settings.LOG_TO_FILE:
        os.makedirs(log_dir, exist_ok=True)
        config['handlers']['file'] = {
            'level': 'INFO',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': os.path.join(log_dir, 'academy.log'),
            'maxBytes': 10485760,  # 10MB
            'backupCount': 10,
            'formatter': 'standard',
            'encoding': 'utf8'
        }
        config['handlers']['error_file'] = {
            'level': 'ERROR',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': os.path.join(log_dir, 'error.log'),
            'maxBytes': 10485760,
            'backupCount': 10,
            'formatter': 'standard',
            'encoding': 'utf8'
        }
        handlers += ['file', 'error_file']

    if settings.LOG_JSON:
        os.makedirs(log_dir, exist_ok=True)
        config['handlers']['json_file'] = {
            'level': 'INFO',
            'class': 'logging.handlers.RotatingFileHandler',
            'filename': os.path.join(log_dir, 'academy.json.log'),
            'maxBytes': 10485760,
            'backupCount': 10,
            'formatter': 'json',
            'encoding': 'utf8'
        }
        handlers.append('json_file')

    config['loggers'] = {
        '': {
            'handlers': handlers,
            'level': settings.LOG_LEVEL,
            'propagate': True
        },
        'academy': {
            'handlers': handlers,
            'level': settings.LOG_LEVEL,
            'propagate': False
        },
        'sqlalchemy.engine': {
            'handlers': ['console'],
            'level': 'INFO' if settings.DB_ECHO else 'WARNING',
            'propagate': False
        },
        'uvicorn': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False
        },
    }
    return config


def setup_logging(log_dir: str = None) -> logging.Logger:
    """Configure application logging"""
    logging.config.dictConfig(build_logging_config(log_dir))
    logger = logging.getLogger("academy")
    logger.info(f"Logging initialized with level: {settings.LOG_LEVEL}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger by name"""
    return logging.getLogger(name)
