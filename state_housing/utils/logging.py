"""Logging configuration for state-housing."""

import structlog
from structlog.stdlib import LoggerFactory
import logging
import sys
from typing import Optional


def configure_logging(
    level: str = "INFO",
    json_output: bool = False,
    log_file: Optional[str] = None
) -> None:
    """Configure structlog and the stdlib root logger.
    
    Module loggers created with ``logging.getLogger(__name__)`` are routed
    through the same renderer as structlog loggers.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_output: If True, output logs as JSON
        log_file: Optional file that receives a copy of every record
    """
    log_level = getattr(logging, level.upper())
    
    timestamper = structlog.processors.TimeStamper(fmt="iso")
    
    shared_processors = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
    ]
    
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty()
        )
    
    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )
    
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    
    if log_file:
        # Files always get JSON lines
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=shared_processors,
        ))
        root_logger.addHandler(file_handler)
    
    root_logger.setLevel(log_level)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.
    
    Args:
        name: Logger name (uses caller's module if not provided)
        
    Returns:
        Configured logger instance
    """
    return structlog.get_logger(name)
