import logging
from logging.handlers import RotatingFileHandler
import os
from gup.config import config, VERSION

__version__ = VERSION

def configure_logging():
    logger = logging.getLogger("gup")
    if logger.handlers:
        return logger
    level = getattr(logging, config.LOG_LEVEL, None)
    logger.setLevel(level if isinstance(level, int) else logging.INFO)
    if not config.LOG_FILE:
        logger.addHandler(logging.NullHandler())
        return logger

    log_dir = os.path.dirname(config.LOG_FILE)
    if log_dir and not os.path.exists(log_dir):
        os.makedirs(log_dir, exist_ok=True)
    file_handler = RotatingFileHandler(config.LOG_FILE, maxBytes=10240, backupCount=10, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
    ))
    file_handler.setLevel(logger.level)
    logger.addHandler(file_handler)
    logger.info('gup %s startup', VERSION)
    return logger
