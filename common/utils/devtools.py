import logging

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str, level: str | int = None) -> logging.Logger:
    """
    get a named library logger. handlers are left to the application, see setup_logging()
    Args:
        name: logger name, typically __name__ of the calling module
        level: optional level (name or number). None = leave as is
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    """ entry-script setup: stream handler on the root logger """
    logger = logging.getLogger()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
