import logging

PACKAGE_NAME = "nr_pars_export"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Set up a logger with the specified name and logging level."""
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Create console handler and set level
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(LOG_FORMAT))

    # Add the handler to the logger
    if not logger.hasHandlers():
        logger.addHandler(ch)

    return logger


def set_package_level(level: int) -> None:
    """Change the level of every logger (and its handlers) created by the package."""
    for name, logger in logging.Logger.manager.loggerDict.items():
        if not isinstance(logger, logging.Logger):
            continue
        if name != PACKAGE_NAME and not name.startswith(PACKAGE_NAME + "."):
            continue
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)
