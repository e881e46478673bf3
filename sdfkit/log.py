import logging

_LOGGER_NAME = "sdfkit"


def get_logger(name=None):
    """Return the package logger, or its ``sdfkit.<name>`` child."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)


def configure_logging(level=logging.INFO):
    """Attach one stream handler to the package logger; later calls only change the level.

    Library modules never call this, tools do.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                                           datefmt="%H:%M:%S"))
    logger.addHandler(handler)
