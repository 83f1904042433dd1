# -*- coding: utf-8 -*-

import logging

from loguru import logger

LOG_FORMAT = (
    "[%(asctime)s][%(levelname)s] %(name)s %(filename)s:%(funcName)s"
    ":%(lineno)d | %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class PropagateHandler(logging.Handler):
    def emit(self, record):
        logging.getLogger(record.name).handle(record)


def install(level=0):
    """Re-emit loguru records through stdlib logging, returns the sink id."""
    logger.enable("delegate_proxy")
    return logger.add(PropagateHandler(), format="{message}", level=level)


def uninstall(sink_id):
    logger.remove(sink_id)


def configure_logging(settings):
    logging.basicConfig(
        level=settings.get("LOGLEVEL", logging.ERROR),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
    logger.enable("delegate_proxy")
    if settings.get("PROPAGATE_LOGS"):
        return install()
    return None
