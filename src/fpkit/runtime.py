"""Entry points for running Tasks from synchronous code."""

from __future__ import annotations

import asyncio
import logging
from typing import TypeVar

from fpkit.config import RuntimeConfig
from fpkit.task.task import Task

A = TypeVar("A")

_LOGGER_NAME = "fpkit"


def configure_logging(config: RuntimeConfig) -> logging.Logger:
    """Set the ``fpkit`` logger level and attach a stream handler once."""
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(config.log_level)
    if not any(h.get_name() == _LOGGER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        handler.set_name(_LOGGER_NAME)
        logger.addHandler(handler)
    return logger


async def _await(task: Task[A]) -> A:
    return await task.run()


def run_sync(task: Task[A], config: RuntimeConfig | None = None) -> A:
    """Run ``task`` on a fresh event loop and return its value.

    A rejection is raised to the caller unchanged.
    """
    config = config or RuntimeConfig()
    return asyncio.run(_await(task), debug=config.debug)
