"""Shared behaviour for classes that log on behalf of a task."""

import logging


class LoggerMixin:
    """Provides a ``logger`` attribute scoped to the owning task.

    The logger is a child of the class' module logger named after the
    task, so output can be filtered per task. Verbose tasks log at
    DEBUG, others inherit the level configured for the package.
    """

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose
        self.logger = logging.getLogger(self.__class__.__module__)

    def _set_task_logger(self, name: str) -> None:
        self.logger = logging.getLogger(self.__class__.__module__).getChild(
            name
        )
        self.logger.setLevel(logging.DEBUG if self.verbose else logging.NOTSET)
