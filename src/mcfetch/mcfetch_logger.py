"""
Logger used throughout mcfetch.
"""

import logging


class MCFetchLogger:
    """
    Thin wrapper around the "mcfetch" standard library logger.

    Components take an instance in their constructor and report through log(),
    so tests can pass their own logger and the CLI decides the level.
    """

    def __init__(self, name: str = "mcfetch") -> None:
        self.logger = logging.getLogger(name)

    def log(self, debug_message: str, level: int = logging.INFO) -> None:
        """
        Log the message at the given level.

        Args:
            debug_message: The message to log
            level: A logging level such as logging.INFO
        """
        self.logger.log(level=level, msg=debug_message)
