"""
debug.py - Logging for the game

One DebugManager instance, `debug`, is shared by the board, detector, game
and cli components. It filters by level and component, can mirror records to
a file, and times the win check. Records go to stderr so they stay out of the
board display on stdout.
"""

import logging
import sys
import time
from enum import Enum
from typing import Dict, List, Optional, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# logging has no TRACE; those records are emitted at DEBUG with a prefix
LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: logging.DEBUG,
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Level- and component-filtered front end to the `fourgrid` logger."""

    def __init__(self):
        self._level = DebugLevel.WARNING
        self._components: Set[str] = set()  # empty means every component
        self._timers: Dict[str, float] = {}
        self._logger = logging.getLogger("fourgrid")
        self._logger.setLevel(LEVEL_MAP[self._level])
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
            self._logger.addHandler(handler)

    @property
    def level(self) -> DebugLevel:
        return self._level

    def configure(self, level: DebugLevel = None,
                  log_file: str = None,
                  components: List[str] = None):
        """
        Change the logging settings; arguments left as None are unchanged.

        Args:
            level: Most detailed level to emit
            log_file: Path to mirror records to (empty string stops mirroring)
            components: Components to log for (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if log_file is not None:
            self._set_log_file(log_file)

        if components is not None:
            self._components = set(components)

    def _set_log_file(self, path: str):
        for handler in [h for h in self._logger.handlers if isinstance(h, logging.FileHandler)]:
            self._logger.removeHandler(handler)
            handler.close()
        if path:
            handler = logging.FileHandler(path)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
            self._logger.addHandler(handler)

    def log(self, level: DebugLevel, message: str, component: str = None):
        if self._level == DebugLevel.NONE or level.value > self._level.value:
            return
        if component and self._components and component not in self._components:
            return

        if component:
            message = f"[{component}] {message}"
        if level == DebugLevel.TRACE:
            message = f"TRACE: {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: str = None):
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: str = None):
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: str = None):
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: str = None):
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: str = None):
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, name: str):
        self._timers[name] = time.perf_counter()

    def end_timer(self, name: str, component: str = None) -> Optional[float]:
        """
        Stop a timer and trace the elapsed time.

        Returns:
            Elapsed seconds, or None if the timer was never started
        """
        started = self._timers.pop(name, None)
        if started is None:
            self.warning(f"Timer '{name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.trace(f"{name} took {elapsed:.6f}s", component)
        return elapsed

    def set_from_string(self, level_str: str) -> bool:
        """Set the level from a command-line name such as 'debug'."""
        try:
            level = DebugLevel[level_str.upper()]
        except KeyError:
            self.warning(f"Unknown debug level: {level_str}")
            return False

        self.configure(level=level)
        self.info(f"Debug level set to {level.name}")
        return True


debug = DebugManager()
