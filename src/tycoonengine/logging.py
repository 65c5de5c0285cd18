"""
Custom logging configuration for tycoonengine.

Extends Python's standard logging with a DEEP_DEBUG level (5) for very
verbose tracing of per-item evaluations (unlock checks, RPS sums). Provides
the TycoonLogger class and a module-level configuration helper.

Log Levels
----------
- CRITICAL (50): Critical errors
- ERROR (40): Errors (save/load failures)
- WARNING (30): Warnings (catalog fallback, malformed unlock conditions)
- INFO (20): Informational messages (default)
- DEBUG (10): Debug messages (rejected purchases, ticks)
- DEEP_DEBUG (5): Very verbose debug messages

Examples
--------
>>> from tycoonengine import logging
>>> logger = logging.getLogger("tycoonengine.systems.market")
>>> logger.info("Purchase accepted")
>>> logger.deep("Per-item RPS breakdown")

Configure levels per module:

>>> from tycoonengine import GameSession
>>> log_config = {
...     "default_level": "INFO",
...     "modules": {"systems.unlocks": "DEBUG"},
... }
>>> session = GameSession.init(logging=log_config)
"""

import logging
from typing import Any, Mapping

(CRITICAL, ERROR, WARNING, INFO, DEBUG) = (
    logging.CRITICAL,
    logging.ERROR,
    logging.WARNING,
    logging.INFO,
    logging.DEBUG,
)
DEEP_DEBUG = 5
logging.addLevelName(DEEP_DEBUG, "DEEP")

ROOT_LOGGER = "tycoonengine"


class TycoonLogger(logging.Logger):
    """
    Custom logger with DEEP_DEBUG level support.

    Examples
    --------
    >>> logger = TycoonLogger("test")
    >>> logger.setLevel(5)  # DEEP_DEBUG
    >>> logger.deep("Very verbose message")
    """

    def deep(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """
        Log message at DEEP_DEBUG level (5).

        Parameters
        ----------
        msg : str
            Message format string.
        *args : Any
            Arguments for message formatting.
        **kwargs : Any
            Additional logging kwargs.
        """
        if self.isEnabledFor(DEEP_DEBUG):
            self._log(DEEP_DEBUG, msg, args, **kwargs)


# Make the logging module hand out our subclass from now on
logging.setLoggerClass(TycoonLogger)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)


def getLogger(name: str | None = None) -> TycoonLogger:
    """
    Get a TycoonLogger instance.

    Convenience wrapper around logging.getLogger() that returns
    a TycoonLogger instance with DEEP_DEBUG support.

    Parameters
    ----------
    name : str, optional
        Logger name. If None, returns root logger.

    Returns
    -------
    TycoonLogger
        Logger instance with deep() method.
    """
    return logging.getLogger(name)  # type: ignore[return-value]


def level_from_name(name: str) -> int:
    """Translate a level name (``"DEBUG"``, ``"DEEP_DEBUG"``...) to its number."""
    name = name.upper()
    if name == "DEEP_DEBUG":
        return DEEP_DEBUG
    return int(getattr(logging, name))


def configure(log_config: Mapping[str, Any]) -> None:
    """
    Configure logging levels for tycoonengine loggers.

    Parameters
    ----------
    log_config : Mapping
        Logging configuration with keys:
        - default_level: str (e.g., 'INFO', 'DEBUG')
        - modules: dict[str, str] (per-module overrides, relative to
          the ``tycoonengine`` package)
    """
    default_level = log_config.get("default_level", "INFO")
    logging.getLogger(ROOT_LOGGER).setLevel(level_from_name(default_level))

    for module_name, level in (log_config.get("modules") or {}).items():
        logger_name = f"{ROOT_LOGGER}.{module_name}"
        logging.getLogger(logger_name).setLevel(level_from_name(level))
