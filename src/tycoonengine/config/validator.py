"""Centralized configuration validation for tycoonengine."""

from __future__ import annotations

import re
import warnings
from typing import Any


class ConfigValidator:
    """
    Centralized validation for session configuration.

    All validation happens once at GameSession.init() to ensure:
    - Type correctness
    - Valid parameter ranges
    - Relationship constraints between parameters
    - Clear error messages with actionable feedback
    """

    # Valid log levels for logging configuration
    VALID_LOG_LEVELS = {"DEEP_DEBUG", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    KNOWN_KEYS = {
        "tick_interval",
        "autosave_interval",
        "save_on_action",
        "save_key",
        "save_dir",
        "catalog_path",
        "purchase_quantity",
        "logging",
    }

    _SAVE_KEY_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")

    @staticmethod
    def validate_config(cfg: dict[str, Any]) -> None:
        """
        Validate all configuration parameters.

        Parameters
        ----------
        cfg : dict
            Configuration dictionary to validate.

        Raises
        ------
        ValueError
            If any validation check fails.
        """
        unknown = set(cfg) - ConfigValidator.KNOWN_KEYS
        if unknown:
            raise ValueError(
                f"Unknown config parameter(s) {sorted(unknown)}. "
                f"Valid parameters: {sorted(ConfigValidator.KNOWN_KEYS)}"
            )

        # Type checking
        ConfigValidator._validate_types(cfg)

        # Range validation
        ConfigValidator._validate_ranges(cfg)

        # Relationship constraints
        ConfigValidator._validate_relationships(cfg)

        # Logging configuration
        if "logging" in cfg:
            ConfigValidator._validate_logging(cfg["logging"])

    @staticmethod
    def _validate_types(cfg: dict[str, Any]) -> None:
        """
        Ensure correct types for configuration parameters.

        Raises
        ------
        ValueError
            If any parameter has incorrect type.
        """
        # Check integers (bool is an int subclass, reject it explicitly)
        for key in ("purchase_quantity",):
            if key not in cfg:
                continue
            val = cfg[key]
            if isinstance(val, bool) or not isinstance(val, int):
                raise ValueError(
                    f"Config parameter '{key}' must be int, got {type(val).__name__}"
                )

        if "save_on_action" in cfg and not isinstance(cfg["save_on_action"], bool):
            raise ValueError(
                f"Config parameter 'save_on_action' must be bool, "
                f"got {type(cfg['save_on_action']).__name__}"
            )

        # Check floats (accept int or float)
        for key in ("tick_interval", "autosave_interval"):
            if key not in cfg:
                continue
            val = cfg[key]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"Config parameter '{key}' must be float, got {type(val).__name__}"
                )

        if "save_key" in cfg and not isinstance(cfg["save_key"], str):
            raise ValueError(
                f"Config parameter 'save_key' must be str, "
                f"got {type(cfg['save_key']).__name__}"
            )

        # Optional paths (str or None)
        for key in ("save_dir", "catalog_path"):
            if key not in cfg:
                continue
            val = cfg[key]
            if val is not None and not isinstance(val, str):
                raise ValueError(
                    f"Config parameter '{key}' must be str or None, "
                    f"got {type(val).__name__}"
                )

    @staticmethod
    def _validate_ranges(cfg: dict[str, Any]) -> None:
        """
        Ensure parameters are in valid ranges.

        Raises
        ------
        ValueError
            If any parameter is out of valid range.
        """
        # (min_val, exclusive) – all timers must be strictly positive
        for key in ("tick_interval", "autosave_interval"):
            if key in cfg and cfg[key] <= 0:
                raise ValueError(f"Config parameter '{key}' must be > 0, got {cfg[key]}")

        if "purchase_quantity" in cfg and cfg["purchase_quantity"] < 1:
            raise ValueError(
                f"Config parameter 'purchase_quantity' must be >= 1, "
                f"got {cfg['purchase_quantity']}"
            )

        if "save_key" in cfg and not ConfigValidator._SAVE_KEY_RE.fullmatch(cfg["save_key"]):
            raise ValueError(
                f"Config parameter 'save_key' must contain only letters, digits, "
                f"'.', '_' or '-', got {cfg['save_key']!r}"
            )

    @staticmethod
    def _validate_relationships(cfg: dict[str, Any]) -> None:
        """Validate cross-parameter constraints."""
        tick = cfg.get("tick_interval", 1.0)
        autosave = cfg.get("autosave_interval", 10.0)

        if autosave < tick:
            warnings.warn(
                f"autosave_interval ({autosave}) < tick_interval ({tick}). "
                "The game will be saved more often than it earns income.",
                UserWarning,
                stacklevel=3,
            )

    @staticmethod
    def _validate_logging(log_config: dict[str, Any]) -> None:
        """
        Validate logging configuration.

        Parameters
        ----------
        log_config : dict
            Logging configuration dictionary with keys:
            - default_level: str (e.g., 'INFO', 'DEBUG')
            - modules: dict[str, str] (per-module overrides)

        Raises
        ------
        ValueError
            If logging configuration is invalid.
        """
        if not isinstance(log_config, dict):
            raise ValueError(
                f"Logging config must be dict, got {type(log_config).__name__}"
            )

        # Check default_level
        if "default_level" in log_config:
            level = log_config["default_level"]
            if not isinstance(level, str):
                raise ValueError(
                    f"Logging default_level must be str, got {type(level).__name__}"
                )

            if level.upper() not in ConfigValidator.VALID_LOG_LEVELS:
                raise ValueError(
                    f"Invalid log level '{level}'. "
                    f"Must be one of {ConfigValidator.VALID_LOG_LEVELS}"
                )

        # Check modules dictionary
        modules = log_config.get("modules")
        if modules is None:
            return
        if not isinstance(modules, dict):
            raise ValueError(
                f"Logging modules must be dict, got {type(modules).__name__}"
            )

        for module_name, level in modules.items():
            if not isinstance(module_name, str):
                raise ValueError(
                    f"Module name must be str, got {type(module_name).__name__}"
                )

            if not isinstance(level, str):
                raise ValueError(
                    f"Log level for module '{module_name}' must be str, "
                    f"got {type(level).__name__}"
                )

            if level.upper() not in ConfigValidator.VALID_LOG_LEVELS:
                raise ValueError(
                    f"Invalid log level '{level}' for module '{module_name}'. "
                    f"Must be one of {ConfigValidator.VALID_LOG_LEVELS}"
                )

    @staticmethod
    def validate_catalog_path(catalog_path: str) -> None:
        """
        Warn about a catalog path that cannot be used.

        A missing catalog is not fatal (the built-in catalog takes over), so
        this only emits warnings.
        """
        from pathlib import Path

        path = Path(catalog_path)

        if not path.is_file():
            warnings.warn(
                f"Catalog path '{catalog_path}' is not a file; "
                "the built-in catalog will be used",
                UserWarning,
                stacklevel=2,
            )
        elif path.suffix != ".json":
            warnings.warn(
                f"Catalog path '{catalog_path}' does not have a .json extension",
                UserWarning,
                stacklevel=2,
            )
