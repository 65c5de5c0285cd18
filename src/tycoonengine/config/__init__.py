"""Configuration module for tycoonengine."""

from tycoonengine.config.schema import Config
from tycoonengine.config.validator import ConfigValidator

__all__ = ["Config", "ConfigValidator"]
