"""
Configuration settings for TezWire.

Settings are plain class attributes, optionally overridden by environment
variables. The active environment (development, production, testing) is
selected by the TZW_ENV variable.
"""

import os
from typing import Any, Dict, List


class Settings:
    """Decoder configuration settings"""

    FRAMEWORK_NAME = "tezwire"

    # Logging settings
    LOG_LEVEL = os.getenv("TZW_LOG_LEVEL", "INFO")
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Maximum characters of a raw payload fragment rendered into log lines
    # and error summaries. Exceptions always keep the full fragment.
    RAW_PREVIEW_LIMIT = int(os.getenv("TZW_RAW_PREVIEW_LIMIT", "500"))

    # Emit a warning when an operation kind outside the known set is seen
    WARN_ON_UNKNOWN_KIND = True

    # CLI settings
    CLI_JSON_INDENT = 2

    @classmethod
    def get_logging_config(cls) -> Dict[str, Any]:
        """Get logging configuration"""
        return {
            "level": cls.LOG_LEVEL,
            "format": cls.LOG_FORMAT,
            "raw_preview_limit": cls.RAW_PREVIEW_LIMIT,
        }

    @classmethod
    def validate_config(cls) -> List[str]:
        """Validate configuration and return list of errors"""
        errors = []

        if cls.LOG_LEVEL.upper() not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            errors.append("LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")

        if cls.RAW_PREVIEW_LIMIT <= 0:
            errors.append("RAW_PREVIEW_LIMIT must be positive")

        if cls.CLI_JSON_INDENT < 0:
            errors.append("CLI_JSON_INDENT must not be negative")

        return errors


# Environment-specific settings
class DevelopmentSettings(Settings):
    """Development environment settings"""
    LOG_LEVEL = os.getenv("TZW_LOG_LEVEL", "DEBUG")


class ProductionSettings(Settings):
    """Production environment settings"""
    LOG_LEVEL = os.getenv("TZW_LOG_LEVEL", "WARNING")
    RAW_PREVIEW_LIMIT = int(os.getenv("TZW_RAW_PREVIEW_LIMIT", "200"))


class TestingSettings(Settings):
    """Testing environment settings"""
    LOG_LEVEL = "DEBUG"
    RAW_PREVIEW_LIMIT = 80


def get_settings() -> Settings:
    """Get settings based on environment variable"""
    env = os.getenv("TZW_ENV", "development").lower()

    if env == "production":
        return ProductionSettings()
    elif env == "testing":
        return TestingSettings()
    else:
        return DevelopmentSettings()


# Global settings instance
settings = get_settings()
