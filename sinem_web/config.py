"""
Sinem's Amazing Web App - Configuration Module

This module handles environment variable loading, validation, and logging
setup for the web server. Every setting is optional and the defaults give the
canonical listener on all interfaces, port 3333.
"""

import os
import sys
import logging
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Configure logging
logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    pass


def get_env_var(
    var_name: str, required: bool = True, default: Optional[str] = None
) -> Optional[str]:
    """
    Get environment variable with optional default and validation.

    Args:
        var_name: Name of the environment variable
        required: Whether the variable is required
        default: Default value if not required and not found

    Returns:
        The environment variable value or default

    Raises:
        ConfigurationError: If required variable is missing
    """
    value = os.getenv(var_name, default)
    if required and not value:
        raise ConfigurationError(
            f"Required environment variable {var_name} is not set"
        )
    return value


def get_env_int(
    var_name: str, required: bool = True, default: Optional[int] = None
) -> Optional[int]:
    """
    Get environment variable as integer.

    Raises:
        ConfigurationError: If required variable is missing or invalid
    """
    value = get_env_var(var_name, required, str(default) if default is not None else None)
    if value is None:
        return default

    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"Environment variable {var_name} must be an integer, got: {value}") from e


def get_env_bool(var_name: str, required: bool = True, default: Optional[bool] = None) -> Optional[bool]:
    """Get environment variable as boolean."""
    value = get_env_var(var_name, required, str(default).lower() if default is not None else None)
    if value is None:
        return default

    return value.lower() in ("true", "1", "yes", "on")


# =============================================================================
# LISTENER CONFIGURATION
# =============================================================================

HOST = get_env_var("HOST", required=False, default="0.0.0.0")
PORT = get_env_int("PORT", required=False, default=3333)

# =============================================================================
# APPLICATION CONFIGURATION
# =============================================================================

LOG_LEVEL = get_env_var("LOG_LEVEL", required=False, default="INFO")
DEV_MODE = get_env_bool("DEV_MODE", required=False, default=False)


def validate_config() -> None:
    """
    Validate configuration on startup.

    Raises:
        ConfigurationError: If configuration validation fails
    """
    logger.debug("Validating configuration...")

    if not HOST:
        raise ConfigurationError("HOST must not be empty")

    # Port 0 asks the OS for an ephemeral port
    if PORT < 0 or PORT > 65535:
        raise ConfigurationError(f"PORT must be between 0 and 65535, got: {PORT}")

    if LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got: {LOG_LEVEL}"
        )

    logger.debug("Configuration validation passed")


# Validate configuration on import
try:
    validate_config()
except ConfigurationError as e:
    logger.error(f"Configuration validation failed: {e}")
    raise


if DEV_MODE:
    logger.info("Configuration summary:")
    logger.info(f"  - HOST: {HOST}")
    logger.info(f"  - PORT: {PORT}")
    logger.info(f"  - LOG_LEVEL: {LOG_LEVEL}")
