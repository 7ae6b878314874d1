"""Custom exceptions used throughout the gameoflife package."""

from typing import Any, Optional


class LifeError(Exception):
    """Base exception for all Game of Life errors.

    All package-specific exceptions inherit from this class, so callers can
    catch every error raised by the core with a single except clause.
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """

        super().__init__(message)
        self.details = details or {}


class ConfigurationError(LifeError):
    """Raised when there's an error in configuration.

    This includes:
    - Unreadable or malformed YAML
    - Missing required configuration
    - Values outside their allowed range
    """

    def __init__(
        self,
        config_key: Optional[str] = None,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        """Initialize configuration error.

        Args:
            config_key: The configuration key that caused the error
            message: Description of what's wrong. If omitted, config_key is
                treated as the message and the key defaults to "configuration".
            details: Additional context
        """
        if message is None:
            message = config_key or "Invalid configuration"
            config_key = "configuration"
        if config_key is None:
            config_key = "configuration"

        full_message = f"Configuration error for '{config_key}': {message}"
        super().__init__(message=full_message, details=details)
        self.config_key = config_key


class EngineStateError(LifeError):
    """Raised when an engine operation needs a grid that does not exist yet.

    Examples:
    - advance_generation() before initialize()
    - reading dimensions of an uninitialized engine
    """

    def __init__(
        self,
        operation: str,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"Cannot {operation}: engine has not been initialized"
        super().__init__(message=message, details=details)
        self.operation = operation
