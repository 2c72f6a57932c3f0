"""urlbat custom exception hierarchy.

Exception Hierarchy:
    UrlbatError (base)
    ├── MissingPathParameterError
    └── UrlbatConfigError
"""

from typing import Optional


class UrlbatError(Exception):
    """Base exception for all urlbat errors.

    All package-specific exceptions inherit from this class to allow
    catching them with a single except clause.
    """

    def __init__(self, message: str, context: Optional[dict] = None):
        """Initialize urlbat exception.

        Args:
            message: Error message
            context: Optional context dictionary for debugging
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation with context."""
        if self.context:
            context_str = "; ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class MissingPathParameterError(UrlbatError):
    """Raised when a path placeholder's parameter is present but has no value.

    A placeholder whose name is not in the params at all is left in the
    path untouched; only a key mapped to ``None`` or ``UNDEFINED`` fails.

    Attributes:
        parameter: Name of the placeholder that could not be filled
        template: The path template being substituted
    """

    def __init__(
        self,
        message: str,
        parameter: Optional[str] = None,
        template: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        """Initialize missing path parameter error.

        Args:
            message: Error message
            parameter: Placeholder name
            template: Path template (truncated in context)
            context: Additional context
        """
        if context is None:
            context = {}
        if parameter:
            context["parameter"] = parameter
        if template:
            context["template"] = template[:100]
        super().__init__(message, context)
        self.parameter = parameter
        self.template = template


class UrlbatConfigError(UrlbatError):
    """Raised when a settings file cannot be loaded.

    Attributes:
        config_path: Path of the offending settings file
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        """Initialize config error.

        Args:
            message: Error message
            config_path: Settings file path
            context: Additional context
        """
        if context is None:
            context = {}
        if config_path:
            context["config_path"] = config_path
        super().__init__(message, context)
        self.config_path = config_path


__all__ = [
    "UrlbatError",
    "MissingPathParameterError",
    "UrlbatConfigError",
]
