"""
Error types for seqkit.
"""

from typing import Any, Optional


class SeqkitError(Exception):
    """Base exception for all seqkit errors."""

    def __init__(self, message: str, function: Optional[str] = None) -> None:
        self.message = message
        self.function = function
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.function:
            return f"[{self.function}] {self.message}"
        return self.message


class InvalidArgumentError(SeqkitError, ValueError):
    """
    Raised when a parameter (not a sequence element) is out of range.

    Examples are a non-positive chunk size or step, or an unknown ragged
    policy. The offending value is kept on the exception for callers that
    want to report it.
    """

    def __init__(
        self,
        message: str,
        function: Optional[str] = None,
        argument: Optional[str] = None,
        value: Any = None,
    ) -> None:
        self.argument = argument
        self.value = value
        super().__init__(message, function)

    def _format_message(self) -> str:
        base = super()._format_message()
        if self.argument is None:
            return base
        return f"{base} ({self.argument}={self.value!r})"


class ConfigurationError(SeqkitError):
    """Raised when configuration values cannot be parsed or are invalid."""

    def __init__(
        self,
        message: str,
        setting: Optional[str] = None,
        raw_value: Optional[str] = None,
    ) -> None:
        self.setting = setting
        self.raw_value = raw_value
        super().__init__(message)

    def _format_message(self) -> str:
        if self.setting is None:
            return self.message
        return f"{self.setting}: {self.message} (got {self.raw_value!r})"
