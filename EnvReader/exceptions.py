# EnvReader/exceptions.py
"""
Custom exceptions for environment variable parsing.
These provide clear, actionable error messages when a variable is missing or malformed.
"""

from typing import Any, Iterable, Optional, Sequence, Union

VarName = Union[str, Sequence[str]]


def describe_var_name(var_name: VarName) -> str:
    """Render a single name or a candidate list for error messages."""
    if isinstance(var_name, str):
        return var_name
    return ", ".join(str(name) for name in var_name)


class EnvError(Exception):
    """Base exception for all environment variable errors."""
    pass


class MissingVariableError(EnvError):
    """Raised when a required variable (or every candidate) is absent."""

    def __init__(self, var_name: VarName):
        self.var_name = var_name
        super().__init__(f"Missing environment variable: {describe_var_name(var_name)}")


class InvalidArgumentError(EnvError, TypeError):
    """Raised when a caller passes a non-string where a string is required."""

    def __init__(self, argument: str, value: Any, expected: str = "str"):
        self.argument = argument
        self.value = value
        self.expected = expected
        super().__init__(
            f"{argument} parameter must be {expected}, got {type(value).__name__}"
        )


class EnvValidationError(EnvError, ValueError):
    """Raised when a present value fails validation."""

    def __init__(self, var_name: VarName, value: Any, reason: str, suggestion: Optional[str] = None):
        self.var_name = var_name
        self.value = value
        self.reason = reason
        self.suggestion = suggestion

        msg = f"Invalid value for '{describe_var_name(var_name)}': {value!r}\n  Reason: {reason}"
        if suggestion:
            msg += f"\n  Suggestion: {suggestion}"
        super().__init__(msg)


class InvalidFormatError(EnvValidationError):
    """Raised when a present value does not have the expected lexical form."""
    pass


class InvalidValueError(EnvValidationError):
    """Raised when a well-formed value is outside an explicit allow-list."""

    def __init__(self, var_name: VarName, value: Any, allowed_values: Iterable[str]):
        self.allowed_values = frozenset(allowed_values)
        allowed = ", ".join(repr(v) for v in sorted(self.allowed_values))

        reason = "Value is not one of the allowed values"
        suggestion = f"Use one of: {allowed}" if allowed else None

        super().__init__(var_name, value, reason, suggestion)


class EnvCheckError(EnvError):
    """Raised when a startup environment check finds failures."""

    def __init__(self, result: Any):
        self.result = result
        super().__init__(result.format(verbose=False))
