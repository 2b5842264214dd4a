"""
Custom exception classes for valuetypes.

Classification itself never raises; these exceptions cover caller mistakes
(bad type descriptors, bad registrations) and deprecation enforcement.
"""

from typing import Any


class ValueTypesException(Exception):
    """Base exception class for all valuetypes exceptions."""

    pass


class ConfigurationError(ValueTypesException):
    """Raised when the library is called with an unusable configuration."""

    pass


class InvalidDescriptorError(ConfigurationError):
    """
    Raised when a type descriptor cannot be interpreted.

    This is treated as an integration bug on the caller side, so it is
    always propagated instead of being reported as a non-match.

    Example:
        >>> matches(1, 12345)
        Traceback (most recent call last):
        ...
        InvalidDescriptorError: matches() was passed an invalid type: 12345 (int)
    """

    def __init__(self, descriptor: Any, reason: str = ""):
        self.descriptor = descriptor
        self.reason = reason
        message = f"matches() was passed an invalid type: {descriptor!r} ({type(descriptor).__name__})"
        if reason:
            message += f" - {reason}"
        super().__init__(message)


class CategoryRegistryError(ValueTypesException):
    """Raised when a custom category registration is malformed."""

    pass


class ValueTypesDeprecationError(ValueTypesException):
    """Raised for deprecated calls when the deprecation policy is FAIL."""

    def __init__(self, behaviour: str, message: str):
        self.behaviour = behaviour
        super().__init__(message)
