"""
Adaptive Card error types: one class per parse failure kind.
"""

from typing import Any, Optional


class AdaptiveCardError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class ParseError(AdaptiveCardError):
    """A wire document could not be turned into an AdaptiveCard.

    ``path`` locates the offending value, e.g. ``body[2].size``; ``$`` is the
    document root.
    """

    def __init__(self, code: str, path: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(code, f"{path}: {message}", details)
        self.path = path
        self.reason = message


class UnknownVariantError(ParseError):
    def __init__(self, path: str, variant: Any, details: Optional[dict[str, Any]] = None):
        super().__init__("unknown_variant", path, f"unknown type {variant!r}", details)
        self.variant = variant


class MissingFieldError(ParseError):
    def __init__(self, path: str, details: Optional[dict[str, Any]] = None):
        super().__init__("missing_field", path, "required field is missing", details)


class TypeMismatchError(ParseError):
    def __init__(self, path: str, expected: str, details: Optional[dict[str, Any]] = None):
        super().__init__("type_mismatch", path, f"expected {expected}", details)
        self.expected = expected


class UnknownEnumValueError(ParseError):
    def __init__(self, path: str, value: Any, details: Optional[dict[str, Any]] = None):
        super().__init__("unknown_enum_value", path, f"unknown value {value!r}", details)
        self.value = value
