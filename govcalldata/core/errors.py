"""Error types raised by the calldata codec."""

from __future__ import annotations

from typing import Optional


class CalldataError(ValueError):
    """Base class for recoverable encode/decode failures."""


class EncodeError(CalldataError):
    """Raised when a set of named inputs cannot be turned into calldata."""


class UnknownFunction(EncodeError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown function: {name}")


class MissingParameterValue(EncodeError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing value for parameter: {field}")


class InvalidParameterValue(EncodeError):
    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid value for {field}: {reason}")


class EncodingFailure(EncodeError):
    """The ABI layer rejected a value that passed parameter validation."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Encoding failed: {reason}")


class DecodeError(CalldataError):
    """Raised when calldata cannot be mapped back to a registry function."""


class UnknownSelector(DecodeError):
    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"Unknown function selector: {selector or '(empty)'}")


class MalformedPayload(DecodeError):
    """The payload is not valid calldata for the function its selector names.

    ``function_name`` is ``None`` when the payload could not be read far
    enough to match a selector (e.g. it is not hex at all).
    """

    def __init__(self, reason: str, *, function_name: Optional[str] = None) -> None:
        self.reason = reason
        self.function_name = function_name
        if function_name:
            message = f"Malformed payload for {function_name}: {reason}"
        else:
            message = f"Malformed payload: {reason}"
        super().__init__(message)


class RegistryError(Exception):
    """Raised at import time when the function table is inconsistent."""


class DuplicateName(RegistryError):
    pass


class DuplicateSelector(RegistryError):
    pass


class UnparsableSignature(RegistryError):
    pass


class SignatureMismatch(RegistryError):
    pass


__all__ = [
    "CalldataError",
    "DecodeError",
    "DuplicateName",
    "DuplicateSelector",
    "EncodeError",
    "EncodingFailure",
    "InvalidParameterValue",
    "MalformedPayload",
    "MissingParameterValue",
    "RegistryError",
    "SignatureMismatch",
    "UnknownFunction",
    "UnknownSelector",
    "UnparsableSignature",
]
