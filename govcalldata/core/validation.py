"""Syntactic checks applied to raw parameter input before encoding."""

from __future__ import annotations

import re
from typing import Mapping, Optional

from govcalldata.core.errors import InvalidParameterValue, MissingParameterValue
from govcalldata.core.registry import UINT, FunctionSpec, ParameterSpec

UNSIGNED_INTEGER_RE = re.compile(r"[0-9]+")


def is_unsigned_integer(text: str) -> bool:
    """True for a plain run of ASCII digits (no sign, no ``0x``, no spaces)."""
    return UNSIGNED_INTEGER_RE.fullmatch(text) is not None


def validate_parameter(param: ParameterSpec, raw: Optional[str]) -> str:
    """Check one raw input value and return it unchanged.

    An absent or empty value is missing. ``"0"`` is a real value. Array
    elements and addresses are not inspected here; the ABI layer rejects
    malformed ones.
    """
    if raw is None or raw == "":
        raise MissingParameterValue(param.name)
    if not isinstance(raw, str):
        raise InvalidParameterValue(param.name, f"expected a string, got {type(raw).__name__}")
    if param.type.base == UINT and not param.type.is_array and not is_unsigned_integer(raw):
        raise InvalidParameterValue(param.name, "expected non-negative integer")
    return raw


def validate_inputs(function: FunctionSpec, inputs: Mapping[str, str]) -> None:
    """Validate every parameter of ``function`` in declaration order.

    Stops at the first offending field.
    """
    for param in function.params:
        validate_parameter(param, inputs.get(param.name))


__all__ = [
    "UNSIGNED_INTEGER_RE",
    "is_unsigned_integer",
    "validate_inputs",
    "validate_parameter",
]
