"""Conversion between raw parameter strings and ABI-ready values."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from web3 import Web3

from govcalldata.core.errors import EncodingFailure
from govcalldata.core.registry import ADDRESS, UINT, ParameterSpec, TypeTag
from govcalldata.core.validation import is_unsigned_integer, validate_parameter

ARRAY_INPUT_SEPARATOR = ","
DEFAULT_ARRAY_SEPARATOR = ", "


def split_array_input(raw: str) -> List[str]:
    """Split comma separated input into stripped pieces."""
    return [piece.strip() for piece in raw.split(ARRAY_INPUT_SEPARATOR)]


def _check_address_checksum(field: str, value: str) -> str:
    """Reject mixed-case addresses whose EIP-55 checksum does not match.

    All-lowercase and all-uppercase hex carry no checksum and pass through.
    """
    digits = value[2:] if value[:2] in ("0x", "0X") else value
    if digits != digits.lower() and digits != digits.upper() and not Web3.is_checksum_address(value):
        raise EncodingFailure(f"{field}: address {value} has an invalid checksum")
    return value


def _coerce_element(field: str, type_tag: TypeTag, piece: str) -> Any:
    # Unvalidated: anything that is not plain digits goes to the ABI layer as is.
    if type_tag.base == UINT and is_unsigned_integer(piece):
        return int(piece)
    if type_tag.base == ADDRESS:
        return _check_address_checksum(field, piece)
    return piece


def coerce_parameter(param: ParameterSpec, raw: Optional[str]) -> Any:
    """Turn one raw input string into the value handed to the ABI encoder."""
    raw = validate_parameter(param, raw)
    if param.type.is_array:
        element = param.type.element
        return [_coerce_element(param.name, element, piece) for piece in split_array_input(raw)]
    if param.type.base == UINT:
        return int(raw)
    return _check_address_checksum(param.name, raw)


def render_value(type_tag: TypeTag, value: Any, *, array_separator: str = DEFAULT_ARRAY_SEPARATOR) -> str:
    """Render a decoded ABI value for display."""
    if type_tag.is_array:
        element = type_tag.element
        return array_separator.join(render_value(element, item) for item in value)
    if type_tag.base == ADDRESS:
        return Web3.to_checksum_address(value)
    return str(int(value))


def render_values(
    params: Sequence[ParameterSpec],
    values: Sequence[Any],
    *,
    array_separator: str = DEFAULT_ARRAY_SEPARATOR,
) -> Dict[str, str]:
    return {
        param.name: render_value(param.type, value, array_separator=array_separator)
        for param, value in zip(params, values)
    }


__all__ = [
    "ARRAY_INPUT_SEPARATOR",
    "DEFAULT_ARRAY_SEPARATOR",
    "coerce_parameter",
    "render_value",
    "render_values",
    "split_array_input",
]
