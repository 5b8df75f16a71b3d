"""Match calldata against the registry and recover its named arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from eth_abi import decode as abi_decode
from eth_abi.exceptions import DecodingError

from govcalldata.core.errors import MalformedPayload, UnknownSelector
from govcalldata.core.params import DEFAULT_ARRAY_SEPARATOR, render_values
from govcalldata.core.registry import REGISTRY, Registry
from govcalldata.core.utils import bytes_to_hex, get_logger, hex_to_bytes

LOGGER = get_logger("govcalldata.decoder")

SELECTOR_SIZE = 4


@dataclass(frozen=True)
class DecodedCall:
    """A registry function matched by selector, with display-ready arguments."""

    function_name: str
    signature: str
    selector: str
    params: Dict[str, str]
    values: Tuple[Any, ...] = field(repr=False, compare=False, default=())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "function": self.function_name,
            "signature": self.signature,
            "selector": self.selector,
            "params": dict(self.params),
        }


def _payload_bytes(data: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    try:
        return hex_to_bytes(data)
    except ValueError as exc:
        raise MalformedPayload(f"calldata is not valid hex ({exc})") from exc


def decode_function_call(
    data: Union[bytes, bytearray, str],
    *,
    registry: Registry = REGISTRY,
    array_separator: str = DEFAULT_ARRAY_SEPARATOR,
) -> DecodedCall:
    """Decode ``data`` into the registry function its selector names.

    Raises :class:`UnknownSelector` when the leading four bytes match no
    registry entry, and :class:`MalformedPayload` when they do but the
    argument bytes do not fit that entry's layout.
    """
    payload = _payload_bytes(data)
    selector = payload[:SELECTOR_SIZE]

    function = registry.match_selector(selector) if len(selector) == SELECTOR_SIZE else None
    if function is None:
        raise UnknownSelector(bytes_to_hex(selector) if selector else "")

    try:
        values = abi_decode(function.abi_types, payload[SELECTOR_SIZE:])
    except (DecodingError, ValueError) as exc:
        raise MalformedPayload(str(exc), function_name=function.name) from exc

    LOGGER.debug("Decoded %s from %s bytes", function.signature, len(payload))
    return DecodedCall(
        function_name=function.name,
        signature=function.signature,
        selector=function.selector_hex,
        params=render_values(function.params, values, array_separator=array_separator),
        values=tuple(values),
    )


__all__ = ["DecodedCall", "SELECTOR_SIZE", "decode_function_call"]
