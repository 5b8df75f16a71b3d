"""Result-returning entry points for front ends.

These wrap the encoder and decoder so that expected failures come back as
values instead of exceptions. Registry construction errors are not caught;
they abort at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple, Union

from govcalldata.core.decoder import DecodedCall, decode_function_call
from govcalldata.core.encoder import encode_function_call
from govcalldata.core.errors import DecodeError, EncodeError, UnknownFunction
from govcalldata.core.params import DEFAULT_ARRAY_SEPARATOR
from govcalldata.core.registry import REGISTRY, Registry
from govcalldata.core.utils import bytes_to_hex, get_logger

LOGGER = get_logger("govcalldata.service")


@dataclass(frozen=True)
class EncodeResult:
    function_name: str
    calldata: Optional[bytes] = None
    error: Optional[EncodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def hex(self) -> str:
        """``0x``-prefixed calldata, or an empty string on failure."""
        return bytes_to_hex(self.calldata) if self.calldata is not None else ""


@dataclass(frozen=True)
class DecodeOutcome:
    call: Optional[DecodedCall] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class FunctionSummary:
    """Name and ``(name, type)`` parameter pairs for a selection control."""

    name: str
    params: Tuple[Tuple[str, str], ...]
    signature: str
    selector: str


def encode_call(
    function_name: str,
    input_values: Mapping[str, str],
    *,
    registry: Registry = REGISTRY,
) -> EncodeResult:
    function = registry.lookup(function_name)
    try:
        if function is None:
            raise UnknownFunction(function_name)
        calldata = encode_function_call(function, input_values)
    except EncodeError as exc:
        LOGGER.info("Encoding %s failed: %s", function_name, exc)
        return EncodeResult(function_name=function_name, error=exc)

    LOGGER.info("Encoded %s (%s bytes)", function_name, len(calldata))
    return EncodeResult(function_name=function_name, calldata=calldata)


def decode_call(
    data: Union[bytes, str],
    *,
    registry: Registry = REGISTRY,
    array_separator: str = DEFAULT_ARRAY_SEPARATOR,
) -> DecodeOutcome:
    try:
        call = decode_function_call(data, registry=registry, array_separator=array_separator)
    except DecodeError as exc:
        LOGGER.info("Decoding failed: %s", exc)
        return DecodeOutcome(error=exc)

    LOGGER.info("Decoded call to %s", call.function_name)
    return DecodeOutcome(call=call)


def list_functions(registry: Registry = REGISTRY) -> List[FunctionSummary]:
    """Return every registry function in registration order."""
    return [
        FunctionSummary(
            name=function.name,
            params=tuple((param.name, param.type.canonical) for param in function.params),
            signature=function.signature,
            selector=function.selector_hex,
        )
        for function in registry.all()
    ]


__all__ = [
    "DecodeOutcome",
    "EncodeResult",
    "FunctionSummary",
    "decode_call",
    "encode_call",
    "list_functions",
]
