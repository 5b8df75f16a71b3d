"""Build calldata for a registry function from named string inputs."""

from __future__ import annotations

from typing import Mapping

from eth_abi import encode as abi_encode
from eth_abi.exceptions import EncodingError

from govcalldata.core.errors import EncodingFailure
from govcalldata.core.params import coerce_parameter
from govcalldata.core.registry import FunctionSpec
from govcalldata.core.utils import get_logger

LOGGER = get_logger("govcalldata.encoder")


def encode_function_call(function: FunctionSpec, inputs: Mapping[str, str]) -> bytes:
    """Return ``selector + encoded arguments`` for ``function``.

    Parameters are coerced in declaration order and the first failure is
    raised. ABI-layer rejections (integer overflow for the declared width,
    malformed addresses) become :class:`EncodingFailure`.
    """
    unexpected = sorted(set(inputs) - set(function.param_names()))
    if unexpected:
        LOGGER.debug("Ignoring inputs not declared by %s: %s", function.name, ", ".join(unexpected))

    values = [coerce_parameter(param, inputs.get(param.name)) for param in function.params]

    try:
        arguments = abi_encode(function.abi_types, values)
    except EncodingError as exc:
        raise EncodingFailure(str(exc)) from exc

    calldata = function.selector + arguments
    LOGGER.debug("Encoded %s into %s bytes", function.signature, len(calldata))
    return calldata


__all__ = ["encode_function_call"]
