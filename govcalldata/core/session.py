"""Immutable state for an interactive encoder/decoder front end.

A front end keeps one :class:`CodecState` and replaces it with the value
returned by each transition. Starting an encode or a decode clears the
outputs of both operations, so an error is never shown next to calldata
from an earlier run.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Optional, Union

from govcalldata.core.decoder import DecodedCall
from govcalldata.core.errors import UnknownFunction
from govcalldata.core.params import DEFAULT_ARRAY_SEPARATOR
from govcalldata.core.registry import REGISTRY, Registry
from govcalldata.core.service import decode_call, encode_call


@dataclass(frozen=True)
class CodecState:
    selected_function: str
    input_values: Mapping[str, str] = field(default_factory=dict)
    encoded_data: str = ""
    decoded: Optional[DecodedCall] = None
    error: Optional[str] = None


def initial_state(registry: Registry = REGISTRY) -> CodecState:
    """State with the first registry function selected."""
    return CodecState(selected_function=registry.all()[0].name)


def _cleared(state: CodecState) -> CodecState:
    return replace(state, encoded_data="", decoded=None, error=None)


def select_function(state: CodecState, name: str, *, registry: Registry = REGISTRY) -> CodecState:
    """Switch the selected function; inputs and outputs are reset."""
    if name not in registry:
        raise UnknownFunction(name)
    return CodecState(selected_function=name)


def set_input(state: CodecState, param_name: str, value: str) -> CodecState:
    values: Dict[str, str] = dict(state.input_values)
    values[param_name] = value
    return replace(state, input_values=values, error=None)


def run_encode(state: CodecState, *, registry: Registry = REGISTRY) -> CodecState:
    state = _cleared(state)
    result = encode_call(state.selected_function, state.input_values, registry=registry)
    if not result.ok:
        return replace(state, error=str(result.error))
    return replace(state, encoded_data=result.hex)


def run_decode(
    state: CodecState,
    data: Union[bytes, str],
    *,
    registry: Registry = REGISTRY,
    array_separator: str = DEFAULT_ARRAY_SEPARATOR,
) -> CodecState:
    state = _cleared(state)
    outcome = decode_call(data, registry=registry, array_separator=array_separator)
    if not outcome.ok:
        return replace(state, error=str(outcome.error))
    return replace(state, decoded=outcome.call)


__all__ = [
    "CodecState",
    "initial_state",
    "run_decode",
    "run_encode",
    "select_function",
    "set_input",
]
