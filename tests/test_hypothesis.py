"""
Property-based tests for the encode/decode round trip.
"""

from typing import Dict

import pytest
from hypothesis import given
from hypothesis import strategies as st
from web3 import Web3

from govcalldata.core.decoder import decode_function_call
from govcalldata.core.encoder import encode_function_call
from govcalldata.core.errors import UnknownSelector
from govcalldata.core.registry import ADDRESS, REGISTRY, TypeTag

addresses = st.binary(min_size=20, max_size=20).map(lambda raw: Web3.to_checksum_address("0x" + raw.hex()))


def _scalar_strategy(type_tag: TypeTag):
    if type_tag.base == ADDRESS:
        return addresses
    return st.integers(min_value=0, max_value=2**type_tag.bits - 1).map(str)


def _input_strategy(type_tag: TypeTag):
    if type_tag.is_array:
        return st.lists(_scalar_strategy(type_tag.element), min_size=1, max_size=5).map(", ".join)
    return _scalar_strategy(type_tag)


@st.composite
def calls(draw):
    function = draw(st.sampled_from(REGISTRY.all()))
    inputs: Dict[str, str] = {param.name: draw(_input_strategy(param.type)) for param in function.params}
    return function, inputs


@given(calls())
def test_decode_inverts_encode(call):
    function, inputs = call
    decoded = decode_function_call(encode_function_call(function, inputs))
    assert decoded.function_name == function.name
    assert decoded.params == inputs


@given(calls())
def test_calldata_starts_with_selector(call):
    function, inputs = call
    calldata = encode_function_call(function, inputs)
    assert calldata[:4] == function.selector
    assert (len(calldata) - 4) % 32 == 0


@given(st.binary(min_size=4, max_size=4).filter(lambda raw: REGISTRY.match_selector(raw) is None), st.binary(max_size=96))
def test_unknown_selector_never_matches(selector, body):
    with pytest.raises(UnknownSelector):
        decode_function_call(selector + body)
