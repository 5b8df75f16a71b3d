"""
Tests for selector matching and calldata decoding.
"""

import pytest

from govcalldata.core.decoder import decode_function_call
from govcalldata.core.encoder import encode_function_call
from govcalldata.core.errors import MalformedPayload, UnknownSelector
from govcalldata.core.registry import REGISTRY, build_registry

from conftest import ADDRESS_A, ADDRESS_B, ADDRESS_C, ADDRESS_D, THRESHOLD_CALLDATA, address_word, word


class TestDecodeKnownCalls:
    """Payloads whose selector is in the registry."""

    def test_proposal_threshold_bps(self):
        call = decode_function_call(THRESHOLD_CALLDATA)
        assert call.function_name == "_setProposalThresholdBPS"
        assert call.params == {"newProposalThresholdBPS": "10"}
        assert call.selector == "0x97d048e5"
        assert call.signature == "_setProposalThresholdBPS(uint256)"

    def test_accepts_bytes(self):
        call = decode_function_call(bytes.fromhex(THRESHOLD_CALLDATA[2:]))
        assert call.params == {"newProposalThresholdBPS": "10"}

    def test_accepts_unprefixed_and_padded_hex(self):
        call = decode_function_call("  " + THRESHOLD_CALLDATA[2:].upper() + "\n")
        assert call.function_name == "_setProposalThresholdBPS"

    def test_fork_params(self):
        function = REGISTRY.lookup("_setForkParams")
        payload = (
            function.selector
            + address_word(ADDRESS_A)
            + address_word(ADDRESS_B)
            + word(5 * 32)
            + word(7)
            + word(0)
            + word(2)
            + address_word(ADDRESS_C)
            + address_word(ADDRESS_D)
        )
        call = decode_function_call(payload)
        assert call.function_name == "_setForkParams"
        assert call.params == {
            "forkEscrow": ADDRESS_A,
            "forkDAODeployer": ADDRESS_B,
            "erc20TokensToIncludeInFork": f"{ADDRESS_C}, {ADDRESS_D}",
            "forkPeriod": "7",
            "forkThresholdBPS": "0",
        }
        assert list(call.params) == function.param_names()

    def test_custom_array_separator(self):
        function = REGISTRY.lookup("_setErc20TokensToIncludeInFork")
        payload = function.selector + word(32) + word(2) + address_word(ADDRESS_A) + address_word(ADDRESS_B)
        call = decode_function_call(payload, array_separator=" | ")
        assert call.params == {"erc20tokens": f"{ADDRESS_A} | {ADDRESS_B}"}

    def test_empty_array(self):
        function = REGISTRY.lookup("_setErc20TokensToIncludeInFork")
        call = decode_function_call(function.selector + word(32) + word(0))
        assert call.params == {"erc20tokens": ""}

    def test_typed_values_kept(self):
        call = decode_function_call(THRESHOLD_CALLDATA)
        assert call.values == (10,)

    def test_to_dict(self):
        assert decode_function_call(THRESHOLD_CALLDATA).to_dict() == {
            "function": "_setProposalThresholdBPS",
            "signature": "_setProposalThresholdBPS(uint256)",
            "selector": "0x97d048e5",
            "params": {"newProposalThresholdBPS": "10"},
        }


class TestDecodeFailures:
    """Unknown selectors versus corrupted payloads."""

    def test_unknown_selector(self):
        with pytest.raises(UnknownSelector) as excinfo:
            decode_function_call("0xdeadbeef" + word(10).hex())
        assert excinfo.value.selector == "0xdeadbeef"

    def test_short_payload_is_unknown_selector(self):
        with pytest.raises(UnknownSelector):
            decode_function_call("0x97d048")

    def test_empty_payload_is_unknown_selector(self):
        with pytest.raises(UnknownSelector):
            decode_function_call("0x")

    def test_selector_from_another_registry_is_unknown(self):
        other = build_registry([{"name": "foo", "params": [], "interface": "function foo()"}])
        with pytest.raises(UnknownSelector):
            decode_function_call(THRESHOLD_CALLDATA, registry=other)

    def test_truncated_arguments(self):
        with pytest.raises(MalformedPayload) as excinfo:
            decode_function_call(THRESHOLD_CALLDATA[:-2])
        assert excinfo.value.function_name == "_setProposalThresholdBPS"

    def test_missing_arguments(self):
        with pytest.raises(MalformedPayload) as excinfo:
            decode_function_call("0x97d048e5")
        assert excinfo.value.function_name == "_setProposalThresholdBPS"

    def test_bad_array_offset(self):
        function = REGISTRY.lookup("_setErc20TokensToIncludeInFork")
        payload = function.selector + word(4096) + word(1) + address_word(ADDRESS_A)
        with pytest.raises(MalformedPayload) as excinfo:
            decode_function_call(payload)
        assert excinfo.value.function_name == "_setErc20TokensToIncludeInFork"

    def test_array_length_past_end(self):
        function = REGISTRY.lookup("_setErc20TokensToIncludeInFork")
        payload = function.selector + word(32) + word(3) + address_word(ADDRESS_A)
        with pytest.raises(MalformedPayload):
            decode_function_call(payload)

    def test_value_wider_than_declared_type(self):
        function = REGISTRY.lookup("_setMinQuorumVotesBPS")
        with pytest.raises(MalformedPayload):
            decode_function_call(function.selector + word(2**16))

    def test_not_hex(self):
        with pytest.raises(MalformedPayload) as excinfo:
            decode_function_call("0x97d048e5zz")
        assert excinfo.value.function_name is None

    def test_odd_length_hex(self):
        with pytest.raises(MalformedPayload):
            decode_function_call("0x97d048e50")


class TestRoundTrip:
    """Encoding then decoding returns the original strings."""

    @pytest.mark.parametrize(
        "name, inputs",
        [
            ("_setVotingDelay", {"newVotingDelay": "7200"}),
            ("_setQuorumCoefficient", {"newQuorumCoefficient": "0"}),
            (
                "_setDynamicQuorumParams",
                {"newMinQuorumVotesBPS": "1000", "newMaxQuorumVotesBPS": "1500", "newQuorumCoefficient": "1000000"},
            ),
            ("_setErc20TokensToIncludeInFork", {"erc20tokens": f"{ADDRESS_A}, {ADDRESS_B}, {ADDRESS_C}"}),
        ],
    )
    def test_round_trip(self, name, inputs):
        calldata = encode_function_call(REGISTRY.lookup(name), inputs)
        call = decode_function_call(calldata)
        assert call.function_name == name
        assert call.params == inputs

    def test_leading_zeros_normalized(self):
        calldata = encode_function_call(REGISTRY.lookup("_setVotingPeriod"), {"newVotingPeriod": "00050"})
        assert decode_function_call(calldata).params == {"newVotingPeriod": "50"}
