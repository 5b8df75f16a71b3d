"""
Tests for the command line interface.
"""

import json

import pytest

from govcalldata.cli.main import main
from govcalldata.core.proposal import NOUNS_DAO_PROXY_ADDRESS

from conftest import ADDRESS_A, ADDRESS_B, THRESHOLD_CALLDATA


@pytest.fixture(autouse=True)
def _no_config(isolated_cwd):
    return isolated_cwd


class TestListCommand:
    def test_lists_all_functions(self, capsys):
        main(["list"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 15
        assert lines[0] == "_setVotingDelay(uint256 newVotingDelay)"

    def test_verbose(self, capsys):
        main(["list", "-v"])
        out = capsys.readouterr().out
        assert "selector:  0x97d048e5" in out
        assert "signature: _setForkParams(address,address,address[],uint256,uint256)" in out


class TestEncodeCommand:
    def test_encode(self, capsys):
        main(["encode", "_setProposalThresholdBPS", "-p", "newProposalThresholdBPS=10"])
        assert capsys.readouterr().out.strip() == THRESHOLD_CALLDATA

    def test_encode_array(self, capsys):
        main(["encode", "_setErc20TokensToIncludeInFork", "--param", f"erc20tokens={ADDRESS_A}, {ADDRESS_B}"])
        out = capsys.readouterr().out.strip()
        assert out.startswith("0x")
        assert out.endswith(ADDRESS_B[2:])

    def test_encode_missing_param(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["encode", "_setProposalThresholdBPS"])
        assert excinfo.value.code == 1
        assert "Missing value for parameter: newProposalThresholdBPS" in capsys.readouterr().out

    def test_encode_unknown_function(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["encode", "_setNothing"])
        assert excinfo.value.code == 1
        assert "Unknown function" in capsys.readouterr().out

    def test_bad_param_syntax(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["encode", "_setVotingDelay", "-p", "newVotingDelay"])
        assert excinfo.value.code == 2

    def test_proposal_output(self, capsys):
        main(
            [
                "encode",
                "_setProposalThresholdBPS",
                "-p",
                "newProposalThresholdBPS=10",
                "--proposal",
                "--description",
                "Set threshold",
            ]
        )
        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "targets": [NOUNS_DAO_PROXY_ADDRESS],
            "values": [0],
            "signatures": [""],
            "calldatas": [THRESHOLD_CALLDATA],
            "description": "Set threshold",
        }

    def test_proposal_uses_configured_proxy(self, capsys, isolated_cwd):
        config = isolated_cwd / "cfg.json"
        config.write_text(json.dumps({"proposal": {"dao_proxy_address": ADDRESS_A}}), encoding="utf-8")
        main(["--config", str(config), "encode", "_setVotingDelay", "-p", "newVotingDelay=1", "--proposal"])
        assert json.loads(capsys.readouterr().out)["targets"] == [ADDRESS_A]


class TestDecodeCommand:
    def test_decode(self, capsys):
        main(["decode", THRESHOLD_CALLDATA])
        assert capsys.readouterr().out.splitlines() == [
            "Function: _setProposalThresholdBPS",
            "newProposalThresholdBPS: 10",
        ]

    def test_decode_json(self, capsys):
        main(["decode", THRESHOLD_CALLDATA, "--json"])
        payload = json.loads(capsys.readouterr().out)
        assert payload["function"] == "_setProposalThresholdBPS"
        assert payload["params"] == {"newProposalThresholdBPS": "10"}

    def test_decode_unknown_selector(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["decode", "0xdeadbeef"])
        assert excinfo.value.code == 1
        assert "Unknown function selector: 0xdeadbeef" in capsys.readouterr().out

    def test_bad_config_file(self, capsys, isolated_cwd):
        with pytest.raises(SystemExit) as excinfo:
            main(["--config", str(isolated_cwd / "missing.json"), "list"])
        assert excinfo.value.code == 1
        assert "Config file not found" in capsys.readouterr().out
