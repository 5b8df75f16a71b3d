"""CLI entrypoint for encoding and decoding governance admin calldata."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from dotenv import load_dotenv

from govcalldata.config import CalldataConfig, load_config
from govcalldata.core.proposal import build_proposal_transaction
from govcalldata.core.registry import REGISTRY
from govcalldata.core.service import decode_call, encode_call, list_functions
from govcalldata.core.utils import get_logger, set_log_level

LOGGER = get_logger("govcalldata.cli")

load_dotenv()


def _parse_param(text: str) -> tuple:
    name, sep, value = text.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {text!r}")
    return name.strip(), value


def _collect_params(pairs: Sequence[tuple]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for name, value in pairs:
        if name in values:
            LOGGER.warning("Parameter %s given more than once; using the last value", name)
        values[name] = value
    return values


def _cmd_list(args: argparse.Namespace, config: CalldataConfig) -> int:
    for summary in list_functions():
        params = ", ".join(f"{ptype} {pname}" for pname, ptype in summary.params)
        print(f"{summary.name}({params})")
        if args.verbose:
            print(f"    signature: {summary.signature}")
            print(f"    selector:  {summary.selector}")
    return 0


def _cmd_encode(args: argparse.Namespace, config: CalldataConfig) -> int:
    inputs = _collect_params(args.param or [])
    result = encode_call(args.function, inputs)
    if not result.ok:
        print(f"❌ Error: {result.error}")
        return 1

    if not args.proposal:
        print(result.hex)
        return 0

    proposal = build_proposal_transaction(
        REGISTRY.lookup(args.function),
        result.calldata,
        dao_proxy_address=config.proposal.dao_proxy_address,
        description=args.description,
    )
    print(json.dumps(proposal.to_dict(), indent=2))
    return 0


def _cmd_decode(args: argparse.Namespace, config: CalldataConfig) -> int:
    outcome = decode_call(args.calldata, array_separator=config.display.array_separator)
    if not outcome.ok:
        print(f"❌ Error: {outcome.error}")
        return 1

    call = outcome.call
    if args.json:
        print(json.dumps(call.to_dict(), indent=2))
        return 0

    print(f"Function: {call.function_name}")
    for name, value in call.params.items():
        print(f"{name}: {value}")
    return 0


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="govcalldata",
        description="Encode and decode Nouns DAO governance admin calldata",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON config file")
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        type=str.upper,
        default=None,
        help="Override the configured log level",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List the supported governance functions")
    list_parser.add_argument("-v", "--verbose", action="store_true", help="Show canonical signatures and selectors")
    list_parser.set_defaults(handler=_cmd_list)

    encode_parser = subparsers.add_parser("encode", help="Encode a function call")
    encode_parser.add_argument("function", help="Function name, e.g. _setProposalThresholdBPS")
    encode_parser.add_argument(
        "-p",
        "--param",
        action="append",
        type=_parse_param,
        metavar="NAME=VALUE",
        help="Parameter value; arrays are comma separated. Repeat for each parameter.",
    )
    encode_parser.add_argument("--proposal", action="store_true", help="Print propose() arguments instead of raw calldata")
    encode_parser.add_argument("--description", default="", help="Proposal description used with --proposal")
    encode_parser.set_defaults(handler=_cmd_encode)

    decode_parser = subparsers.add_parser("decode", help="Decode calldata")
    decode_parser.add_argument("calldata", help="Hex encoded calldata")
    decode_parser.add_argument("--json", action="store_true", help="Print the decoded call as JSON")
    decode_parser.set_defaults(handler=_cmd_decode)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)

    try:
        config = load_config(args.config)
        set_log_level(args.log_level or config.logging.level)
        exit_code = args.handler(args, config)
    except Exception as exc:
        print(f"\n❌ Error: {exc}")
        sys.exit(1)

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
