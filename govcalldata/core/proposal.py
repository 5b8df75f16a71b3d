"""Assemble ``propose()`` arguments that carry admin calldata.

NounsDAOLogicV4 no longer exposes the admin setters directly. Its fallback
forwards any unrecognised selector to the NounsDAOAdmin library, so a
proposal targets the DAO proxy with an empty signature and the full encoded
call as calldata.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from web3 import Web3

from govcalldata.core.registry import FunctionSpec
from govcalldata.core.utils import bytes_to_hex, get_logger

LOGGER = get_logger("govcalldata.proposal")

NOUNS_DAO_PROXY_ADDRESS = "0x6f3E6272A167e8AcCb32072d08E0957F9c79223d"


@dataclass(frozen=True)
class ProposalTransaction:
    """Arguments for ``NounsDAOProxy.propose``."""

    targets: List[str]
    values: List[int]
    signatures: List[str]
    calldatas: List[str]
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "targets": list(self.targets),
            "values": list(self.values),
            "signatures": list(self.signatures),
            "calldatas": list(self.calldatas),
            "description": self.description,
        }


def build_proposal_transaction(
    function: FunctionSpec,
    calldata: bytes,
    *,
    dao_proxy_address: str = NOUNS_DAO_PROXY_ADDRESS,
    description: str = "",
) -> ProposalTransaction:
    """Wrap ``calldata`` in a single-action, zero-value proposal."""
    if calldata[:4] != function.selector:
        raise ValueError(f"Calldata does not start with the {function.name} selector {function.selector_hex}")
    try:
        target = Web3.to_checksum_address(dao_proxy_address)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid DAO proxy address: {dao_proxy_address}") from exc

    LOGGER.debug("Proposal action %s -> %s", function.signature, target)
    return ProposalTransaction(
        targets=[target],
        values=[0],
        signatures=[""],
        calldatas=[bytes_to_hex(calldata)],
        description=description,
    )


__all__ = ["NOUNS_DAO_PROXY_ADDRESS", "ProposalTransaction", "build_proposal_transaction"]
