"""Catalog of the governance admin functions this tool can encode and decode.

The table below mirrors the setters exposed by the NounsDAOAdmin library,
which NounsDAOLogicV4 reaches through its fallback. Each entry's ``interface``
string is parsed when the module is imported; its function name, parameter
names and types must agree with the entry, otherwise the import fails.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from govcalldata.core.errors import DuplicateName, DuplicateSelector, SignatureMismatch, UnparsableSignature
from govcalldata.core.utils import bytes_to_hex, function_selector

_IDENTIFIER = r"[A-Za-z_$][A-Za-z0-9_$]*"
_INTERFACE_RE = re.compile(rf"^\s*(?:function\s+)?({_IDENTIFIER})\s*\((.*)\)\s*$", re.DOTALL)
_TYPE_RE = re.compile(r"^(uint)([0-9]*)|^(address)")
_NAME_RE = re.compile(rf"^{_IDENTIFIER}$")
_DATA_LOCATIONS = frozenset({"calldata", "memory", "storage"})

UINT = "uint"
ADDRESS = "address"


@dataclass(frozen=True)
class TypeTag:
    """One ABI type from the closed set used by the registry."""

    base: str
    bits: Optional[int] = None
    is_array: bool = False

    @property
    def canonical(self) -> str:
        scalar = f"{UINT}{self.bits}" if self.base == UINT else self.base
        return f"{scalar}[]" if self.is_array else scalar

    @property
    def element(self) -> "TypeTag":
        """The scalar type of an array, or the type itself."""
        return TypeTag(self.base, self.bits) if self.is_array else self

    @property
    def is_dynamic(self) -> bool:
        return self.is_array

    def __str__(self) -> str:
        return self.canonical


def parse_type(text: str) -> TypeTag:
    """Parse a Solidity type name into a :class:`TypeTag`.

    Only ``uint<N>``, ``address`` and one level of ``[]`` are accepted.
    """
    text = text.strip()
    is_array = text.endswith("[]")
    scalar = text[:-2] if is_array else text
    if "[" in scalar or "]" in scalar:
        raise ValueError(f"unsupported type {text!r}: only one-level dynamic arrays are allowed")

    match = _TYPE_RE.match(scalar)
    if not match or match.end() != len(scalar):
        raise ValueError(f"unsupported type {text!r}")

    if match.group(3):
        return TypeTag(ADDRESS, is_array=is_array)

    bits = int(match.group(2)) if match.group(2) else 256
    if bits % 8 or not 8 <= bits <= 256:
        raise ValueError(f"invalid integer width in {text!r}")
    return TypeTag(UINT, bits, is_array)


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    type: TypeTag


@dataclass(frozen=True)
class FunctionSpec:
    """A registry entry with its derived canonical signature and selector."""

    name: str
    params: Tuple[ParameterSpec, ...]
    interface: str
    signature: str
    selector: bytes

    @property
    def abi_types(self) -> List[str]:
        return [param.type.canonical for param in self.params]

    @property
    def selector_hex(self) -> str:
        return bytes_to_hex(self.selector)

    def param_names(self) -> List[str]:
        return [param.name for param in self.params]


def parse_interface(interface: str) -> Tuple[str, List[ParameterSpec]]:
    """Split a human-readable function interface into its name and parameters.

    Accepts ``function name(type [location] [argName], ...)`` as well as the
    bare canonical form ``name(type,...)``.
    """
    match = _INTERFACE_RE.match(interface)
    if not match:
        raise UnparsableSignature(f"Cannot parse function interface: {interface!r}")

    name, body = match.group(1), match.group(2).strip()
    params: List[ParameterSpec] = []
    if not body:
        return name, params

    for index, piece in enumerate(body.split(",")):
        tokens = piece.split()
        if not tokens or len(tokens) > 3:
            raise UnparsableSignature(f"Cannot parse parameter #{index} of {interface!r}")
        try:
            type_tag = parse_type(tokens[0])
        except ValueError as exc:
            raise UnparsableSignature(f"{name}: {exc}") from exc

        rest = tokens[1:]
        if rest and rest[0] in _DATA_LOCATIONS:
            rest = rest[1:]
        if len(rest) > 1 or (rest and not _NAME_RE.match(rest[0])):
            raise UnparsableSignature(f"Cannot parse parameter #{index} of {interface!r}")
        params.append(ParameterSpec(name=rest[0] if rest else "", type=type_tag))
    return name, params


def canonical_signature(name: str, params: Sequence[ParameterSpec]) -> str:
    return f"{name}({','.join(param.type.canonical for param in params)})"


def _build_function(entry: Mapping[str, Any]) -> FunctionSpec:
    name = entry["name"]
    interface = entry["interface"]
    parsed_name, parsed_params = parse_interface(interface)

    declared: List[ParameterSpec] = []
    for param in entry["params"]:
        try:
            declared.append(ParameterSpec(name=param["name"], type=parse_type(param["type"])))
        except ValueError as exc:
            raise UnparsableSignature(f"{name}.{param['name']}: {exc}") from exc

    if parsed_name != name:
        raise SignatureMismatch(f"{name}: interface declares function {parsed_name!r}")
    if declared != parsed_params:
        raise SignatureMismatch(
            f"{name}: parameters {[(p.name, p.type.canonical) for p in declared]} do not match "
            f"interface {[(p.name, p.type.canonical) for p in parsed_params]}"
        )

    signature = canonical_signature(name, declared)
    return FunctionSpec(
        name=name,
        params=tuple(declared),
        interface=interface,
        signature=signature,
        selector=function_selector(signature),
    )


class Registry:
    """Read-only, ordered set of :class:`FunctionSpec` entries."""

    def __init__(self, functions: Iterable[FunctionSpec]) -> None:
        self._functions: Tuple[FunctionSpec, ...] = tuple(functions)
        self._by_name: Dict[str, FunctionSpec] = {}
        self._by_selector: Dict[bytes, FunctionSpec] = {}
        for function in self._functions:
            if function.name in self._by_name:
                raise DuplicateName(f"Duplicate function name in registry: {function.name}")
            other = self._by_selector.get(function.selector)
            if other is not None:
                raise DuplicateSelector(
                    f"Selector {function.selector_hex} shared by {other.name} and {function.name}"
                )
            self._by_name[function.name] = function
            self._by_selector[function.selector] = function

    def lookup(self, name: str) -> Optional[FunctionSpec]:
        return self._by_name.get(name)

    def all(self) -> Tuple[FunctionSpec, ...]:
        return self._functions

    def match_selector(self, selector: bytes) -> Optional[FunctionSpec]:
        return self._by_selector.get(bytes(selector[:4]))

    def __iter__(self):
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name


def build_registry(table: Iterable[Mapping[str, Any]]) -> Registry:
    """Parse a literal function table into a :class:`Registry`."""
    return Registry(_build_function(entry) for entry in table)


GOVERNANCE_FUNCTIONS = [
    {
        "name": "_setVotingDelay",
        "params": [{"name": "newVotingDelay", "type": "uint256"}],
        "interface": "function _setVotingDelay(uint256 newVotingDelay)",
    },
    {
        "name": "_setVotingPeriod",
        "params": [{"name": "newVotingPeriod", "type": "uint256"}],
        "interface": "function _setVotingPeriod(uint256 newVotingPeriod)",
    },
    {
        "name": "_setProposalThresholdBPS",
        "params": [{"name": "newProposalThresholdBPS", "type": "uint256"}],
        "interface": "function _setProposalThresholdBPS(uint256 newProposalThresholdBPS)",
    },
    {
        "name": "_setObjectionPeriodDurationInBlocks",
        "params": [{"name": "newObjectionPeriodDurationInBlocks", "type": "uint32"}],
        "interface": "function _setObjectionPeriodDurationInBlocks(uint32 newObjectionPeriodDurationInBlocks)",
    },
    {
        "name": "_setLastMinuteWindowInBlocks",
        "params": [{"name": "newLastMinuteWindowInBlocks", "type": "uint32"}],
        "interface": "function _setLastMinuteWindowInBlocks(uint32 newLastMinuteWindowInBlocks)",
    },
    {
        "name": "_setProposalUpdatablePeriodInBlocks",
        "params": [{"name": "newProposalUpdatablePeriodInBlocks", "type": "uint32"}],
        "interface": "function _setProposalUpdatablePeriodInBlocks(uint32 newProposalUpdatablePeriodInBlocks)",
    },
    {
        "name": "_setForkParams",
        "params": [
            {"name": "forkEscrow", "type": "address"},
            {"name": "forkDAODeployer", "type": "address"},
            {"name": "erc20TokensToIncludeInFork", "type": "address[]"},
            {"name": "forkPeriod", "type": "uint256"},
            {"name": "forkThresholdBPS", "type": "uint256"},
        ],
        "interface": (
            "function _setForkParams(address forkEscrow, address forkDAODeployer, "
            "address[] calldata erc20TokensToIncludeInFork, uint256 forkPeriod, uint256 forkThresholdBPS)"
        ),
    },
    {
        "name": "_setForkThresholdBPS",
        "params": [{"name": "newForkThresholdBPS", "type": "uint256"}],
        "interface": "function _setForkThresholdBPS(uint256 newForkThresholdBPS)",
    },
    {
        "name": "_setForkPeriod",
        "params": [{"name": "newForkPeriod", "type": "uint256"}],
        "interface": "function _setForkPeriod(uint256 newForkPeriod)",
    },
    {
        "name": "_setForkEscrow",
        "params": [{"name": "newForkEscrow", "type": "address"}],
        "interface": "function _setForkEscrow(address newForkEscrow)",
    },
    {
        "name": "_setErc20TokensToIncludeInFork",
        "params": [{"name": "erc20tokens", "type": "address[]"}],
        "interface": "function _setErc20TokensToIncludeInFork(address[] calldata erc20tokens)",
    },
    {
        "name": "_setMinQuorumVotesBPS",
        "params": [{"name": "newMinQuorumVotesBPS", "type": "uint16"}],
        "interface": "function _setMinQuorumVotesBPS(uint16 newMinQuorumVotesBPS)",
    },
    {
        "name": "_setMaxQuorumVotesBPS",
        "params": [{"name": "newMaxQuorumVotesBPS", "type": "uint16"}],
        "interface": "function _setMaxQuorumVotesBPS(uint16 newMaxQuorumVotesBPS)",
    },
    {
        "name": "_setQuorumCoefficient",
        "params": [{"name": "newQuorumCoefficient", "type": "uint32"}],
        "interface": "function _setQuorumCoefficient(uint32 newQuorumCoefficient)",
    },
    {
        "name": "_setDynamicQuorumParams",
        "params": [
            {"name": "newMinQuorumVotesBPS", "type": "uint16"},
            {"name": "newMaxQuorumVotesBPS", "type": "uint16"},
            {"name": "newQuorumCoefficient", "type": "uint32"},
        ],
        "interface": (
            "function _setDynamicQuorumParams(uint16 newMinQuorumVotesBPS, "
            "uint16 newMaxQuorumVotesBPS, uint32 newQuorumCoefficient)"
        ),
    },
]

REGISTRY = build_registry(GOVERNANCE_FUNCTIONS)


__all__ = [
    "ADDRESS",
    "FunctionSpec",
    "GOVERNANCE_FUNCTIONS",
    "ParameterSpec",
    "REGISTRY",
    "Registry",
    "TypeTag",
    "UINT",
    "build_registry",
    "canonical_signature",
    "parse_interface",
    "parse_type",
]
