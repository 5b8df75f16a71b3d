"""Core encode/decode logic for governance calldata."""

from .decoder import DecodedCall, decode_function_call
from .encoder import encode_function_call
from .proposal import ProposalTransaction, build_proposal_transaction
from .registry import REGISTRY, FunctionSpec, ParameterSpec, Registry, TypeTag
from .service import DecodeOutcome, EncodeResult, FunctionSummary, decode_call, encode_call, list_functions

__all__ = [
    "DecodeOutcome",
    "DecodedCall",
    "EncodeResult",
    "FunctionSpec",
    "FunctionSummary",
    "ParameterSpec",
    "ProposalTransaction",
    "REGISTRY",
    "Registry",
    "TypeTag",
    "build_proposal_transaction",
    "decode_call",
    "decode_function_call",
    "encode_call",
    "encode_function_call",
    "list_functions",
]
