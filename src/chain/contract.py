"""Minimal ABI helpers for read-only contract calls."""

from __future__ import annotations

from typing import Any, Sequence

from eth_abi import decode, encode
from eth_abi.exceptions import DecodingError
from eth_utils.crypto import keccak

from core.base_types import Address, CallRequest

from .client import ChainClient
from .errors import ChainError


def selector(signature: str) -> bytes:
    """First four bytes of keccak256(signature), e.g. ``balanceOf(address)``."""
    return keccak(text=signature)[:4]


def encode_call(
    signature: str,
    arg_types: Sequence[str] = (),
    args: Sequence[Any] = (),
) -> bytes:
    if len(arg_types) != len(args):
        raise ValueError("arg_types and args must have the same length")
    calldata = selector(signature)
    if arg_types:
        calldata += encode(list(arg_types), list(args))
    return calldata


def call_contract(
    client: ChainClient,
    address: Address,
    signature: str,
    return_types: Sequence[str],
    arg_types: Sequence[str] = (),
    args: Sequence[Any] = (),
) -> tuple:
    """Run eth_call and ABI-decode the result into a tuple."""
    data = encode_call(signature, arg_types, args)
    raw = client.call(CallRequest(to=address, data=data))
    return decode_result(return_types, raw, f"{signature} on {address}")


def decode_result(return_types: Sequence[str], raw: bytes, context: str) -> tuple:
    try:
        return tuple(decode(list(return_types), raw))
    except DecodingError as exc:
        raise ChainError(f"could not decode {context} ({len(raw)} bytes)") from exc


def call_single(
    client: ChainClient,
    address: Address,
    signature: str,
    return_type: str,
    arg_types: Sequence[str] = (),
    args: Sequence[Any] = (),
) -> Any:
    (value,) = call_contract(client, address, signature, [return_type], arg_types, args)
    return value
