"""Wallet loading that only ever exposes the derived address."""

from __future__ import annotations

from typing import Any

from eth_account import Account
from eth_utils.address import to_checksum_address

from core.base_types import Address


def _mask_private_key(private_key: Any) -> str:
    if isinstance(private_key, (bytes, bytearray)):
        raw = private_key.hex()
    else:
        raw = str(private_key)

    if raw.startswith("0x"):
        raw = raw[2:]

    if len(raw) < 10:
        return "<redacted>"

    return f"0x{raw[:6]}...{raw[-4:]}"


class WalletManager:
    """
    Holds a local account for address derivation.

    The client never signs or sends anything; the wallet exists so balance
    and transfer-estimate commands know which address to query.

    CRITICAL: Private key must never appear in logs, errors, or string
    representations.
    """

    def __init__(self, private_key: str | bytes) -> None:
        try:
            self._account = Account.from_key(private_key)
        except Exception as exc:
            masked = _mask_private_key(private_key)
            raise ValueError(f"Invalid private key: {masked}") from exc

    @property
    def address(self) -> Address:
        return Address(to_checksum_address(self._account.address))

    def __repr__(self) -> str:
        """MUST NOT expose private key."""
        return f"WalletManager(address={self.address})"

    def __str__(self) -> str:
        return self.__repr__()
