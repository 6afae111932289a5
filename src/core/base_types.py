"""Core value types shared by the chain, venue and account modules."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from eth_utils.address import is_address, to_checksum_address


@dataclass(frozen=True)
class Address:
    """Ethereum address with validation and checksumming."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError("Address value must be a string")
        if not is_address(self.value):
            raise ValueError(f"Invalid Ethereum address: {self.value!r}")
        object.__setattr__(self, "value", to_checksum_address(self.value))

    @property
    def checksum(self) -> str:
        return self.value

    @property
    def lower(self) -> str:
        return self.value.lower()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Address):
            return self.lower == other.lower
        if isinstance(other, str):
            return self.lower == other.lower()
        return False

    def __hash__(self) -> int:
        return hash(self.lower)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TokenAmount:
    """
    A raw on-chain integer amount together with its token decimals.

    Balances arrive from contracts as integers in base units; ``human`` gives
    the exact decimal value and ``as_float`` the lossy value used by the
    arbitrage math.
    """

    raw: int
    decimals: int
    symbol: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.raw, int):
            raise TypeError("raw must be an int")
        if not isinstance(self.decimals, int) or self.decimals < 0:
            raise ValueError("decimals must be a non-negative integer")

    @classmethod
    def from_human(
        cls, amount: str | Decimal, decimals: int, symbol: str | None = None
    ) -> "TokenAmount":
        """Create from human-readable amount (e.g., '0.001' ETH)."""
        if isinstance(amount, float):
            raise TypeError("amount must be a string or Decimal, not float")
        if isinstance(amount, str):
            try:
                decimal_amount = Decimal(amount)
            except InvalidOperation as exc:
                raise ValueError(f"invalid amount: {amount!r}") from exc
        elif isinstance(amount, Decimal):
            decimal_amount = amount
        else:
            raise TypeError("amount must be a string or Decimal")

        raw_decimal = decimal_amount * (Decimal(10) ** decimals)
        if raw_decimal != raw_decimal.to_integral_value():
            raise ValueError("amount has more precision than decimals allow")
        return cls(raw=int(raw_decimal), decimals=decimals, symbol=symbol)

    @property
    def human(self) -> Decimal:
        return Decimal(self.raw) / (Decimal(10) ** self.decimals)

    def as_float(self) -> float:
        return float(self.human)

    def __str__(self) -> str:
        return f"{self.human} {self.symbol or ''}".strip()


@dataclass
class CallRequest:
    """Payload for eth_call / eth_estimateGas."""

    to: Address
    data: bytes = b""
    value: int = 0
    sender: Optional[Address] = None

    def to_dict(self) -> dict:
        payload: dict[str, object] = {
            "to": self.to.checksum,
            "data": f"0x{self.data.hex()}",
        }
        if self.value:
            payload["value"] = hex(self.value)
        if self.sender is not None:
            payload["from"] = self.sender.checksum
        return payload
