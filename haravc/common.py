"""Shared building blocks for the contract clients: errors, parameter and result types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

HASH_LENGTH = 32


class ContractError(Exception):
    """Raised when a contract call or transaction cannot be completed."""


class TxParams(ABC):
    """Parameters of a contract write, convertible to ABI call arguments."""

    @abstractmethod
    def to_args(self) -> list[Any]:
        """Return the arguments in the order the contract method expects them."""


@dataclass
class TokenIdsResult:
    """A page of token ids together with the total number available."""

    token_ids: list[int] = field(default_factory=list)
    total: int = 0


@dataclass(frozen=True)
class TransactionParams:
    """Everything needed to build an unsigned contract transaction."""

    nonce: int
    to: Any
    gas_limit: int
    value: int = 0
    gas_price: int = 0
    data: bytes = b""


def _bytes32(name: str, value: Any) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")
    data = bytes(value)
    if len(data) != HASH_LENGTH:
        raise ValueError(f"{name} must be {HASH_LENGTH} bytes, got {len(data)}")
    return data


def _normalise_bytes32(instance: Any, *names: str) -> None:
    """Check that the named fields hold 32 bytes and store them as ``bytes``."""
    for name in names:
        object.__setattr__(instance, name, _bytes32(name, getattr(instance, name)))