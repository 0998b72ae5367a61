"""Parameter and result types of the credential NFT contract."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from haravc.common import TxParams, _normalise_bytes32


@dataclass(frozen=True)
class CredentialMetadata:
    """Metadata stored on chain for one credential token."""

    is_valid: bool
    expired_at: int
    issuer: Any
    issued_at: int
    offchain_hash: str
    claimed: bool


@dataclass
class CredentialsWithMetadataResult:
    """Token ids paired position by position with their metadata."""

    token_ids: list[int] = field(default_factory=list)
    metadata: list[CredentialMetadata] = field(default_factory=list)


@dataclass(frozen=True)
class MintParams(TxParams):
    issuer: Any
    claimer_did_hash: bytes

    def __post_init__(self) -> None:
        _normalise_bytes32(self, "claimer_did_hash")

    def to_args(self) -> list[Any]:
        return [self.issuer, self.claimer_did_hash]


@dataclass(frozen=True)
class BurnParams(TxParams):
    token_id: int

    def to_args(self) -> list[Any]:
        return [self.token_id]


@dataclass(frozen=True)
class SetMetadataParams(TxParams):
    token_id: int
    metadata: CredentialMetadata

    def to_args(self) -> list[Any]:
        return [self.token_id, self.metadata]


@dataclass(frozen=True)
class TransferFromParams(TxParams):
    sender: Any
    to: Any
    token_id: int

    def to_args(self) -> list[Any]:
        return [self.sender, self.to, self.token_id]


@dataclass(frozen=True)
class AddTokenToDIDParams(TxParams):
    did: bytes
    token_id: int

    def __post_init__(self) -> None:
        _normalise_bytes32(self, "did")

    def to_args(self) -> list[Any]:
        return [self.did, self.token_id]


@dataclass(frozen=True)
class RemoveTokenFromDIDParams(TxParams):
    did: bytes
    token_id: int

    def __post_init__(self) -> None:
        _normalise_bytes32(self, "did")

    def to_args(self) -> list[Any]:
        return [self.did, self.token_id]