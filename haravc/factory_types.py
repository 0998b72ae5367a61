"""Parameter and result types of the credential factory contract."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from haravc.common import TxParams, _normalise_bytes32


class Options(IntEnum):
    """Kind of credential a factory operation applies to."""

    IDENTITY = 0
    CERTIFICATE = 1


@dataclass(frozen=True)
class IssueCredentialParams(TxParams):
    option: Options
    did_recipient: bytes
    issuer: bytes
    expired_at: int
    offchain_hash: bytes
    merkle_tree_root: bytes
    public_identity: bytes

    def __post_init__(self) -> None:
        _normalise_bytes32(
            self,
            "did_recipient",
            "issuer",
            "offchain_hash",
            "merkle_tree_root",
            "public_identity",
        )

    def to_args(self) -> list[Any]:
        return [
            int(self.option),
            self.did_recipient,
            self.issuer,
            self.expired_at,
            self.offchain_hash,
            self.merkle_tree_root,
            self.public_identity,
        ]


@dataclass(frozen=True)
class BurnCredentialParams(TxParams):
    option: Options
    did: bytes
    token_id: int

    def __post_init__(self) -> None:
        _normalise_bytes32(self, "did")

    def to_args(self) -> list[Any]:
        return [int(self.option), self.did, self.token_id]


@dataclass(frozen=True)
class UpdateMetadataParams(TxParams):
    option: Options
    token_id: int
    expired_at: int
    offchain_hash: bytes

    def __post_init__(self) -> None:
        _normalise_bytes32(self, "offchain_hash")

    def to_args(self) -> list[Any]:
        return [int(self.option), self.token_id, self.expired_at, self.offchain_hash]


@dataclass(frozen=True)
class RevokeCredentialParams(TxParams):
    option: Options
    token_id: int

    def to_args(self) -> list[Any]:
        return [int(self.option), self.token_id]


@dataclass(frozen=True)
class ApproveCredentialOrgParams(TxParams):
    option: Options
    token_id: int
    org_did_hash: bytes
    user_did_hash: bytes
    signature: bytes

    def __post_init__(self) -> None:
        _normalise_bytes32(self, "org_did_hash", "user_did_hash")
        object.__setattr__(self, "signature", bytes(self.signature))

    def to_args(self) -> list[Any]:
        return [
            int(self.option),
            self.token_id,
            self.org_did_hash,
            self.user_did_hash,
            self.signature,
        ]


@dataclass(frozen=True)
class ApproveCredentialParams(TxParams):
    option: Options
    token_id: int
    signature: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "signature", bytes(self.signature))

    def to_args(self) -> list[Any]:
        return [int(self.option), self.token_id, self.signature]


@dataclass(frozen=True)
class CredentialMetadata:
    """Credential metadata as seen through the factory, with hashed issuer."""

    is_valid: bool
    expired_at: int
    issuer: bytes
    issued_at: int
    offchain_hash: bytes
    claimed: bool

    def __post_init__(self) -> None:
        _normalise_bytes32(self, "issuer", "offchain_hash")