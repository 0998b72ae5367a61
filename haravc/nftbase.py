"""Client for the credential NFT contract."""

from __future__ import annotations

import binascii
from collections.abc import Mapping, Sequence
from typing import Any

from haravc.common import HASH_LENGTH, ContractError, TxParams
from haravc.contract import ContractClient
from haravc.nft_types import CredentialMetadata, CredentialsWithMetadataResult

_METADATA_FIELDS = (
    "isValid",
    "expiredAt",
    "issuer",
    "issuedAt",
    "offchainHash",
    "claimed",
)


def unwrap_double_encoding(out: bytes) -> bytes:
    """Decode a result that arrived as a quoted hex string; return others unchanged."""
    out = bytes(out)
    if len(out) > 2 and out[0] == 0x22 and out[-1] == 0x22:
        inner = out.decode("latin-1").strip('"')
        if inner.startswith("0x"):
            inner = inner[2:]
        try:
            return binascii.unhexlify(inner)
        except (binascii.Error, ValueError) as exc:
            raise ContractError(f"failed to decode inner hex: {exc}") from exc
    return out


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _type_name(value: Any) -> str:
    return type(value).__name__


def _int_list(value: Any, what: str) -> list[int]:
    if isinstance(value, (list, tuple)) and all(_is_int(item) for item in value):
        return list(value)
    raise ContractError(f"unexpected {what} type {_type_name(value)}")


def _metadata(value: Any, what: str) -> CredentialMetadata:
    if isinstance(value, Mapping):
        try:
            fields = [value[name] for name in _METADATA_FIELDS]
        except KeyError as exc:
            raise ContractError(f"unexpected {what} metadata: missing {exc}") from None
    elif (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes, bytearray))
        and len(value) == len(_METADATA_FIELDS)
    ):
        fields = list(value)
    else:
        raise ContractError(f"unexpected {what} metadata type {_type_name(value)}")
    is_valid, expired_at, issuer, issued_at, offchain_hash, claimed = fields
    return CredentialMetadata(
        is_valid=is_valid,
        expired_at=expired_at,
        issuer=issuer,
        issued_at=issued_at,
        offchain_hash=offchain_hash,
        claimed=claimed,
    )


class NFTBase(ContractClient):
    """Read and write access to a credential NFT contract."""

    def _call(self, method: str, *args: Any) -> bytes:
        try:
            abi_method = self.abi.methods[method]
            data = bytes(abi_method.id) + bytes(abi_method.inputs.pack(*args))
        except Exception as exc:
            raise ContractError(f"abi pack error for {method}: {exc}") from exc
        raw = "0x" + data.hex()
        return bytes(self.blockchain.network.call(self.address, raw))

    def _query(self, method: str, *args: Any, count: int = 1) -> list[Any]:
        out = unwrap_double_encoding(self._call(method, *args))
        try:
            values = list(self.abi.methods[method].outputs.unpack(out))
        except Exception as exc:
            raise ContractError(f"decode {method}: {exc}") from exc
        if len(values) != count:
            raise ContractError(f"unexpected {method} result length: {len(values)}")
        return values

    def _query_bool(self, method: str, *args: Any) -> bool:
        (value,) = self._query(method, *args)
        if not isinstance(value, bool):
            raise ContractError(f"unexpected {method} type {_type_name(value)}")
        return value

    def is_credential_valid(self, token_id: int) -> bool:
        """Whether the credential token is currently valid."""
        return self._query_bool("isCredentialValid", token_id)

    def get_metadata(self, token_id: int) -> CredentialMetadata:
        """Metadata stored for one credential token."""
        (value,) = self._query("getMetadata", token_id)
        return _metadata(value, "getMetadata")

    def get_credentials_with_metadata(
        self, token_ids: Sequence[int]
    ) -> CredentialsWithMetadataResult:
        """Token ids and their metadata for the given tokens."""
        ids, metadata = self._query(
            "getCredentialsWithMetadata", list(token_ids), count=2
        )
        returned_ids = _int_list(ids, "tokenIds")
        if isinstance(metadata, (str, bytes, bytearray)) or not isinstance(
            metadata, Sequence
        ):
            raise ContractError(f"unexpected metadata type {_type_name(metadata)}")
        return CredentialsWithMetadataResult(
            token_ids=returned_ids,
            metadata=[
                _metadata(item, "getCredentialsWithMetadata") for item in metadata
            ],
        )

    def get_unclaimed_token_id(self, token_id: int) -> bytes:
        """The 32-byte hash identifying an unclaimed token."""
        (value,) = self._query("getUnclaimedTokenId", token_id)
        if isinstance(value, (bytes, bytearray)) and len(value) == HASH_LENGTH:
            return bytes(value)
        raise ContractError(f"unexpected getUnclaimedTokenId type {_type_name(value)}")

    def exists(self, token_id: int) -> bool:
        """Whether the token has been minted and not burned."""
        return self._query_bool("exists", token_id)

    def owner_of(self, token_id: int) -> Any:
        """Address owning the token."""
        (value,) = self._query("ownerOf", token_id)
        if not isinstance(value, (str, bytes, bytearray)):
            raise ContractError(f"unexpected ownerOf type {_type_name(value)}")
        return value

    def total_tokens_to_be_claimed_by_did(self, did: bytes) -> int:
        """Number of tokens waiting to be claimed by the DID."""
        (value,) = self._query("totalTokensToBeClaimedByDid", did)
        if not _is_int(value):
            raise ContractError(
                f"unexpected totalTokensToBeClaimedByDid type {_type_name(value)}"
            )
        return value

    def get_to_be_claimed_tokens_by_did(
        self, did: bytes, offset: int, limit: int
    ) -> list[int]:
        """A page of token ids waiting to be claimed by the DID."""
        (value,) = self._query("getToBeClaimedTokensByDid", did, offset, limit)
        return _int_list(value, "getToBeClaimedTokensByDid")

    def is_approved_for_all(self, owner: Any, operator: Any) -> bool:
        """Whether ``operator`` may manage all of ``owner``'s tokens."""
        return self._query_bool("isApprovedForAll", owner, operator)

    def transfer_from(
        self, wallet: Any, params: TxParams, multiple_rpc_calls: bool
    ) -> list[str]:
        """Send a transferFrom transaction and return its hashes."""
        return self.build_and_send_tx(
            wallet, "transferFrom", params, multiple_rpc_calls
        )