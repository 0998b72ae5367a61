"""Client for the credential factory contract."""

from __future__ import annotations

from typing import Any

from haravc.common import ContractError, TokenIdsResult, _bytes32
from haravc.contract import ContractClient
from haravc.factory_types import (
    ApproveCredentialOrgParams,
    ApproveCredentialParams,
    BurnCredentialParams,
    IssueCredentialParams,
    RevokeCredentialParams,
    UpdateMetadataParams,
)


class VCFactory(ContractClient):
    """Issues, updates, revokes and lists credentials through the factory contract."""

    def _read(self, method: str, *args: Any) -> list[Any]:
        try:
            result = self.blockchain.call_contract(self.contract, method, list(args))
        except Exception as exc:
            raise ContractError(f"failed to call contract: {exc}") from exc
        try:
            return list(self.abi.methods[method].outputs.unpack(result))
        except Exception as exc:
            raise ContractError(f"failed to unpack result: {exc}") from exc

    def _read_first(self, method: str, *args: Any) -> Any:
        values = self._read(method, *args)
        if not values:
            raise ContractError(f"failed to unpack result: {method} returned nothing")
        return values[0]

    def _read_token_ids(
        self, method: str, did: bytes, offset: int, limit: int
    ) -> TokenIdsResult:
        values = self._read(method, _bytes32("did", did), offset, limit)
        if len(values) != 2:
            raise ContractError(
                f"failed to unpack result: expected 2 values from {method}, got {len(values)}"
            )
        token_ids, total = values
        return TokenIdsResult(token_ids=list(token_ids), total=total)

    def get_identity_nft(self) -> Any:
        """Address of the identity credential NFT contract."""
        return self._read_first("getIdentityNFT")

    def get_certificate_nft(self) -> Any:
        """Address of the certificate credential NFT contract."""
        return self._read_first("getCertificateNFT")

    def get_identity_token_ids(
        self, did: bytes, offset: int, limit: int
    ) -> TokenIdsResult:
        """A page of identity token ids held by the DID, with their total."""
        return self._read_token_ids("getIdentityTokenIds", did, offset, limit)

    def get_certificate_token_ids(
        self, did: bytes, offset: int, limit: int
    ) -> TokenIdsResult:
        """A page of certificate token ids held by the DID, with their total."""
        return self._read_token_ids("getCertificateTokenIds", did, offset, limit)

    def issue_credential(
        self, wallet: Any, params: IssueCredentialParams, multiple_rpc_calls: bool
    ) -> list[str]:
        """Send an issueCredential transaction and return its hashes."""
        return self.build_and_send_tx(
            wallet, "issueCredential", params, multiple_rpc_calls
        )

    def burn_credential(
        self, wallet: Any, params: BurnCredentialParams, multiple_rpc_calls: bool
    ) -> list[str]:
        """Send a burnCredential transaction and return its hashes."""
        return self.build_and_send_tx(
            wallet, "burnCredential", params, multiple_rpc_calls
        )

    def update_metadata(
        self, wallet: Any, params: UpdateMetadataParams, multiple_rpc_calls: bool
    ) -> list[str]:
        """Send an updateMetadata transaction and return its hashes."""
        return self.build_and_send_tx(
            wallet, "updateMetadata", params, multiple_rpc_calls
        )

    def revoke_credential(
        self, wallet: Any, params: RevokeCredentialParams, multiple_rpc_calls: bool
    ) -> list[str]:
        """Send a revokeCredential transaction and return its hashes."""
        return self.build_and_send_tx(
            wallet, "revokeCredential", params, multiple_rpc_calls
        )

    def approve_credential_org(
        self,
        wallet: Any,
        params: ApproveCredentialOrgParams,
        multiple_rpc_calls: bool,
    ) -> list[str]:
        """Send an approveCredentialOrg transaction and return its hashes."""
        return self.build_and_send_tx(
            wallet, "approveCredentialOrg", params, multiple_rpc_calls
        )

    def approve_credential(
        self, wallet: Any, params: ApproveCredentialParams, multiple_rpc_calls: bool
    ) -> list[str]:
        """Send an approveCredential transaction and return its hashes."""
        return self.build_and_send_tx(
            wallet, "approveCredential", params, multiple_rpc_calls
        )