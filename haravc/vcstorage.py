"""Client for the credential storage contract."""

from __future__ import annotations

from typing import Any

from haravc.common import ContractError, TokenIdsResult, _bytes32
from haravc.contract import ContractClient
from haravc.storage_types import SetAddressParams


class VCStorage(ContractClient):
    """Reads credential token lists and configures the storage contract."""

    gas_limit = 3_000_000

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

    def _read_count(self, method: str, did: bytes) -> int:
        value = self._read_first(method, _bytes32("did", did))
        if not isinstance(value, int) or isinstance(value, bool):
            raise ContractError(f"unexpected {method} type {type(value).__name__}")
        return value

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

    def get_identity_token_count(self, did: bytes) -> int:
        """Number of identity tokens held by the DID."""
        return self._read_count("getIdentityTokenCount", did)

    def get_certificate_token_count(self, did: bytes) -> int:
        """Number of certificate tokens held by the DID."""
        return self._read_count("getCertificateTokenCount", did)

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

    def get_did_root_storage(self) -> Any:
        """Address of the DID root storage contract."""
        return self._read_first("getDIDRootStorage")

    def get_did_org_storage(self) -> Any:
        """Address of the DID organisation storage contract."""
        return self._read_first("getDIDOrgStorage")

    def set_did_root_storage(
        self, wallet: Any, params: SetAddressParams, multiple_rpc_calls: bool
    ) -> list[str]:
        """Send a setDidRootStorage transaction and return its hashes."""
        return self.build_and_send_tx(
            wallet, "setDidRootStorage", params, multiple_rpc_calls
        )

    def set_did_org_storage(
        self, wallet: Any, params: SetAddressParams, multiple_rpc_calls: bool
    ) -> list[str]:
        """Send a setDidOrgStorage transaction and return its hashes."""
        return self.build_and_send_tx(
            wallet, "setDidOrgStorage", params, multiple_rpc_calls
        )