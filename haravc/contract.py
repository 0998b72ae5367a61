"""Base client for a deployed contract: construction and transaction sending.

The blockchain, contract, ABI and wallet objects are supplied by the caller
and used through these attributes and methods:

* blockchain: ``contract_with_hns(uri)``, ``network.pending_nonce(address)``,
  ``network.call(address, data)``, ``call_contract(contract, method, args)``,
  ``build_tx(params)``, ``call_contract_write(wallet, tx, multiple_rpc_calls)``
* contract: ``address`` and ``abi``
* ABI: ``methods`` mapping names to objects with ``id``, ``inputs.pack(*args)``
  and ``outputs.unpack(data)``
* wallet: ``get_address()``
"""

from __future__ import annotations

from typing import Any

from haravc.common import ContractError, TransactionParams, TxParams


class ContractClient:
    """A contract at a fixed address, reached through a blockchain connection."""

    gas_limit = 30_000_000

    def __init__(self, address: Any, abi: Any, blockchain: Any, contract: Any) -> None:
        self.address = address
        self.abi = abi
        self.contract = contract
        self._blockchain = blockchain

    @classmethod
    def from_hns(cls, hns_uri: str, blockchain: Any):
        """Resolve the contract through the naming service and build a client."""
        try:
            contract = blockchain.contract_with_hns(hns_uri)
        except Exception as exc:
            raise ContractError(f"failed to resolve contract with HNS: {exc}") from exc
        return cls(contract.address, contract.abi, blockchain, contract)

    @property
    def blockchain(self) -> Any:
        return self._blockchain

    def build_and_send_tx(
        self,
        wallet: Any,
        method_name: str,
        params: TxParams,
        multiple_rpc_calls: bool,
    ) -> list[str]:
        """Encode a call to ``method_name``, sign it with ``wallet`` and send it.

        Returns the transaction hashes reported by the network.
        """
        try:
            method = self.abi.methods[method_name]
        except KeyError:
            raise ContractError(f"method {method_name} not found in ABI") from None

        try:
            inputs = method.inputs.pack(*params.to_args())
        except Exception as exc:
            raise ContractError(f"failed to pack {method_name} arguments: {exc}") from exc

        calldata = bytes(method.id) + bytes(inputs)

        try:
            sender = wallet.get_address()
        except Exception as exc:
            raise ContractError(f"failed to get wallet address: {exc}") from exc

        try:
            nonce = self._blockchain.network.pending_nonce(sender)
        except Exception as exc:
            raise ContractError(f"failed to get pending nonce: {exc}") from exc

        tx = self._blockchain.build_tx(
            TransactionParams(
                nonce=nonce,
                to=self.address,
                gas_limit=self.gas_limit,
                value=0,
                gas_price=0,
                data=calldata,
            )
        )

        try:
            hashes = self._blockchain.call_contract_write(wallet, tx, multiple_rpc_calls)
        except Exception as exc:
            raise ContractError(f"failed to send transaction: {exc}") from exc

        return list(hashes)