# haravc

A Python client for three on-chain contracts used with verifiable
credentials:

- **`haravc.nftbase.NFTBase`**: the credential token contract. It can check
  whether a token exists or is valid, read credential metadata, list tokens
  still to be claimed by a DID, look up owners and approvals, and send a
  `transferFrom` transaction.
- **`haravc.vcfactory.VCFactory`**: issues, burns, revokes and approves
  credentials, updates their metadata, reads the identity and certificate NFT
  addresses, and lists identity or certificate token ids for a DID.
- **`haravc.vcstorage.VCStorage`**: counts and lists the token ids held for a
  DID, and reads or sets the addresses of the DID root and organisation
  storage contracts.

All three derive from `haravc.contract.ContractClient`. The package has no
third-party runtime dependencies.

## Installation

```
pip install haravc
```

## What you supply

The package does not talk to a node, sign transactions or carry contract
ABIs itself. You pass in objects that provide these attributes and methods:

- **blockchain**: `contract_with_hns(uri)`, `network.pending_nonce(address)`,
  `network.call(address, data)`, `call_contract(contract, method, args)`,
  `build_tx(params)` and `call_contract_write(wallet, tx, multiple_rpc_calls)`
- **contract**: `address` and `abi`
- **ABI**: `methods`, a mapping from method names to objects with `id`,
  `inputs.pack(*args)` and `outputs.unpack(data)`
- **wallet**: `get_address()`

`build_tx` receives a `haravc.common.TransactionParams` with the nonce, the
contract address, a value and gas price of 0, the encoded call data and a gas
limit of 30,000,000 (3,000,000 for `VCStorage`).

## Usage

Build a client from a contract address and its ABI:

```python
from haravc.vcfactory import VCFactory

factory = VCFactory(address, abi, blockchain, contract)
```

Or resolve the contract through a name-service URI:

```python
factory = VCFactory.from_hns(hns_uri, blockchain)
```

### Reading

```python
identity_nft = factory.get_identity_nft()
page = factory.get_identity_token_ids(did, 0, 10)
print(page.token_ids, page.total)
```

DIDs and other hashes are 32-byte `bytes` values. The factory and storage
readers reject a `did` of any other length with `ValueError`, or with
`TypeError` if it is not bytes.

### Writing

Write calls take a wallet, a parameter object and a flag that is passed on
to `call_contract_write`. They return the list of transaction hashes:

```python
from haravc.factory_types import Options, RevokeCredentialParams

hashes = factory.revoke_credential(
    wallet,
    RevokeCredentialParams(option=Options.IDENTITY, token_id=42),
    False,
)
```

Parameter classes live in `haravc.factory_types`, `haravc.nft_types` and
`haravc.storage_types`. Each one's `to_args()` returns the arguments in the
order the contract method expects.

### Credential NFT

```python
from haravc.nftbase import NFTBase

nft = NFTBase.from_hns(hns_uri, blockchain)
if nft.exists(7) and nft.is_credential_valid(7):
    metadata = nft.get_metadata(7)
    print(metadata.issuer, metadata.expired_at)
```

If a node returns its result as a quoted hex string, NFT reads decode it
first (`haravc.nftbase.unwrap_double_encoding`).

### Errors

`haravc.common.ContractError` is raised in these cases:

- HNS resolution fails.
- A method is missing from the ABI.
- The arguments cannot be packed.
- The wallet address or the nonce cannot be obtained.
- A transaction cannot be sent.
- A factory or storage read fails, or its result cannot be unpacked.
- A result has an unexpected shape or type.

An error raised by `network.call` during an NFT read is not wrapped and
reaches the caller as it was raised.

## Limits

`haravc.nft_types` defines `MintParams`, `BurnParams`, `SetMetadataParams`,
`AddTokenToDIDParams` and `RemoveTokenFromDIDParams`, but `NFTBase` has no
methods that send them. Its only write is `transfer_from`. There is no
command-line tool.

## Development

```
pip install -e ".[test]"
pytest
```