import pytest

from haravc.common import ContractError, TokenIdsResult
from haravc.factory_types import (
    ApproveCredentialOrgParams,
    ApproveCredentialParams,
    BurnCredentialParams,
    IssueCredentialParams,
    Options,
    RevokeCredentialParams,
    UpdateMetadataParams,
)
from haravc.vcfactory import VCFactory

ADDRESS = "0x00000000000000000000000000000000000000aa"
SENDER = "0x00000000000000000000000000000000000000bb"
DID = bytes(range(32))


class FakeInputs:
    def __init__(self):
        self.packed = []

    def pack(self, *args):
        self.packed.append(args)
        return repr(args).encode()


class FakeOutputs:
    def __init__(self, values=None, error=None):
        self.values = values if values is not None else []
        self.error = error
        self.seen = []

    def unpack(self, data):
        self.seen.append(data)
        if self.error:
            raise self.error
        return list(self.values)


class FakeMethod:
    def __init__(self, method_id=b"\x01\x02\x03\x04", values=None, error=None):
        self.id = method_id
        self.inputs = FakeInputs()
        self.outputs = FakeOutputs(values, error)


class FakeABI:
    def __init__(self, methods):
        self.methods = methods


class FakeNetwork:
    def __init__(self, nonce=5):
        self.nonce = nonce
        self.asked = []

    def pending_nonce(self, address):
        self.asked.append(address)
        return self.nonce


class FakeBlockchain:
    def __init__(self, result=b"raw", call_error=None):
        self.network = FakeNetwork()
        self.result = result
        self.call_error = call_error
        self.calls = []
        self.built = []
        self.writes = []

    def call_contract(self, contract, method, args):
        self.calls.append((contract, method, args))
        if self.call_error:
            raise self.call_error
        return self.result

    def build_tx(self, params):
        self.built.append(params)
        return ("tx", params)

    def call_contract_write(self, wallet, tx, multiple_rpc_calls):
        self.writes.append((wallet, tx, multiple_rpc_calls))
        return ("0xhash1", "0xhash2")


class FakeWallet:
    def get_address(self):
        return SENDER


def make(methods, **chain_kwargs):
    chain = FakeBlockchain(**chain_kwargs)
    contract = object()
    factory = VCFactory(ADDRESS, FakeABI(methods), chain, contract)
    return factory, chain, contract


def test_get_identity_nft_returns_first_value():
    factory, chain, contract = make({"getIdentityNFT": FakeMethod(values=[ADDRESS])})
    assert factory.get_identity_nft() == ADDRESS
    assert chain.calls == [(contract, "getIdentityNFT", [])]


def test_get_certificate_nft_passes_raw_result_to_unpack():
    method = FakeMethod(values=[SENDER])
    factory, _, _ = make({"getCertificateNFT": method}, result=b"encoded")
    assert factory.get_certificate_nft() == SENDER
    assert method.outputs.seen == [b"encoded"]


def test_call_failure_is_wrapped():
    factory, _, _ = make(
        {"getIdentityNFT": FakeMethod(values=[ADDRESS])},
        call_error=RuntimeError("boom"),
    )
    with pytest.raises(ContractError, match="failed to call contract: boom"):
        factory.get_identity_nft()


def test_unpack_failure_is_wrapped():
    factory, _, _ = make({"getIdentityNFT": FakeMethod(error=ValueError("bad"))})
    with pytest.raises(ContractError, match="failed to unpack result: bad"):
        factory.get_identity_nft()


def test_empty_result_raises():
    factory, _, _ = make({"getCertificateNFT": FakeMethod(values=[])})
    with pytest.raises(ContractError, match="failed to unpack result"):
        factory.get_certificate_nft()


def test_get_identity_token_ids():
    method = FakeMethod(values=[[4, 5, 6], 9])
    factory, chain, contract = make({"getIdentityTokenIds": method})
    result = factory.get_identity_token_ids(DID, 0, 3)
    assert result == TokenIdsResult(token_ids=[4, 5, 6], total=9)
    assert chain.calls == [(contract, "getIdentityTokenIds", [DID, 0, 3])]


def test_get_certificate_token_ids():
    method = FakeMethod(values=[(1, 2), 2])
    factory, chain, _ = make({"getCertificateTokenIds": method})
    result = factory.get_certificate_token_ids(DID, 10, 20)
    assert result.token_ids == [1, 2]
    assert result.total == 2
    assert chain.calls[0][1:] == ("getCertificateTokenIds", [DID, 10, 20])


def test_token_ids_wrong_length_raises():
    factory, _, _ = make({"getIdentityTokenIds": FakeMethod(values=[[1]])})
    with pytest.raises(ContractError, match="failed to unpack result"):
        factory.get_identity_token_ids(DID, 0, 1)


def test_token_ids_rejects_short_did():
    factory, chain, _ = make({"getIdentityTokenIds": FakeMethod(values=[[], 0])})
    with pytest.raises(ValueError):
        factory.get_identity_token_ids(b"short", 0, 1)
    assert chain.calls == []


def _issue_params():
    return IssueCredentialParams(
        option=Options.CERTIFICATE,
        did_recipient=DID,
        issuer=bytes(32),
        expired_at=1000,
        offchain_hash=b"\x11" * 32,
        merkle_tree_root=b"\x22" * 32,
        public_identity=b"\x33" * 32,
    )


def test_issue_credential_builds_and_sends_transaction():
    method = FakeMethod(method_id=b"\xaa\xbb\xcc\xdd")
    factory, chain, _ = make({"issueCredential": method})
    wallet = FakeWallet()
    params = _issue_params()

    hashes = factory.issue_credential(wallet, params, True)

    assert hashes == ["0xhash1", "0xhash2"]
    assert method.inputs.packed == [tuple(params.to_args())]
    tx_params = chain.built[0]
    assert tx_params.data == b"\xaa\xbb\xcc\xdd" + repr(tuple(params.to_args())).encode()
    assert tx_params.to == ADDRESS
    assert tx_params.nonce == chain.network.nonce
    assert tx_params.gas_limit == 30_000_000
    assert (tx_params.value, tx_params.gas_price) == (0, 0)
    assert chain.network.asked == [SENDER]
    assert chain.writes == [(wallet, ("tx", tx_params), True)]


@pytest.mark.parametrize(
    "method_name, call, params",
    [
        (
            "burnCredential",
            "burn_credential",
            BurnCredentialParams(option=Options.IDENTITY, did=DID, token_id=7),
        ),
        (
            "updateMetadata",
            "update_metadata",
            UpdateMetadataParams(
                option=Options.IDENTITY, token_id=7, expired_at=99, offchain_hash=DID
            ),
        ),
        (
            "revokeCredential",
            "revoke_credential",
            RevokeCredentialParams(option=Options.CERTIFICATE, token_id=3),
        ),
        (
            "approveCredentialOrg",
            "approve_credential_org",
            ApproveCredentialOrgParams(
                option=Options.IDENTITY,
                token_id=1,
                org_did_hash=DID,
                user_did_hash=bytes(32),
                signature=b"sig",
            ),
        ),
        (
            "approveCredential",
            "approve_credential",
            ApproveCredentialParams(
                option=Options.CERTIFICATE, token_id=2, signature=b"sig"
            ),
        ),
    ],
)
def test_write_methods_use_their_contract_method(method_name, call, params):
    method = FakeMethod()
    factory, chain, _ = make({method_name: method})
    hashes = getattr(factory, call)(FakeWallet(), params, False)
    assert hashes == ["0xhash1", "0xhash2"]
    assert method.inputs.packed == [tuple(params.to_args())]
    assert chain.writes[0][2] is False


def test_write_with_unknown_method_raises():
    factory, chain, _ = make({})
    with pytest.raises(ContractError, match="method issueCredential not found in ABI"):
        factory.issue_credential(FakeWallet(), _issue_params(), False)
    assert chain.writes == []