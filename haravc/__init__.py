"""Clients for verifiable-credential NFT, factory and storage contracts."""

__version__ = "0.1.0"

__all__ = [
    "common",
    "nft_types",
    "factory_types",
    "storage_types",
    "contract",
    "nftbase",
    "vcfactory",
    "vcstorage",
]