"""Data models for the asset registry client."""

from .asset import Asset, AssetStatus, encode_metadata
from .contract import ContractResponse, ContractResult, ReadOnlyCallOptions

__all__ = [
    "Asset",
    "AssetStatus",
    "encode_metadata",
    "ReadOnlyCallOptions",
    "ContractResult",
    "ContractResponse",
]
