"""Asset-registration contract client."""

from .client import (
    GET_ASSET,
    REGISTER_ASSET,
    UPDATE_ASSET_STATUS,
    AssetRegistrationClient,
    create_client,
)

__all__ = [
    "AssetRegistrationClient",
    "create_client",
    "REGISTER_ASSET",
    "GET_ASSET",
    "UPDATE_ASSET_STATUS",
]
