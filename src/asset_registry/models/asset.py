"""Asset model definition.

This module defines the `Asset` record stored by the asset-registration
contract and the `AssetStatus` values the contract commonly uses. The contract
speaks kebab-case keys (`asset-type`, `registration-date`); the model exposes
them as snake_case attributes and dumps them back under their wire names.
"""

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from asset_registry.exceptions import DataValidationError


class AssetStatus(str, Enum):
    """Well-known asset status values.

    Attributes:
        ACTIVE (str): The asset is in use.
        INACTIVE (str): The asset has been retired or suspended.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"


class Asset(BaseModel):
    """A registered asset as returned by `get-asset`.

    Attributes:
        name (str): Human-readable asset name.
        asset_type (str): Asset category, e.g. "cryptocurrency".
        registration_date (int): Unix timestamp (seconds) of registration.
        owner (str): Principal that owns the asset.
        metadata (str): Opaque metadata, usually a JSON document.
        status (str): Current status, e.g. "active".
    """

    # Unknown contract fields are kept and no value is coerced, so a dump by
    # alias reproduces the record the contract returned.
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra="allow",
        strict=True,
    )

    name: str = Field(..., description="Asset name")
    asset_type: str = Field(..., alias="asset-type", description="Asset type")
    registration_date: int = Field(..., alias="registration-date", ge=0, description="Registration timestamp")
    owner: str = Field(..., description="Owner principal")
    metadata: str = Field(..., description="Opaque metadata text")
    status: str = Field(..., min_length=1, description="Asset status")

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v: Any) -> Any:
        if isinstance(v, AssetStatus):
            return v.value
        return v

    @property
    def is_active(self) -> bool:
        return self.status == AssetStatus.ACTIVE.value

    def metadata_json(self) -> Any:
        """Decodes `metadata` as JSON.

        Returns:
            The decoded JSON value.

        Raises:
            DataValidationError: If `metadata` is not valid JSON.
        """
        try:
            return json.loads(self.metadata)
        except json.JSONDecodeError as e:
            raise DataValidationError(
                f"Asset metadata is not valid JSON: {e.msg}",
                field_name="metadata",
                field_value=self.metadata,
            ) from e

    def to_contract_dict(self) -> dict[str, Any]:
        """Returns the asset as the contract represents it, with kebab-case keys."""
        return self.model_dump(by_alias=True)


def encode_metadata(metadata: str | Mapping[str, Any]) -> str:
    """Encodes asset metadata for a contract call.

    Strings are passed through unchanged. Mappings are serialized as compact
    JSON, keeping key order, e.g. `{"amount":"10.5"}`.

    Raises:
        DataValidationError: If the mapping cannot be serialized as JSON.
    """
    if isinstance(metadata, str):
        return metadata

    try:
        return json.dumps(dict(metadata), separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise DataValidationError(
            f"Asset metadata cannot be encoded as JSON: {e}",
            field_name="metadata",
        ) from e
