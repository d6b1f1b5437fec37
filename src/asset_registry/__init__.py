"""Asset Registry - async client for the asset-registration smart contract."""

from . import config, contracts, models, observability, registry

from .exceptions import (
    AssetLookupError,
    AssetRegistrationError,
    AssetStatusUpdateError,
    ConfigurationError,
    ContractCallError,
    ContractError,
    ContractRejectedError,
    ContractResponseError,
    CoreError,
    DataValidationError,
    ValidationError,
)
from .models import Asset, AssetStatus
from .registry import AssetRegistrationClient, create_client

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Modules
    "config",
    "contracts",
    "models",
    "observability",
    "registry",
    # Client
    "AssetRegistrationClient",
    "create_client",
    "Asset",
    "AssetStatus",
    # Exceptions
    "CoreError",
    "ConfigurationError",
    "ValidationError",
    "DataValidationError",
    "ContractError",
    "ContractCallError",
    "ContractResponseError",
    "ContractRejectedError",
    "AssetRegistrationError",
    "AssetLookupError",
    "AssetStatusUpdateError",
]
