"""Asset registry exceptions package.

All exceptions inherit from CoreError which provides structured error handling
with error codes, messages, details, and trace IDs.
"""

from .core import (
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

__all__ = [
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
