"""Configuration package for asset_registry.

- base: core application settings
- contract: where the asset-registration contract lives and who calls it
- observability: logging and metrics settings
- settings: unified settings combining the sections above
"""

from .base import BaseCoreSettings
from .contract import ContractSettings
from .observability import BaseObservabilityConfig
from .settings import RegistrySettings

__all__ = ["BaseCoreSettings", "ContractSettings", "BaseObservabilityConfig", "RegistrySettings"]
