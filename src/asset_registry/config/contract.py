"""Smart contract configuration settings."""

import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DEPLOYER_ADDRESS = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
"""Testnet deployer principal the asset-registration contract is published under by default."""

DEFAULT_CONTRACT_NAME = "asset-registration"

# Stacks principals: "S", a network/version letter, then c32 characters (no I, L, O, U)
PRINCIPAL_PATTERN = re.compile(r"^S[PMTN][0-9A-HJKMNP-TV-Z]{26,39}$")
CONTRACT_NAME_PATTERN = re.compile(r"^[a-zA-Z]([a-zA-Z0-9]|[-_])*$")
MAX_CONTRACT_NAME_LENGTH = 128


class ContractSettings(BaseSettings):
    """Location of the asset-registration contract and the identity used to call it.

    Environment variables use the `ASSET_REGISTRY_` prefix, for example
    `ASSET_REGISTRY_CONTRACT_ADDRESS`.

    Attributes:
        contract_address (str): Principal that deployed the contract.
        contract_name (str): Name of the deployed contract.
        sender_address (str): Principal the read-only calls are made on behalf of.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASSET_REGISTRY_",
        str_strip_whitespace=True,
        case_sensitive=False,
        extra="ignore",
    )

    contract_address: str = Field(default=DEFAULT_DEPLOYER_ADDRESS, description="Contract deployer principal")
    contract_name: str = Field(default=DEFAULT_CONTRACT_NAME, description="Deployed contract name")
    sender_address: str = Field(default=DEFAULT_DEPLOYER_ADDRESS, description="Principal sending read-only calls")

    @field_validator("contract_address", "sender_address")
    @classmethod
    def validate_principal(cls, v: str) -> str:
        """Validates that the value looks like a standard Stacks principal.

        Raises:
            ValueError: If the value is not a standard principal.
        """
        v = v.upper()
        if not PRINCIPAL_PATTERN.match(v):
            raise ValueError(f"'{v}' is not a valid Stacks principal")
        return v

    @field_validator("contract_name")
    @classmethod
    def validate_contract_name(cls, v: str) -> str:
        """Validates the contract name against the Clarity naming rules.

        Raises:
            ValueError: If the name is empty, too long, or contains invalid characters.
        """
        if len(v) > MAX_CONTRACT_NAME_LENGTH:
            raise ValueError(f"contract_name must be at most {MAX_CONTRACT_NAME_LENGTH} characters")
        if not CONTRACT_NAME_PATTERN.match(v):
            raise ValueError(f"'{v}' is not a valid contract name")
        return v

    @property
    def contract_id(self) -> str:
        """Fully qualified contract identifier, `<address>.<name>`."""
        return f"{self.contract_address}.{self.contract_name}"
