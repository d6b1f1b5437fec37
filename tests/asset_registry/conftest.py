"""Test configuration and fixtures for asset_registry tests."""

from collections.abc import Generator
from typing import Any
from unittest.mock import AsyncMock

import pytest
from loguru import logger

from asset_registry.config import ContractSettings
from asset_registry.contracts import CallableContractCaller
from asset_registry.observability.trace_id import clear_trace_id
from asset_registry.registry import AssetRegistrationClient

MOCK_TX_SENDER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
SAMPLE_METADATA = '{"amount":"10.5","acquisition_date":"2023-01-15"}'


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast, isolated unit tests")


@pytest.fixture(autouse=True)
def reset_trace_id() -> Generator[None, None, None]:
    """Keeps trace IDs from leaking between tests."""
    clear_trace_id()
    yield
    clear_trace_id()


@pytest.fixture
def log_messages() -> Generator[list[Any], None, None]:
    """Collects Loguru messages emitted during a test."""
    messages: list[Any] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def contract_settings() -> ContractSettings:
    return ContractSettings(
        contract_address=MOCK_TX_SENDER,
        contract_name="asset-registration",
        sender_address=MOCK_TX_SENDER,
    )


@pytest.fixture
def mock_contract_call() -> AsyncMock:
    """Stands in for the read-only contract call function."""
    return AsyncMock()


@pytest.fixture
def client(mock_contract_call: AsyncMock, contract_settings: ContractSettings) -> AssetRegistrationClient:
    return AssetRegistrationClient(CallableContractCaller(mock_contract_call), contract_settings)


@pytest.fixture
def mock_asset() -> dict[str, Any]:
    """An asset record as the contract returns it."""
    return {
        "name": "Bitcoin Holdings",
        "asset-type": "cryptocurrency",
        "registration-date": 1642204800,
        "owner": MOCK_TX_SENDER,
        "metadata": SAMPLE_METADATA,
        "status": "active",
    }
