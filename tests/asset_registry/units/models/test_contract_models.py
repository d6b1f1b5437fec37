"""Unit tests for contract call models."""

import pytest
from pydantic import ValidationError

from asset_registry.models import ContractResponse, ContractResult, ReadOnlyCallOptions

SENDER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"


@pytest.mark.unit
class TestReadOnlyCallOptions:
    """Test cases for ReadOnlyCallOptions."""

    def test_to_payload(self) -> None:
        options = ReadOnlyCallOptions(
            contract_address=SENDER,
            contract_name="asset-registration",
            function_name="update-asset-status",
            function_args=["ASSET-1", "inactive"],
            sender_address=SENDER,
        )

        assert options.to_payload() == {
            "contractAddress": SENDER,
            "contractName": "asset-registration",
            "functionName": "update-asset-status",
            "functionArgs": ["ASSET-1", "inactive"],
            "senderAddress": SENDER,
        }

    def test_payload_args_are_a_copy(self) -> None:
        options = ReadOnlyCallOptions(
            contract_address=SENDER,
            contract_name="asset-registration",
            function_name="get-asset",
            function_args=["ASSET-1"],
            sender_address=SENDER,
        )

        options.to_payload()["functionArgs"].append("extra")

        assert options.function_args == ["ASSET-1"]

    def test_args_default_to_empty(self) -> None:
        options = ReadOnlyCallOptions(
            contract_address=SENDER,
            contract_name="asset-registration",
            function_name="get-last-asset-id",
            sender_address=SENDER,
        )

        assert options.function_args == []


@pytest.mark.unit
class TestContractResponse:
    """Test cases for ContractResult and ContractResponse."""

    def test_ok_result(self) -> None:
        response = ContractResponse.model_validate({"value": {"type": "ok", "value": "ASSET-1"}})

        assert response.value.is_ok
        assert response.value.value == "ASSET-1"

    def test_error_result(self) -> None:
        response = ContractResponse.error(101)

        assert not response.value.is_ok
        assert response.value.type == "error"
        assert response.value.value == 101

    def test_ok_factory(self) -> None:
        assert ContractResponse.ok(True) == ContractResponse(value=ContractResult(type="ok", value=True))

    def test_value_may_be_missing(self) -> None:
        result = ContractResult(type="none")

        assert result.value is None
        assert not result.is_ok

    def test_type_is_required(self) -> None:
        with pytest.raises(ValidationError):
            ContractResponse.model_validate({"value": {"value": True}})
