"""Client for the asset-registration smart contract.

`AssetRegistrationClient` turns the contract's three read-only functions into
coroutines that return plain Python values. Each call forwards an ordered
argument list through an `AbstractContractCaller`, returns the value of an ok
result, and raises the operation's `ContractRejectedError` subclass otherwise.
"""

import time
from collections.abc import Mapping
from typing import Any

import pydantic

from asset_registry.config.contract import ContractSettings
from asset_registry.contracts.base import AbstractContractCaller
from asset_registry.contracts.function_caller import CallableContractCaller, ContractCallFunction
from asset_registry.exceptions import (
    AssetLookupError,
    AssetRegistrationError,
    AssetStatusUpdateError,
    ContractRejectedError,
    ContractResponseError,
    DataValidationError,
)
from asset_registry.models.asset import Asset, AssetStatus, encode_metadata
from asset_registry.models.contract import ReadOnlyCallOptions
from asset_registry.observability.logging import get_logger
from asset_registry.observability.metrics import CONTRACT_CALL_BUCKETS, PrometheusMetricsRegistry

REGISTER_ASSET = "register-asset"
GET_ASSET = "get-asset"
UPDATE_ASSET_STATUS = "update-asset-status"

logger = get_logger(__name__)


class AssetRegistrationClient:
    """Async client for the asset-registration contract.

    Example:
        caller = CallableContractCaller(call_read_only_function)
        client = AssetRegistrationClient(caller)
        asset_id = await client.register_asset("Bitcoin Holdings", "cryptocurrency", {"amount": "10.5"})
        asset = await client.get_asset(asset_id)
    """

    def __init__(
        self,
        caller: AbstractContractCaller,
        settings: ContractSettings | None = None,
        *,
        metrics: PrometheusMetricsRegistry | None = None,
    ) -> None:
        """Initializes the client.

        Args:
            caller: Performs the read-only contract calls.
            settings: Contract location and sender. Read from the environment when `None`.
            metrics: Optional registry recording call counts and durations.
        """
        self.caller = caller
        self.settings = settings if settings is not None else ContractSettings()
        self.metrics = metrics

        if metrics is not None:
            self._calls_total = metrics.counter(
                "contract_calls_total",
                "Read-only contract calls by function and outcome",
                labels=["function", "outcome"],
            )
            self._call_duration = metrics.histogram(
                "contract_call_duration_seconds",
                "Read-only contract call latency",
                labels=["function"],
                buckets=CONTRACT_CALL_BUCKETS,
            )

    async def register_asset(self, name: str, asset_type: str, metadata: str | Mapping[str, Any]) -> str:
        """Registers a new asset.

        Args:
            name: Asset name.
            asset_type: Asset category, e.g. "cryptocurrency".
            metadata: Metadata text, or a mapping that is encoded as compact JSON.

        Returns:
            The identifier the contract assigned to the asset, e.g. "ASSET-1".

        Raises:
            AssetRegistrationError: If the contract does not return an ok result.
        """
        return await self._call(
            REGISTER_ASSET,
            [name, asset_type, encode_metadata(metadata)],
            AssetRegistrationError,
            "Failed to register asset",
        )

    async def get_asset(self, asset_id: str) -> Asset:
        """Fetches an asset by identifier.

        Raises:
            AssetLookupError: If the contract does not return an ok result.
            ContractResponseError: If the returned value is not an asset record.
        """
        value = await self._call(GET_ASSET, [asset_id], AssetLookupError, "Failed to get asset")

        try:
            return Asset.model_validate(value)
        except pydantic.ValidationError as e:
            raise ContractResponseError(
                "Contract returned an invalid asset record",
                contract_name=self.settings.contract_name,
                function_name=GET_ASSET,
                details={"asset_id": asset_id, "errors": e.errors(include_url=False, include_input=False)},
            ) from e

    async def update_asset_status(self, asset_id: str, new_status: AssetStatus | str) -> bool:
        """Changes the status of an asset.

        Returns:
            The contract's boolean result.

        Raises:
            DataValidationError: If `new_status` is empty or blank.
            AssetStatusUpdateError: If the contract does not return an ok result.
        """
        status = new_status.value if isinstance(new_status, AssetStatus) else new_status
        if not status or not status.strip():
            raise DataValidationError(
                "Asset status cannot be empty",
                field_name="new_status",
                field_value=status,
            )
        return await self._call(
            UPDATE_ASSET_STATUS,
            [asset_id, status],
            AssetStatusUpdateError,
            "Failed to update asset status",
        )

    def _options(self, function_name: str, function_args: list[Any]) -> ReadOnlyCallOptions:
        return ReadOnlyCallOptions(
            contract_address=self.settings.contract_address,
            contract_name=self.settings.contract_name,
            function_name=function_name,
            function_args=function_args,
            sender_address=self.settings.sender_address,
        )

    async def _call(
        self,
        function_name: str,
        function_args: list[Any],
        error_class: type[ContractRejectedError],
        error_message: str,
    ) -> Any:
        options = self._options(function_name, function_args)
        logger.debug("Calling {}.{} with {} args", options.contract_name, function_name, len(function_args))

        start_time = time.perf_counter()
        outcome = "failed"
        try:
            response = await self.caller.call_read_only(options)
            result = response.value
            outcome = "ok" if result.is_ok else "rejected"
        finally:
            self._record(function_name, outcome, start_time)

        if not result.is_ok:
            logger.warning(
                "{}.{} returned {} result: {}", options.contract_name, function_name, result.type, result.value
            )
            raise error_class(
                error_message,
                error_value=result.value,
                result_type=result.type,
                contract_name=options.contract_name,
                function_name=function_name,
            )

        return result.value

    def _record(self, function_name: str, outcome: str, start_time: float) -> None:
        if self.metrics is None:
            return
        self._calls_total.labels(function=function_name, outcome=outcome).inc()
        self._call_duration.labels(function=function_name).observe(time.perf_counter() - start_time)

    async def close(self) -> None:
        await self.caller.close()

    async def __aenter__(self) -> "AssetRegistrationClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


def create_client(
    call_function: ContractCallFunction,
    settings: ContractSettings | None = None,
    *,
    metrics: PrometheusMetricsRegistry | None = None,
) -> AssetRegistrationClient:
    """Builds a client that performs its calls through `call_function`."""
    return AssetRegistrationClient(CallableContractCaller(call_function), settings, metrics=metrics)
