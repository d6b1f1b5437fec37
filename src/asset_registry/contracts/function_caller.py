"""Contract caller backed by an async function.

`CallableContractCaller` adapts any coroutine function shaped like
`callReadOnlyFunction(options)` into an `AbstractContractCaller`. The function
receives the camelCase options mapping and resolves to the response envelope,
either as a mapping or as a `ContractResponse`.
"""

from collections.abc import Awaitable, Callable
from typing import Any

import pydantic

from asset_registry.exceptions import ContractCallError, ContractResponseError, CoreError
from asset_registry.models.contract import ContractResponse, ReadOnlyCallOptions
from asset_registry.observability.logging import get_logger

from .base import AbstractContractCaller

ContractCallFunction = Callable[[dict[str, Any]], Awaitable[Any]]

logger = get_logger(__name__)


class CallableContractCaller(AbstractContractCaller):
    """Performs read-only calls through an injected async function."""

    def __init__(self, call_function: ContractCallFunction, *, name: str = "callable") -> None:
        self._call_function = call_function
        self._name = name
        self._closed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_closed(self) -> bool:
        return self._closed

    async def call_read_only(self, options: ReadOnlyCallOptions) -> ContractResponse:
        if self._closed:
            raise ContractCallError(
                "Contract caller is closed",
                contract_name=options.contract_name,
                function_name=options.function_name,
            )

        try:
            raw = await self._call_function(options.to_payload())
        except CoreError:
            raise
        except Exception as e:
            logger.opt(exception=e).error(
                "Contract call {}.{} failed", options.contract_name, options.function_name
            )
            raise ContractCallError(
                f"Contract call failed: {e}",
                contract_name=options.contract_name,
                function_name=options.function_name,
                details={"cause": type(e).__name__},
            ) from e

        return self._parse_response(raw, options)

    def _parse_response(self, raw: Any, options: ReadOnlyCallOptions) -> ContractResponse:
        if isinstance(raw, ContractResponse):
            return raw

        try:
            return ContractResponse.model_validate(raw)
        except pydantic.ValidationError as e:
            raise ContractResponseError(
                "Malformed contract response",
                contract_name=options.contract_name,
                function_name=options.function_name,
                details={"errors": e.errors(include_url=False, include_input=False)},
            ) from e

    async def close(self) -> None:
        self._closed = True
