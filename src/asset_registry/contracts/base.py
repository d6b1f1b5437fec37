"""Abstract contract caller interface.

A contract caller performs read-only calls against a deployed smart contract
and returns the raw discriminated response. It knows nothing about what the
called functions mean; interpreting results is left to the registry client.
"""

from abc import ABC, abstractmethod
from typing import Any

from asset_registry.models.contract import ContractResponse, ReadOnlyCallOptions


class AbstractContractCaller(ABC):
    """Abstract interface for performing read-only contract calls."""

    @property
    @abstractmethod
    def name(self) -> str:
        """A short name identifying the caller implementation."""
        pass

    @abstractmethod
    async def call_read_only(self, options: ReadOnlyCallOptions) -> ContractResponse:
        """Calls a read-only contract function.

        Args:
            options: Contract location, function name, ordered arguments and sender.

        Returns:
            The `ContractResponse` envelope, whether the result is ok or not.

        Raises:
            ContractCallError: If the call could not be performed.
            ContractResponseError: If the call returned something that is not a contract response.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Releases any resources held by the caller."""
        pass

    @property
    @abstractmethod
    def is_closed(self) -> bool:
        pass

    async def __aenter__(self) -> "AbstractContractCaller":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
