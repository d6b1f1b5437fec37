"""Contract callers for the asset registry client."""

from .base import AbstractContractCaller
from .function_caller import CallableContractCaller, ContractCallFunction

__all__ = ["AbstractContractCaller", "CallableContractCaller", "ContractCallFunction"]
