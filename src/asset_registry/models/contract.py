"""Contract call request and response models.

`ReadOnlyCallOptions` describes one read-only call. `ContractResponse` is the
envelope a call resolves to: `{"value": {"type": "ok" | "error", "value": ...}}`.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

OK = "ok"
ERROR = "error"


class ReadOnlyCallOptions(BaseModel):
    """Arguments of a read-only contract call.

    Attributes:
        contract_address (str): Principal that deployed the contract.
        contract_name (str): Name of the contract.
        function_name (str): Contract function to call.
        function_args (list[Any]): Positional function arguments, in order.
        sender_address (str): Principal the call is made on behalf of.
    """

    model_config = ConfigDict(frozen=True)

    contract_address: str
    contract_name: str
    function_name: str
    function_args: list[Any] = Field(default_factory=list)
    sender_address: str

    def to_payload(self) -> dict[str, Any]:
        """Returns the camelCase mapping handed to the contract call function."""
        return {
            "contractAddress": self.contract_address,
            "contractName": self.contract_name,
            "functionName": self.function_name,
            "functionArgs": list(self.function_args),
            "senderAddress": self.sender_address,
        }


class ContractResult(BaseModel):
    """Discriminated result of a contract function.

    Only `type == "ok"` counts as success; any other discriminant is a failure.
    """

    type: str
    value: Any = None

    @property
    def is_ok(self) -> bool:
        return self.type == OK


class ContractResponse(BaseModel):
    """Envelope returned by a read-only contract call."""

    model_config = ConfigDict(extra="ignore")

    value: ContractResult

    @classmethod
    def ok(cls, value: Any) -> "ContractResponse":
        return cls(value=ContractResult(type=OK, value=value))

    @classmethod
    def error(cls, value: Any) -> "ContractResponse":
        return cls(value=ContractResult(type=ERROR, value=value))
