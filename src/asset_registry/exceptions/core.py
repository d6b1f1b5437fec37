"""Exception definitions for asset_registry.

`CoreError` is the root of every error raised by this package. It carries a
human-readable message, a machine-friendly error code, a details mapping, and
the trace ID that was active when the error was created.

Contract failures are split three ways: the call itself could not be made
(`ContractCallError`), the call returned something that is not a contract
response (`ContractResponseError`), or the contract answered with a non-ok
result (`ContractRejectedError` and its per-operation subclasses).
"""

from typing import Any

from asset_registry.observability.trace_id import NO_TRACE, get_formatted_trace_id


class CoreError(Exception):
    """Base exception for all asset_registry errors.

    Attributes:
        message (str): A human-readable error message.
        error_code (str): A standardized code for the error, defaulting to the class name.
        details (dict[str, Any]): Additional, context-specific error details.
        trace_id (str): The trace ID active when the error was raised.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        trace_id: str | None = None,
    ) -> None:
        """Initializes a new `CoreError`.

        Args:
            message: A human-readable description of the error.
            error_code: An optional standardized code. Defaults to the class name.
            details: Optional context-specific details about the error.
            trace_id: An optional trace ID. Captured from the current context when `None`.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = dict(details or {})

        self.trace_id = trace_id if trace_id is not None else get_formatted_trace_id()
        self.details["trace_id"] = self.trace_id

    def __str__(self) -> str:
        parts = []

        if self.trace_id and self.trace_id != NO_TRACE:
            parts.append(f"[{self.trace_id}]")

        if self.error_code != self.__class__.__name__:
            parts.append(f"[{self.error_code}]")

        parts.append(self.message)

        details_to_show = {k: v for k, v in self.details.items() if k != "trace_id"}
        if details_to_show:
            parts.append(f"Details: {details_to_show}")

        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"trace_id='{self.trace_id}', "
            f"details={self.details}"
            f")"
        )


class ConfigurationError(CoreError):
    """Raised when application or contract configuration is missing or invalid."""

    pass


class ValidationError(CoreError):
    """Raised when data validation fails."""

    pass


class DataValidationError(ValidationError):
    """Raised when a specific data field fails validation.

    Attributes:
        field_name (str | None): The name of the field that failed validation.
        field_value (Any | None): The offending value.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        field_value: Any | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.field_value = field_value
        if field_name:
            self.details["field_name"] = field_name
        if field_value is not None:
            self.details["field_value"] = str(field_value)


class ContractError(CoreError):
    """Base exception for errors while talking to a smart contract.

    Attributes:
        contract_name (str | None): The contract that was called.
        function_name (str | None): The contract function that was called.
    """

    def __init__(
        self,
        message: str,
        *,
        contract_name: str | None = None,
        function_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.contract_name = contract_name
        self.function_name = function_name
        if contract_name:
            self.details["contract_name"] = contract_name
        if function_name:
            self.details["function_name"] = function_name


class ContractCallError(ContractError):
    """Raised when a contract call could not be performed at all."""

    pass


class ContractResponseError(ContractError):
    """Raised when a contract call returns data that is not a valid response."""

    pass


class ContractRejectedError(ContractError):
    """Raised when the contract answers with a non-ok result.

    Attributes:
        error_value (Any): The value carried by the non-ok result.
        result_type (str | None): The discriminant of the rejected result.
    """

    def __init__(
        self,
        message: str,
        *,
        error_value: Any = None,
        result_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.error_value = error_value
        self.result_type = result_type
        if error_value is not None:
            self.details["error_value"] = error_value
        if result_type is not None:
            self.details["result_type"] = result_type


class AssetRegistrationError(ContractRejectedError):
    """Raised when `register-asset` does not return an ok result."""

    pass


class AssetLookupError(ContractRejectedError):
    """Raised when `get-asset` does not return an ok result."""

    pass


class AssetStatusUpdateError(ContractRejectedError):
    """Raised when `update-asset-status` does not return an ok result."""

    pass
