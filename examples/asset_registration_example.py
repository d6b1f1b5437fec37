#!/usr/bin/env python3
"""
Example walking through the asset-registration client.

An in-process stand-in for the contract call function answers the three
read-only functions, so the example runs without a node:
- Registering an asset
- Fetching it back
- Updating its status
- Handling a rejected call
"""

import asyncio
from typing import Any

from asset_registry import AssetRegistrationError, AssetStatus, create_client
from asset_registry.config import RegistrySettings
from asset_registry.observability import TraceContext, get_logger

logger = get_logger(__name__, component="example")


async def fake_call_read_only_function(options: dict[str, Any]) -> dict[str, Any]:
    """Answers like a deployed asset-registration contract would."""
    function_name = options["functionName"]
    args = options["functionArgs"]

    if function_name == "register-asset":
        if not args[0]:
            return {"value": {"type": "error", "value": 100}}
        return {"value": {"type": "ok", "value": "ASSET-1"}}

    if function_name == "get-asset":
        return {
            "value": {
                "type": "ok",
                "value": {
                    "name": "Bitcoin Holdings",
                    "asset-type": "cryptocurrency",
                    "registration-date": 1642204800,
                    "owner": options["senderAddress"],
                    "metadata": '{"amount":"10.5","acquisition_date":"2023-01-15"}',
                    "status": "active",
                },
            }
        }

    if function_name == "update-asset-status":
        return {"value": {"type": "ok", "value": True}}

    return {"value": {"type": "error", "value": "unknown function"}}


async def main() -> None:
    settings = RegistrySettings()
    settings.configure_logging()

    client = create_client(fake_call_read_only_function, settings.contract, metrics=settings.build_metrics())

    async with client:
        with TraceContext() as trace_id:
            logger.info(f"Registering asset under trace {trace_id}")
            asset_id = await client.register_asset(
                "Bitcoin Holdings", "cryptocurrency", {"amount": "10.5", "acquisition_date": "2023-01-15"}
            )

            asset = await client.get_asset(asset_id)
            logger.info(f"Fetched {asset_id}: {asset.name} ({asset.status}), metadata={asset.metadata_json()}")

            updated = await client.update_asset_status(asset_id, AssetStatus.INACTIVE)
            logger.info(f"Status update accepted: {updated}")

        try:
            await client.register_asset("", "cryptocurrency", "{}")
        except AssetRegistrationError as e:
            logger.warning(f"Registration rejected with contract error {e.error_value}")


if __name__ == "__main__":
    asyncio.run(main())
