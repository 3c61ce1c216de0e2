"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import TYPE_CHECKING, Any, Dict

from botocore.exceptions import ClientError

if TYPE_CHECKING:
    from mypy_boto3_glacier.client import GlacierClient
    from mypy_boto3_glacier.type_defs import VaultNotificationConfigTypeDef
else:
    GlacierClient = object
    VaultNotificationConfigTypeDef = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)


class MockGlacierAPIs:
    """
    Glacier client stand-in that keeps vault notification configurations in
    memory and forwards every other call to the wrapped client.
    """

    def __init__(self, glacier_client: GlacierClient) -> None:
        self.glacier_client = glacier_client
        self.notifications: Dict[str, VaultNotificationConfigTypeDef] = {}

    def __getattr__(self, name: str) -> Any:
        return getattr(self.glacier_client, name)

    def get_vault_notifications(
        self, *, vaultName: str, accountId: str = "-"
    ) -> Dict[str, Any]:
        self.glacier_client.describe_vault(vaultName=vaultName, accountId=accountId)
        if vaultName not in self.notifications:
            raise _not_found("GetVaultNotifications", vaultName)
        return {"vaultNotificationConfig": self.notifications[vaultName]}

    def set_vault_notifications(
        self,
        *,
        vaultName: str,
        accountId: str = "-",
        vaultNotificationConfig: VaultNotificationConfigTypeDef,
    ) -> Dict[str, Any]:
        self.glacier_client.describe_vault(vaultName=vaultName, accountId=accountId)
        self.notifications[vaultName] = {
            "SNSTopic": vaultNotificationConfig["SNSTopic"],
            "Events": list(vaultNotificationConfig["Events"]),
        }
        logger.info(f"Mock notification configuration set for {vaultName}")
        return {}

    def delete_vault_notifications(
        self, *, vaultName: str, accountId: str = "-"
    ) -> Dict[str, Any]:
        self.glacier_client.describe_vault(vaultName=vaultName, accountId=accountId)
        self.notifications.pop(vaultName, None)
        return {}


def _not_found(operation: str, vault_name: str) -> ClientError:
    return ClientError(
        {
            "Error": {
                "Code": "ResourceNotFoundException",
                "Message": f"No notification configuration is set for vault: {vault_name}",
            }
        },
        operation,
    )
