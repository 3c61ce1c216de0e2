"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import TYPE_CHECKING, Optional

from vaultkeeper.application.model.glacier import NotificationEvent
from vaultkeeper.application.session import Session
from vaultkeeper.application.util.exceptions import RemoteServiceError, remote_call
from vaultkeeper.application.util.validation import (
    validate_event_selector,
    validate_topic_arn,
)

if TYPE_CHECKING:
    from mypy_boto3_glacier.type_defs import VaultNotificationConfigTypeDef
else:
    VaultNotificationConfigTypeDef = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)

NOT_FOUND_CODE = "ResourceNotFoundException"


def get_notification(
    session: Session, vault_name: str
) -> Optional[VaultNotificationConfigTypeDef]:
    """
    Returns the vault's notification configuration, or None when the vault has
    no notifications configured.

    :raises RemoteServiceError: For any other service failure, including a
        missing vault.
    """
    try:
        with remote_call("get_vault_notifications"):
            response = session.glacier.get_vault_notifications(
                accountId=session.account_id, vaultName=vault_name
            )
    except RemoteServiceError as e:
        if e.code == NOT_FOUND_CODE and "notification" in e.message.lower():
            logger.info(f"No notifications are configured for vault {vault_name}")
            return None
        raise
    return response["vaultNotificationConfig"]


def set_notification(
    session: Session, vault_name: str, topic_arn: str, event_selector: str
) -> Optional[VaultNotificationConfigTypeDef]:
    validate_topic_arn(topic_arn)
    validate_event_selector(event_selector)
    events = NotificationEvent.expand(event_selector)
    logger.info(f"Setting notifications on {vault_name} to {topic_arn} for {events}")
    with remote_call("set_vault_notifications"):
        session.glacier.set_vault_notifications(
            accountId=session.account_id,
            vaultName=vault_name,
            vaultNotificationConfig={"SNSTopic": topic_arn, "Events": events},
        )
    return get_notification(session, vault_name)


def remove_notification(session: Session, vault_name: str) -> None:
    logger.info(f"Removing notifications from {vault_name}")
    with remote_call("delete_vault_notifications"):
        session.glacier.delete_vault_notifications(
            accountId=session.account_id, vaultName=vault_name
        )
