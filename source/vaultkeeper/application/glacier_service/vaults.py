"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import TYPE_CHECKING, Iterator, Optional

from vaultkeeper.application.session import Session
from vaultkeeper.application.util.exceptions import remote_call
from vaultkeeper.application.util.pagination import paginate
from vaultkeeper.application.util.validation import validate_vault_name

if TYPE_CHECKING:
    from mypy_boto3_glacier.type_defs import DescribeVaultOutputTypeDef
else:
    DescribeVaultOutputTypeDef = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def describe_vault(session: Session, name: str) -> DescribeVaultOutputTypeDef:
    logger.info(f"Describing vault: {name}")
    with remote_call("describe_vault"):
        response = session.glacier.describe_vault(
            accountId=session.account_id, vaultName=name
        )
    response.pop("ResponseMetadata", None)  # type: ignore
    return response


def list_vaults(
    session: Session, limit: Optional[int] = None
) -> Iterator[DescribeVaultOutputTypeDef]:
    """
    Lazily lists every vault of the account, following the listing marker.

    :param limit: Maximum number of vaults returned per page.
    """
    logger.info("Listing vaults")
    return paginate(
        session.glacier.list_vaults,
        "VaultList",
        "Marker",
        "marker",
        accountId=session.account_id,
        limit=None if limit is None else str(limit),
    )


def create_vault(session: Session, name: str) -> str:
    validate_vault_name(name)
    logger.info(f"Creating vault: {name}")
    with remote_call("create_vault"):
        response = session.glacier.create_vault(
            accountId=session.account_id, vaultName=name
        )
    location = response.get("location", "")
    logger.info(f"Vault {name} created at {location}")
    return location


def delete_vault(session: Session, name: str) -> None:
    logger.info(f"Deleting vault: {name}")
    with remote_call("delete_vault"):
        session.glacier.delete_vault(accountId=session.account_id, vaultName=name)
    logger.info(f"Vault {name} deleted")
