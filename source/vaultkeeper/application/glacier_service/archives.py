"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import csv
import json
import logging
from typing import Iterable, Iterator, List

from vaultkeeper.application.model.outcome import Outcome
from vaultkeeper.application.session import Session
from vaultkeeper.application.util.exceptions import VaultkeeperError, remote_call

logger = logging.getLogger()
logger.setLevel(logging.INFO)

INVENTORY_CSV_HEADER = "ArchiveId"


def delete_archive(session: Session, vault_name: str, archive_id: str) -> None:
    logger.info(f"Deleting archive {archive_id} from vault {vault_name}")
    with remote_call("delete_archive"):
        session.glacier.delete_archive(
            accountId=session.account_id, vaultName=vault_name, archiveId=archive_id
        )


def delete_archives(
    session: Session, vault_name: str, archive_ids: Iterable[str]
) -> List[Outcome]:
    """
    Deletes each archive independently. A failed deletion is logged and
    recorded, and the remaining archives are still attempted.
    """
    outcomes = []
    for archive_id in archive_ids:
        try:
            delete_archive(session, vault_name, archive_id)
        except VaultkeeperError as e:
            logger.error(f"Could not delete archive {archive_id}: {e.message}")
            outcomes.append(Outcome.failure(archive_id, e))
            continue
        outcomes.append(Outcome.success(archive_id))
    failed = sum(1 for outcome in outcomes if not outcome.succeeded)
    logger.info(f"Deleted {len(outcomes) - failed} archives, {failed} failed")
    return outcomes


def archive_ids_from_inventory(lines: Iterable[str]) -> Iterator[str]:
    """
    Extracts archive ids from piped input: a CSV or JSON inventory job output,
    or plain archive ids one per line.
    """
    text = "".join(
        line if line.endswith("\n") else f"{line}\n" for line in lines
    ).strip()
    if not text:
        return
    if text.startswith("{"):
        for archive in json.loads(text).get("ArchiveList", []):
            yield archive["ArchiveId"]
    elif text.startswith(INVENTORY_CSV_HEADER):
        for row in csv.DictReader(text.splitlines()):
            if row.get(INVENTORY_CSV_HEADER):
                yield row[INVENTORY_CSV_HEADER]
    else:
        for line in text.splitlines():
            if line.strip():
                yield line.strip()
