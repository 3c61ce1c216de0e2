"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import os
import logging
import typing

from vaultkeeper.application.hashing.tree_hash import TreeHash
from vaultkeeper.application.model.outcome import Outcome
from vaultkeeper.application.model.progress import PercentageTracker, ProgressCallback
from vaultkeeper.application.session import Session
from vaultkeeper.application.util.exceptions import (
    InvalidPathError,
    LocalFileError,
    NotAFileError,
    VaultkeeperError,
    remote_call,
)
from vaultkeeper.application.util.validation import validate_part_size

if typing.TYPE_CHECKING:
    from mypy_boto3_glacier.client import GlacierClient
    from mypy_boto3_glacier.type_defs import ArchiveCreationOutputTypeDef
else:
    GlacierClient = object
    ArchiveCreationOutputTypeDef = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)


class ArchiveUploadManager:
    """
    Uploads a local file as one archive: a single upload_archive call when
    the file fits in one part, a multipart upload otherwise.
    """

    def __init__(
        self,
        glacier_client: GlacierClient,
        vault_name: str,
        account_id: str = "-",
        part_size: int = 2**23,
    ) -> None:
        self.glacier = glacier_client
        self.vault_name = vault_name
        self.account_id = account_id
        self.part_size = validate_part_size(part_size)

    def upload(
        self,
        path: str,
        description: str,
        progress: typing.Optional[ProgressCallback] = None,
    ) -> ArchiveCreationOutputTypeDef:
        size = os.path.getsize(path)
        tracker = PercentageTracker(
            size, progress, suppress_final=True, suppress_repeats=True
        )
        if size <= self.part_size:
            return self._upload_single(path, description, tracker)
        return self._upload_multipart(path, description, size, tracker)

    def _upload_single(
        self, path: str, description: str, tracker: PercentageTracker
    ) -> ArchiveCreationOutputTypeDef:
        with open(path, "rb") as f:
            body = f.read()
        tree_hash = TreeHash()
        tree_hash.update(body)
        with remote_call("upload_archive"):
            response = self.glacier.upload_archive(
                accountId=self.account_id,
                vaultName=self.vault_name,
                archiveDescription=description,
                checksum=tree_hash.hexdigest(),
                body=body,
            )
        tracker.update(len(body))
        return response

    def _upload_multipart(
        self,
        path: str,
        description: str,
        size: int,
        tracker: PercentageTracker,
    ) -> ArchiveCreationOutputTypeDef:
        with remote_call("initiate_multipart_upload"):
            upload_id = self.glacier.initiate_multipart_upload(
                accountId=self.account_id,
                vaultName=self.vault_name,
                archiveDescription=description,
                partSize=str(self.part_size),
            )["uploadId"]
        logger.info(f"Initiated multipart upload {upload_id} for {path}")
        try:
            archive_hash = TreeHash()
            with open(path, "rb") as f:
                start_byte = 0
                while chunk := f.read(self.part_size):
                    self.upload_part(upload_id, chunk, start_byte)
                    archive_hash.update(chunk)
                    start_byte += len(chunk)
                    tracker.update(len(chunk))
            with remote_call("complete_multipart_upload"):
                return self.glacier.complete_multipart_upload(
                    accountId=self.account_id,
                    vaultName=self.vault_name,
                    uploadId=upload_id,
                    archiveSize=str(size),
                    checksum=archive_hash.hexdigest(),
                )
        except Exception:
            logger.error(f"Aborting multipart upload {upload_id}")
            with remote_call("abort_multipart_upload"):
                self.glacier.abort_multipart_upload(
                    accountId=self.account_id,
                    vaultName=self.vault_name,
                    uploadId=upload_id,
                )
            raise

    def upload_part(self, upload_id: str, chunk: bytes, start_byte: int) -> str:
        part_hash = TreeHash()
        part_hash.update(chunk)
        end_byte = start_byte + len(chunk) - 1
        with remote_call("upload_multipart_part"):
            response = self.glacier.upload_multipart_part(
                accountId=self.account_id,
                vaultName=self.vault_name,
                uploadId=upload_id,
                range=f"bytes {start_byte}-{end_byte}/*",
                checksum=part_hash.hexdigest(),
                body=chunk,
            )
        return response["checksum"]


def upload_archive(
    session: Session,
    vault_name: str,
    local_path: str,
    progress: typing.Optional[ProgressCallback] = None,
    part_size: typing.Optional[int] = None,
) -> typing.Optional[ArchiveCreationOutputTypeDef]:
    """
    Uploads a local file to a vault. The archive description is the file's
    base name.

    A directory is reported and skipped, returning None, so that a batch of
    paths can carry on with the next one.

    :raises InvalidPathError: If local_path does not exist.
    :raises LocalFileError: If local_path cannot be read.
    """
    if not os.path.exists(local_path):
        raise InvalidPathError(local_path)
    if os.path.isdir(local_path):
        logger.warning(NotAFileError(local_path).message)
        return None

    manager = ArchiveUploadManager(
        session.glacier,
        vault_name,
        session.account_id,
        part_size or session.config.part_size,
    )
    description = os.path.basename(local_path)
    logger.info(f"Uploading {local_path} to vault {vault_name}")
    try:
        response = manager.upload(local_path, description, progress)
    except OSError as e:
        logger.error(f"Reading {local_path} failed: {e}")
        raise LocalFileError(local_path, str(e)) from e
    response.pop("ResponseMetadata", None)  # type: ignore
    logger.info(f"Archive uploaded with id {response['archiveId']}")
    return response


def upload_archives(
    session: Session,
    vault_name: str,
    local_paths: typing.Iterable[str],
    progress: typing.Optional[ProgressCallback] = None,
) -> typing.List[Outcome]:
    outcomes = []
    for path in local_paths:
        try:
            response = upload_archive(session, vault_name, path, progress)
        except VaultkeeperError as e:
            logger.error(f"Could not upload {path}: {e.message}")
            outcomes.append(Outcome.failure(path, e))
            continue
        if response is None:
            outcomes.append(Outcome.failure(path, NotAFileError(path)))
        else:
            outcomes.append(Outcome.success(path, response["archiveId"]))
    return outcomes
