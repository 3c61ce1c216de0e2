"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import os
import logging
import tempfile
from typing import TYPE_CHECKING, BinaryIO, Iterator, Optional

from vaultkeeper.application.hashing.tree_hash import TreeHash
from vaultkeeper.application.model.progress import PercentageTracker, ProgressCallback
from vaultkeeper.application.session import Session
from vaultkeeper.application.util.exceptions import (
    AccessViolation,
    GlacierChecksumMismatch,
    LocalFileError,
    ValidationError,
    remote_call,
)

if TYPE_CHECKING:
    from mypy_boto3_glacier.client import GlacierClient
    from mypy_boto3_glacier.type_defs import GetJobOutputOutputTypeDef
else:
    GlacierClient = object
    GetJobOutputOutputTypeDef = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)

DOWNLOAD_CHUNK_SIZE = 2**16


class GlacierDownload:
    def __init__(
        self,
        glacier_client: GlacierClient,
        job_id: str,
        vault_name: str,
        account_id: str = "-",
    ) -> None:
        with remote_call("get_job_output"):
            self.response: GetJobOutputOutputTypeDef = glacier_client.get_job_output(
                accountId=account_id, jobId=job_id, vaultName=vault_name
            )
        self.accessed = False

    def iter_chunks(self, chunk_size: int = DOWNLOAD_CHUNK_SIZE) -> Iterator[bytes]:
        if self.accessed:
            raise AccessViolation()
        self.accessed = True
        yield from self.response["body"].iter_chunks(chunk_size=chunk_size)

    def content_length(self) -> Optional[int]:
        headers = self.response.get("ResponseMetadata", {}).get("HTTPHeaders", {})
        length = headers.get("content-length")
        return None if length is None else int(length)

    def checksum(self) -> Optional[str]:
        return self.response.get("checksum")

    def close(self) -> None:
        self.response["body"].close()


def _job_output_size(session: Session, vault_name: str, job_id: str) -> int:
    with remote_call("describe_job"):
        job = session.glacier.describe_job(
            accountId=session.account_id, vaultName=vault_name, jobId=job_id
        )
    return job.get("ArchiveSizeInBytes") or job.get("InventorySizeInBytes") or 0


def _copy_job_output(
    session: Session,
    vault_name: str,
    job_id: str,
    f: BinaryIO,
    progress: Optional[ProgressCallback],
    chunk_size: int,
) -> None:
    download = GlacierDownload(session.glacier, job_id, vault_name, session.account_id)
    try:
        total = download.content_length()
        if total is None:
            total = _job_output_size(session, vault_name, job_id)
        tracker = PercentageTracker(total, progress)
        glacier_hash = TreeHash()
        with remote_call("get_job_output"):
            for chunk in download.iter_chunks(chunk_size):
                f.write(chunk)
                glacier_hash.update(chunk)
                tracker.update(len(chunk))
    finally:
        download.close()
    expected = download.checksum()
    if expected is not None and glacier_hash.hexdigest() != expected:
        raise GlacierChecksumMismatch()


def download_job_output(
    session: Session,
    vault_name: str,
    job_id: str,
    destination_path: str,
    progress: Optional[ProgressCallback] = None,
    chunk_size: Optional[int] = None,
) -> str:
    """
    Streams a succeeded job's output into destination_path.

    The destination is prepared before the output is requested. The output
    is copied in fixed size chunks and the rounded percentage of bytes
    written is reported to progress after every chunk. Data lands in a
    temporary file next to the destination which is linked into place once
    the copy completes and removed if it fails.

    :return: The destination path.

    :raises ValidationError: If destination_path already exists or cannot be
        created.
    :raises GlacierChecksumMismatch: If the data does not match the tree hash
        Glacier returned for it.
    :raises RemoteServiceError: If the job output cannot be retrieved.
    :raises LocalFileError: If writing the output fails.
    """
    if os.path.exists(destination_path):
        raise ValidationError(f"Destination: {destination_path} already exists.")
    directory = os.path.dirname(os.path.abspath(destination_path))
    chunk_size = chunk_size or session.config.download_chunk_size

    try:
        fd, temporary_path = tempfile.mkstemp(
            dir=directory,
            prefix=f".{os.path.basename(destination_path)}.",
            suffix=".part",
        )
    except OSError as e:
        logger.error(f"Cannot create {destination_path}: {e}")
        raise ValidationError(
            f"Destination: {destination_path} cannot be created: {e.strerror}"
        ) from e

    try:
        with os.fdopen(fd, "wb") as f:
            _copy_job_output(session, vault_name, job_id, f, progress, chunk_size)
        # Exclusive create: a file that appeared meanwhile is never replaced.
        os.link(temporary_path, destination_path)
    except FileExistsError as e:
        os.remove(temporary_path)
        raise ValidationError(
            f"Destination: {destination_path} already exists."
        ) from e
    except OSError as e:
        logger.error(f"Writing job {job_id} output failed: {e}")
        os.remove(temporary_path)
        raise LocalFileError(destination_path, str(e)) from e
    except BaseException:
        logger.error(f"Download of job {job_id} failed, removing partial output")
        os.remove(temporary_path)
        raise
    os.remove(temporary_path)
    logger.info(f"Job {job_id} output written to {destination_path}")
    return destination_path
