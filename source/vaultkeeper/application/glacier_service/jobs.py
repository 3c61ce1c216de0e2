"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import TYPE_CHECKING, Iterator, Optional

from vaultkeeper.application.glacier_service.notifications import get_notification
from vaultkeeper.application.model.glacier import JobDescriptor, JobSpec, StatusCode
from vaultkeeper.application.session import Session
from vaultkeeper.application.util.exceptions import ConfigurationError, remote_call
from vaultkeeper.application.util.pagination import paginate
from vaultkeeper.application.util.validation import (
    normalize_status_code,
    validate_job_spec,
    validate_topic_arn,
)

if TYPE_CHECKING:
    from mypy_boto3_glacier.type_defs import GlacierJobDescriptionResponseTypeDef
else:
    GlacierJobDescriptionResponseTypeDef = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def resolve_topic_arn(
    session: Session, vault_name: str, topic_arn: Optional[str] = None
) -> str:
    if topic_arn is not None:
        return validate_topic_arn(topic_arn)
    config = get_notification(session, vault_name)
    if not config or not config.get("SNSTopic"):
        raise ConfigurationError(
            f"No delivery target: pass a topic ARN or configure notifications on vault {vault_name}"
        )
    logger.info(f"Using topic {config['SNSTopic']} from vault {vault_name}")
    return config["SNSTopic"]


def initiate_job(
    session: Session,
    vault_name: str,
    job_spec: JobSpec,
    topic_arn: Optional[str] = None,
) -> JobDescriptor:
    """
    Starts an archive or inventory retrieval job.

    When topic_arn is omitted, the topic of the vault's notification
    configuration receives the completion notice.

    :raises ValidationError: If topic_arn is not a topic ARN, or the job
        tier or inventory format is unknown.
    :raises ConfigurationError: If no topic was passed and the vault has none.
    """
    validate_job_spec(job_spec)
    sns_topic = resolve_topic_arn(session, vault_name, topic_arn)
    logger.info(f"Initiating {job_spec.job_type} job on vault {vault_name}")
    with remote_call("initiate_job"):
        response = session.glacier.initiate_job(
            accountId=session.account_id,
            vaultName=vault_name,
            jobParameters=job_spec.job_parameters(sns_topic),
        )
    logger.info(f"Retrieval Job ID: {response['jobId']}")
    return {
        "JobId": response["jobId"],
        "Location": response.get("location", ""),
        "StatusCode": StatusCode.IN_PROGRESS,
    }


def describe_job(
    session: Session, vault_name: str, job_id: str
) -> GlacierJobDescriptionResponseTypeDef:
    logger.info(f"Retrieving status for vault: {vault_name} and job {job_id}")
    with remote_call("describe_job"):
        response = session.glacier.describe_job(
            accountId=session.account_id, vaultName=vault_name, jobId=job_id
        )
    response.pop("ResponseMetadata", None)  # type: ignore
    logger.info(
        f"Job status: {response.get('Action')}, code status: {response.get('StatusCode')}"
    )
    return response


def list_jobs(
    session: Session,
    vault_name: str,
    status: Optional[str] = None,
    completed: Optional[bool] = None,
    limit: Optional[int] = None,
) -> Iterator[GlacierJobDescriptionResponseTypeDef]:
    """
    Lazily lists the vault's jobs, following the listing marker.

    :param status: Only jobs with this status code (InProgress, Succeeded or
        Failed, any case).
    :param completed: Only terminal jobs when True, only running jobs when False.
    :param limit: Maximum number of jobs returned per page.
    """
    statuscode = None if status is None else normalize_status_code(status)
    logger.info(f"Listing jobs of vault {vault_name}")
    jobs = paginate(
        session.glacier.list_jobs,
        "JobList",
        "Marker",
        "marker",
        accountId=session.account_id,
        vaultName=vault_name,
        statuscode=statuscode,
        completed=None if completed is None else str(completed).lower(),
        limit=None if limit is None else str(limit),
    )
    return _notice_when_empty(jobs, vault_name)


def _notice_when_empty(
    jobs: Iterator[GlacierJobDescriptionResponseTypeDef], vault_name: str
) -> Iterator[GlacierJobDescriptionResponseTypeDef]:
    empty = True
    for job in jobs:
        empty = False
        yield job
    if empty:
        logger.info(f"No jobs found for vault {vault_name}")
