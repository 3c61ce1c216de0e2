"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
import re

from vaultkeeper.application.model.glacier import (
    InventoryFormat,
    InventoryRetrieval,
    JobSpec,
    NotificationEvent,
    RetrievalTier,
    StatusCode,
)
from vaultkeeper.application.model.sns import SubscriptionProtocol
from vaultkeeper.application.util.exceptions import ValidationError

logger = logging.getLogger()

VAULT_NAME_MAX_LENGTH = 255
TOPIC_NAME_PATTERN = re.compile(
    r"^(?:[A-Za-z0-9_-]{1,256}|[A-Za-z0-9_-]{1,251}\.fifo)$"
)
TOPIC_ARN_PATTERN = re.compile(
    r"^arn:aws(-[a-z]+)*:sns:[a-z0-9-]+:\d{12}:[A-Za-z0-9_-]{1,256}(\.fifo)?$"
)
SUBSCRIPTION_ARN_PATTERN = re.compile(
    r"^arn:aws(-[a-z]+)*:sns:[a-z0-9-]+:\d{12}:[A-Za-z0-9_-]{1,256}(\.fifo)?:[A-Za-z0-9-]+$"
)
SMS_ENDPOINT_PATTERN = re.compile(r"^1\d{10}$")
EMAIL_ENDPOINT_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

MIN_PART_SIZE = 2**20
MAX_PART_SIZE = 2**32


def _reject(message: str) -> ValidationError:
    logger.warning(message)
    return ValidationError(message)


def validate_vault_name(name: str) -> str:
    if not 1 <= len(name) <= VAULT_NAME_MAX_LENGTH:
        raise _reject(
            f"Vault name must be between 1 and {VAULT_NAME_MAX_LENGTH} characters, got {len(name)}."
        )
    if any(c.isspace() for c in name):
        raise _reject(f"Vault name: {name!r} must not contain whitespace.")
    return name


def validate_topic_name(name: str) -> str:
    if not TOPIC_NAME_PATTERN.match(name):
        raise _reject(
            f"Topic name: {name!r} must be 1 to 256 letters, digits, hyphens or underscores."
        )
    return name


def validate_topic_arn(arn: str) -> str:
    if not TOPIC_ARN_PATTERN.match(arn):
        raise _reject(f"{arn!r} is not a valid SNS topic ARN.")
    return arn


def validate_subscription_arn(arn: str) -> str:
    if not SUBSCRIPTION_ARN_PATTERN.match(arn):
        raise _reject(f"{arn!r} is not a valid SNS subscription ARN.")
    return arn


def validate_endpoint(protocol: str, endpoint: str) -> str:
    if protocol not in SubscriptionProtocol.ALL:
        raise _reject(
            f"Protocol: {protocol!r} must be one of {', '.join(SubscriptionProtocol.ALL)}."
        )
    if protocol == SubscriptionProtocol.SMS:
        if not SMS_ENDPOINT_PATTERN.match(endpoint):
            raise _reject(
                f"SMS endpoint: {endpoint!r} must be 11 digits starting with 1."
            )
    elif not EMAIL_ENDPOINT_PATTERN.match(endpoint):
        raise _reject(f"Email endpoint: {endpoint!r} is not an email address.")
    return endpoint


def validate_event_selector(selector: str) -> str:
    allowed = (
        NotificationEvent.ARCHIVE_RETRIEVAL_COMPLETED,
        NotificationEvent.INVENTORY_RETRIEVAL_COMPLETED,
        NotificationEvent.ALL,
    )
    if selector not in allowed:
        raise _reject(f"Event: {selector!r} must be one of {', '.join(allowed)}.")
    return selector


def validate_job_spec(job_spec: JobSpec) -> JobSpec:
    if job_spec.tier is not None and job_spec.tier not in RetrievalTier.ALL:
        raise _reject(
            f"Tier: {job_spec.tier!r} must be one of {', '.join(RetrievalTier.ALL)}."
        )
    if isinstance(job_spec, InventoryRetrieval) and job_spec.format is not None:
        if job_spec.format not in InventoryFormat.ALL:
            raise _reject(
                f"Format: {job_spec.format!r} must be one of "
                f"{', '.join(InventoryFormat.ALL)}."
            )
    return job_spec


def normalize_status_code(status: str) -> str:
    canonical = {code.lower(): code for code in StatusCode.ALL}
    try:
        return canonical[status.replace("-", "").replace("_", "").lower()]
    except KeyError:
        raise _reject(
            f"Status: {status!r} must be one of {', '.join(StatusCode.ALL)}."
        ) from None


def validate_part_size(part_size: int) -> int:
    power_of_two = part_size > 0 and part_size & (part_size - 1) == 0
    if not (power_of_two and MIN_PART_SIZE <= part_size <= MAX_PART_SIZE):
        raise _reject(
            f"Part size: {part_size} must be a power of two between 1 MiB and 4 GiB."
        )
    return part_size
