"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, TypedDict

if TYPE_CHECKING:
    from mypy_boto3_glacier.type_defs import JobParametersTypeDef
else:
    JobParametersTypeDef = object

logger = logging.getLogger()


class StatusCode:
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    IN_PROGRESS = "InProgress"

    ALL = (IN_PROGRESS, SUCCEEDED, FAILED)
    TERMINAL = (SUCCEEDED, FAILED)


class GlacierJobType:
    ARCHIVE_RETRIEVAL = "archive-retrieval"
    INVENTORY_RETRIEVAL = "inventory-retrieval"


class NotificationEvent:
    ARCHIVE_RETRIEVAL_COMPLETED = "ArchiveRetrievalCompleted"
    INVENTORY_RETRIEVAL_COMPLETED = "InventoryRetrievalCompleted"
    ALL = "All"

    @classmethod
    def expand(cls, selector: str) -> List[str]:
        if selector == cls.ALL:
            return [cls.ARCHIVE_RETRIEVAL_COMPLETED, cls.INVENTORY_RETRIEVAL_COMPLETED]
        return [selector]


class InventoryFormat:
    CSV = "CSV"
    JSON = "JSON"

    ALL = (CSV, JSON)


class RetrievalTier:
    EXPEDITED = "Expedited"
    STANDARD = "Standard"
    BULK = "Bulk"

    ALL = (EXPEDITED, STANDARD, BULK)


class JobDescriptor(TypedDict):
    JobId: str
    Location: str
    StatusCode: str


class JobSpec:
    job_type = ""

    def __init__(
        self, description: Optional[str] = None, tier: Optional[str] = None
    ) -> None:
        self.description = description
        self.tier = tier

    def job_parameters(self, sns_topic: str) -> JobParametersTypeDef:
        params: Dict[str, Any] = {"Type": self.job_type, "SNSTopic": sns_topic}
        if self.description is not None:
            params["Description"] = self.description
        if self.tier is not None:
            params["Tier"] = self.tier
        params.update(self._extra_parameters())
        job_parameters: JobParametersTypeDef = params  # type: ignore
        return job_parameters

    def _extra_parameters(self) -> Dict[str, Any]:
        return {}


class ArchiveRetrieval(JobSpec):
    job_type = GlacierJobType.ARCHIVE_RETRIEVAL

    def __init__(
        self,
        archive_id: str,
        description: Optional[str] = None,
        tier: Optional[str] = None,
        byte_range: Optional[str] = None,
    ) -> None:
        super().__init__(description, tier)
        self.archive_id = archive_id
        self.byte_range = byte_range

    def _extra_parameters(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"ArchiveId": self.archive_id}
        if self.byte_range is not None:
            params["RetrievalByteRange"] = self.byte_range
        return params


class InventoryRetrieval(JobSpec):
    job_type = GlacierJobType.INVENTORY_RETRIEVAL

    def __init__(
        self,
        format: Optional[str] = None,
        description: Optional[str] = None,
        tier: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> None:
        super().__init__(description, tier)
        self.format = format
        self.start_date = start_date
        self.end_date = end_date
        self.limit = limit

    def _extra_parameters(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.format is not None:
            params["Format"] = self.format
        inventory_params = {
            "StartDate": self.start_date,
            "EndDate": self.end_date,
            "Limit": None if self.limit is None else str(self.limit),
        }
        inventory_params = {k: v for k, v in inventory_params.items() if v is not None}
        if inventory_params:
            params["InventoryRetrievalParameters"] = inventory_params
        return params


def is_terminal(job: Dict[str, Any]) -> bool:
    return job["StatusCode"] in StatusCode.TERMINAL


def check_job_success_status(job: Dict[str, Any]) -> bool:
    result: bool = job["StatusCode"] == StatusCode.SUCCEEDED
    result_str = "succeeded" if result else "has not succeeded"
    getattr(logger, "debug" if result else "error")(
        f"The job with job-id {job['JobId']} {result_str}"
    )
    return result

