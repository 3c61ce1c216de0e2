"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import typing
import pytest

TOPIC_ARN = "arn:aws:sns:us-east-1:123456789012:vault-events"


@pytest.fixture
def topic_arn() -> str:
    return TOPIC_ARN


@pytest.fixture
def glacier_job_result() -> typing.Dict[str, typing.Any]:
    return {
        "Action": "InventoryRetrieval",
        "ArchiveId": None,
        "ArchiveSHA256TreeHash": None,
        "ArchiveSizeInBytes": None,
        "Completed": True,
        "CompletionDate": "2023-03-03T21:42:40.684Z",
        "CreationDate": "2023-03-03T17:53:45.420Z",
        "InventoryRetrievalParameters": {
            "EndDate": None,
            "Format": "CSV",
            "Limit": None,
            "Marker": None,
            "StartDate": None,
        },
        "InventorySizeInBytes": 1024,
        "JobDescription": "This is a test",
        "JobId": "KXt2zItqLEKWXWyHk__7sVM8PfNIrdrsdtTLMPsyzXMnIriEK4lzltZgN7erM6_-VLXwOioQapa8EOgKfqTpqeGWuGpk",
        "RetrievalByteRange": None,
        "SHA256TreeHash": None,
        "SNSTopic": TOPIC_ARN,
        "StatusCode": "Succeeded",
        "StatusMessage": "Succeeded",
        "Tier": None,
        "VaultARN": "arn:aws:glacier:us-east-1:123456789012:vaults/vault1",
    }
