"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import Dict, TypedDict

PENDING_CONFIRMATION = "pending confirmation"


class SubscriptionProtocol:
    EMAIL = "email"
    EMAIL_JSON = "email-json"
    SMS = "sms"

    ALL = (EMAIL, EMAIL_JSON, SMS)


class Topic(TypedDict):
    TopicArn: str
    DisplayName: str
    Attributes: Dict[str, str]
