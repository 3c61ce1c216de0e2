"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import TYPE_CHECKING, Iterator, Optional

from vaultkeeper.application.model.sns import PENDING_CONFIRMATION
from vaultkeeper.application.session import Session
from vaultkeeper.application.util.exceptions import ValidationError, remote_call
from vaultkeeper.application.util.pagination import paginate
from vaultkeeper.application.util.validation import (
    validate_endpoint,
    validate_subscription_arn,
    validate_topic_arn,
)

if TYPE_CHECKING:
    from mypy_boto3_sns.type_defs import SubscriptionTypeDef
else:
    SubscriptionTypeDef = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def list_subscriptions(
    session: Session,
    topic_arn: Optional[str] = None,
    subscription_arn: Optional[str] = None,
) -> Iterator[SubscriptionTypeDef]:
    """
    Lists subscriptions of one topic, a single subscription looked up by its
    ARN, or every subscription of the account when neither is given.
    """
    if topic_arn is not None and subscription_arn is not None:
        raise ValidationError("Pass either a topic ARN or a subscription ARN.")
    if subscription_arn is not None:
        return iter([_describe_subscription(session, subscription_arn)])
    if topic_arn is not None:
        validate_topic_arn(topic_arn)
        logger.info(f"Listing subscriptions of {topic_arn}")
        return paginate(
            session.sns.list_subscriptions_by_topic,
            "Subscriptions",
            "NextToken",
            "NextToken",
            TopicArn=topic_arn,
        )
    logger.info("Listing all subscriptions")
    return paginate(
        session.sns.list_subscriptions, "Subscriptions", "NextToken", "NextToken"
    )


def _describe_subscription(session: Session, arn: str) -> SubscriptionTypeDef:
    validate_subscription_arn(arn)
    with remote_call("get_subscription_attributes"):
        attributes = session.sns.get_subscription_attributes(SubscriptionArn=arn)[
            "Attributes"
        ]
    return {
        "SubscriptionArn": attributes.get("SubscriptionArn", arn),
        "Owner": attributes.get("Owner", ""),
        "Protocol": attributes.get("Protocol", ""),
        "Endpoint": attributes.get("Endpoint", ""),
        "TopicArn": attributes.get("TopicArn", ""),
    }


def create_subscription(
    session: Session, topic_arn: str, protocol: str, endpoint: str
) -> str:
    """
    Subscribes an email address or phone number to a topic.

    The subscription has to be confirmed at the endpoint before it delivers,
    so only the pending notice is returned.
    """
    validate_topic_arn(topic_arn)
    validate_endpoint(protocol, endpoint)
    logger.info(f"Subscribing {protocol} endpoint {endpoint} to {topic_arn}")
    with remote_call("subscribe"):
        session.sns.subscribe(TopicArn=topic_arn, Protocol=protocol, Endpoint=endpoint)
    logger.info(f"Subscription of {endpoint} is {PENDING_CONFIRMATION}")
    return PENDING_CONFIRMATION


def delete_subscription(session: Session, arn: str) -> None:
    validate_subscription_arn(arn)
    logger.info(f"Deleting subscription {arn}")
    with remote_call("unsubscribe"):
        session.sns.unsubscribe(SubscriptionArn=arn)
