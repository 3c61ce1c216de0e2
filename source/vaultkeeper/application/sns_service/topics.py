"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import TYPE_CHECKING, Iterator

from vaultkeeper.application.model.sns import Topic
from vaultkeeper.application.session import Session
from vaultkeeper.application.util.exceptions import remote_call
from vaultkeeper.application.util.pagination import paginate
from vaultkeeper.application.util.validation import (
    validate_topic_arn,
    validate_topic_name,
)

if TYPE_CHECKING:
    from mypy_boto3_sns.type_defs import TopicTypeDef
else:
    TopicTypeDef = object

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def list_topics(session: Session) -> Iterator[TopicTypeDef]:
    logger.info("Listing topics")
    return paginate(session.sns.list_topics, "Topics", "NextToken", "NextToken")


def get_topic_attributes(session: Session, arn: str) -> Topic:
    validate_topic_arn(arn)
    with remote_call("get_topic_attributes"):
        attributes = session.sns.get_topic_attributes(TopicArn=arn)["Attributes"]
    return {
        "TopicArn": arn,
        "DisplayName": attributes.get("DisplayName", ""),
        "Attributes": dict(attributes),
    }


def create_topic(session: Session, name: str, display_name: str) -> str:
    validate_topic_name(name)
    logger.info(f"Creating topic {name}")
    with remote_call("create_topic"):
        arn = session.sns.create_topic(
            Name=name, Attributes={"DisplayName": display_name}
        )["TopicArn"]
    logger.info(f"Topic created: {arn}")
    return arn


def set_topic_display_name(session: Session, arn: str, display_name: str) -> None:
    validate_topic_arn(arn)
    logger.info(f"Setting display name of {arn} to {display_name}")
    with remote_call("set_topic_attributes"):
        session.sns.set_topic_attributes(
            TopicArn=arn, AttributeName="DisplayName", AttributeValue=display_name
        )


def delete_topic(session: Session, arn: str) -> None:
    validate_topic_arn(arn)
    logger.info(f"Deleting topic {arn}")
    with remote_call("delete_topic"):
        session.sns.delete_topic(TopicArn=arn)
