"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import pytest

from vaultkeeper.application.session import Session
from vaultkeeper.application.sns_service.topics import (
    create_topic,
    delete_topic,
    get_topic_attributes,
    list_topics,
    set_topic_display_name,
)
from vaultkeeper.application.util.exceptions import ValidationError


def test_create_topic(session: Session) -> None:
    arn = create_topic(session, "vault-events", "Vault Events")
    assert arn == "arn:aws:sns:us-east-1:123456789012:vault-events"
    topic = get_topic_attributes(session, arn)
    assert topic["TopicArn"] == arn
    assert topic["DisplayName"] == "Vault Events"


def test_set_topic_display_name(session: Session) -> None:
    arn = create_topic(session, "vault-events", "Vault Events")
    set_topic_display_name(session, arn, "Renamed")
    assert get_topic_attributes(session, arn)["DisplayName"] == "Renamed"


def test_list_and_delete_topics(session: Session) -> None:
    first = create_topic(session, "first", "First")
    second = create_topic(session, "second", "Second")
    assert {topic["TopicArn"] for topic in list_topics(session)} == {first, second}

    delete_topic(session, first)
    assert [topic["TopicArn"] for topic in list_topics(session)] == [second]


def test_list_topics_follows_next_token(mock_session: Session) -> None:
    mock_session.sns.list_topics.side_effect = [  # type: ignore
        {"Topics": [{"TopicArn": "arn-1"}], "NextToken": "T"},
        {"Topics": [{"TopicArn": "arn-2"}]},
    ]
    assert [topic["TopicArn"] for topic in list_topics(mock_session)] == [
        "arn-1",
        "arn-2",
    ]
    calls = mock_session.sns.list_topics.call_args_list  # type: ignore
    assert calls[1].kwargs == {"NextToken": "T"}


def test_create_topic_rejects_bad_name(mock_session: Session) -> None:
    with pytest.raises(ValidationError):
        create_topic(mock_session, "bad name", "Bad")
    assert mock_session.sns.create_topic.call_count == 0  # type: ignore


def test_topic_operations_reject_bad_arn(mock_session: Session) -> None:
    with pytest.raises(ValidationError):
        get_topic_attributes(mock_session, "topic")
    with pytest.raises(ValidationError):
        set_topic_display_name(mock_session, "topic", "Name")
    with pytest.raises(ValidationError):
        delete_topic(mock_session, "topic")
    assert mock_session.sns.method_calls == []  # type: ignore
