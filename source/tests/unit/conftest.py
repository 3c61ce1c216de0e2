"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import os
import typing
from unittest.mock import MagicMock

import boto3
import pytest
from botocore.exceptions import ClientError

from moto import mock_aws

from vaultkeeper.application.config import Config
from vaultkeeper.application.mocking.mock_glacier_apis import MockGlacierAPIs
from vaultkeeper.application.session import Session

if typing.TYPE_CHECKING:
    from mypy_boto3_glacier import GlacierClient
    from mypy_boto3_sns import SNSClient
else:
    GlacierClient = object
    SNSClient = object


def _client_error(code: str, message: str, operation: str = "Operation") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


@pytest.fixture
def client_error() -> typing.Callable[..., ClientError]:
    return _client_error


@pytest.fixture
def aws_credentials() -> None:
    """Mocked AWS Credentials for moto"""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
    os.environ["AWS_REGION"] = "us-east-1"


@pytest.fixture
def aws(aws_credentials: None) -> typing.Iterator[None]:
    with mock_aws():
        yield


@pytest.fixture
def glacier_client(aws: None) -> GlacierClient:
    connection: GlacierClient = boto3.client("glacier", region_name="us-east-1")
    return connection


@pytest.fixture
def sns_client(aws: None) -> SNSClient:
    connection: SNSClient = boto3.client("sns", region_name="us-east-1")
    return connection


@pytest.fixture
def session(glacier_client: GlacierClient, sns_client: SNSClient) -> Session:
    return Session(
        MockGlacierAPIs(glacier_client), sns_client, Config(region="us-east-1")
    )


@pytest.fixture
def vault(session: Session) -> str:
    session.glacier.create_vault(vaultName="vault1")
    return "vault1"


@pytest.fixture
def mock_session() -> Session:
    return Session(MagicMock(), MagicMock(), Config(region="us-east-1"))
