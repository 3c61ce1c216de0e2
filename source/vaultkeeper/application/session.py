"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import TYPE_CHECKING, Optional

import boto3

from vaultkeeper.application.config import Config
from vaultkeeper.application.mocking.mock_glacier_apis import MockGlacierAPIs

if TYPE_CHECKING:
    from mypy_boto3_glacier.client import GlacierClient
    from mypy_boto3_sns.client import SNSClient
else:
    GlacierClient = object
    SNSClient = object

logger = logging.getLogger()

# Every Glacier call addresses the account that owns the credentials.
ACCOUNT_ID = "-"


class Session:
    """
    Long lived handles to the Glacier and SNS clients.

    Built once from credentials and a region, then passed to every
    operation. Operations only read from it.
    """

    def __init__(
        self,
        glacier: GlacierClient,
        sns: SNSClient,
        config: Optional[Config] = None,
    ) -> None:
        self.glacier = glacier
        self.sns = sns
        self.config = config or Config()

    @property
    def account_id(self) -> str:
        return ACCOUNT_ID

    @classmethod
    def create(
        cls,
        region: Optional[str] = None,
        profile: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        session_token: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> "Session":
        """
        Builds both clients from one boto3 session. An explicit region or
        profile wins over the one in config, which defaults to the
        environment.
        """
        config = config or Config.from_env()
        if region is not None or profile is not None:
            config = Config(
                region=region or config.region,
                profile=profile or config.profile,
                part_size=config.part_size,
                download_chunk_size=config.download_chunk_size,
            )
        boto_session = boto3.session.Session(
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
            aws_session_token=session_token,
            region_name=config.region,
            profile_name=config.profile,
        )
        logger.info(f"Creating Glacier and SNS clients in {boto_session.region_name}")
        glacier: GlacierClient = boto_session.client("glacier")
        sns: SNSClient = boto_session.client("sns")
        return cls(glacier, sns, config)


class SessionFactory:
    """
    This class is used to create a session over either the actual Glacier
    APIs or the mock APIs, depending on the passed parameter 'mock'

    Usage example:
    - For real Glacier APIs
        session = SessionFactory.create_instance()
        list_vaults(session)
    - For Mock Glacier APIs
        session = SessionFactory.create_instance(mock=True)
        set_notification(session, "vault1", topic_arn, "All")
    """

    @staticmethod
    def create_instance(mock: bool = False, config: Optional[Config] = None) -> Session:
        session = Session.create(config=config)
        if mock:
            session.glacier = MockGlacierAPIs(session.glacier)  # type: ignore
        return session
