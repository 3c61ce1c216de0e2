"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import typing
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from vaultkeeper.application.glacier_service.vaults import (
    create_vault,
    delete_vault,
    describe_vault,
    list_vaults,
)
from vaultkeeper.application.config import Config
from vaultkeeper.application.session import Session
from vaultkeeper.application.util.exceptions import RemoteServiceError, ValidationError


def test_create_and_describe_vault(session: Session) -> None:
    create_vault(session, "backups")
    vault = describe_vault(session, "backups")
    assert vault["VaultName"] == "backups"
    assert "ResponseMetadata" not in vault


def test_list_vaults(session: Session) -> None:
    for name in ["vault-a", "vault-b", "vault-c"]:
        create_vault(session, name)
    names = [vault["VaultName"] for vault in list_vaults(session)]
    assert sorted(names) == ["vault-a", "vault-b", "vault-c"]


def test_delete_vault(session: Session) -> None:
    create_vault(session, "short-lived")
    delete_vault(session, "short-lived")
    assert [vault["VaultName"] for vault in list_vaults(session)] == []


@pytest.mark.parametrize("name", ["my vault", "tab\tvault", "newline\n", " "])
def test_create_vault_rejects_whitespace_without_calling_glacier(
    mock_session: Session, name: str
) -> None:
    with pytest.raises(ValidationError):
        create_vault(mock_session, name)
    assert mock_session.glacier.create_vault.call_count == 0  # type: ignore


@pytest.mark.parametrize("name", ["", "v" * 256])
def test_create_vault_rejects_length(mock_session: Session, name: str) -> None:
    with pytest.raises(ValidationError):
        create_vault(mock_session, name)
    assert mock_session.glacier.create_vault.call_count == 0  # type: ignore


def test_list_vaults_follows_marker(mock_session: Session) -> None:
    mock_session.glacier.list_vaults.side_effect = [  # type: ignore
        {"VaultList": [{"VaultName": "p1"}], "Marker": "M"},
        {"VaultList": [{"VaultName": "p2"}], "Marker": "M2"},
        {"VaultList": [{"VaultName": "p3"}]},
    ]
    names = [vault["VaultName"] for vault in list_vaults(mock_session, limit=1)]
    assert names == ["p1", "p2", "p3"]
    calls = mock_session.glacier.list_vaults.call_args_list  # type: ignore
    assert len(calls) == 3
    assert calls[0].kwargs == {"accountId": "-", "limit": "1"}
    assert calls[2].kwargs == {"accountId": "-", "limit": "1", "marker": "M2"}


def test_delete_non_empty_vault_surfaces_service_message(
    mock_session: Session, client_error: typing.Callable[..., ClientError]
) -> None:
    mock_session.glacier.delete_vault.side_effect = client_error(  # type: ignore
        "InvalidParameterValueException", "Vault not empty or recently written to"
    )
    with pytest.raises(RemoteServiceError) as exc_info:
        delete_vault(mock_session, "full")
    assert exc_info.value.message == "Vault not empty or recently written to"


def test_create_vault_addresses_calling_account() -> None:
    config = Config.from_env({"VAULTKEEPER_ACCOUNT_ID": "123456789012"})
    session = Session(MagicMock(), MagicMock(), config)
    create_vault(session, "v1")
    session.glacier.create_vault.assert_called_once_with(
        accountId="-", vaultName="v1"
    )
