"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import typing

import pytest
from botocore.exceptions import ClientError, NoCredentialsError

from vaultkeeper.application.util.exceptions import (
    InvalidPathError,
    RemoteServiceError,
    ValidationError,
    remote_call,
)


def test_remote_call_translates_client_error(
    client_error: typing.Callable[..., ClientError]
) -> None:
    with pytest.raises(RemoteServiceError) as exc_info:
        with remote_call("delete_vault"):
            raise client_error(
                "InvalidParameterValueException", "Vault not empty or recently written"
            )
    error = exc_info.value
    assert error.operation == "delete_vault"
    assert error.code == "InvalidParameterValueException"
    assert error.message == "Vault not empty or recently written"
    assert isinstance(error.__cause__, ClientError)


def test_remote_call_translates_client_side_failures() -> None:
    with pytest.raises(RemoteServiceError) as exc_info:
        with remote_call("list_vaults"):
            raise NoCredentialsError()
    assert exc_info.value.operation == "list_vaults"
    assert exc_info.value.code == "NoCredentialsError"
    assert exc_info.value.message == "Unable to locate credentials"


def test_remote_call_leaves_other_errors() -> None:
    with pytest.raises(KeyError):
        with remote_call("describe_vault"):
            raise KeyError("location")


def test_invalid_path_is_validation_error() -> None:
    error = InvalidPathError("/no/such/file")
    assert isinstance(error, ValidationError)
    assert "/no/such/file" in error.message
