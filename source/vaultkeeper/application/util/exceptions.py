"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger()


class VaultkeeperError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(VaultkeeperError):
    pass


class InvalidPathError(ValidationError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Path: {path} does not exist.")


class NotAFileError(VaultkeeperError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Path: {path} is a directory, not a file. Skipping.")


class LocalFileError(VaultkeeperError):
    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Path: {path} could not be accessed: {reason}")


class ConfigurationError(VaultkeeperError):
    pass


class RemoteServiceError(VaultkeeperError):
    def __init__(self, operation: str, code: str, message: str) -> None:
        self.operation = operation
        self.code = code
        super().__init__(message)


class GlacierChecksumMismatch(VaultkeeperError):
    def __init__(self) -> None:
        super().__init__(
            "Calculated checksum did not match the checksum provided by Glacier."
        )


class AccessViolation(VaultkeeperError):
    def __init__(self) -> None:
        super().__init__("Resource was accessed innapropriately.")


@contextmanager
def remote_call(operation: str) -> Iterator[None]:
    """
    Translates botocore errors raised inside the block into a
    RemoteServiceError. Service errors keep the service's own code and
    message; client side failures (connection, timeout, credentials) use the
    botocore exception name as the code.
    """
    try:
        yield
    except ClientError as e:
        error = e.response.get("Error", {})
        code = error.get("Code", "")
        message = error.get("Message") or str(e)
        logger.error(f"{operation} failed with {code}: {message}")
        raise RemoteServiceError(operation, code, message) from e
    except BotoCoreError as e:
        code = type(e).__name__
        logger.error(f"{operation} failed with {code}: {e}")
        raise RemoteServiceError(operation, code, str(e)) from e
