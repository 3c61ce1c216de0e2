"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

from typing import Any, Optional

from vaultkeeper.application.util.exceptions import VaultkeeperError


class Outcome:
    """
    Result of one item of a batch operation: either the value the operation
    returned, or the error it failed with.
    """

    def __init__(
        self,
        item: str,
        value: Any = None,
        error: Optional[VaultkeeperError] = None,
    ) -> None:
        self.item = item
        self.value = value
        self.error = error

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, item: str, value: Any = None) -> "Outcome":
        return cls(item, value=value)

    @classmethod
    def failure(cls, item: str, error: VaultkeeperError) -> "Outcome":
        return cls(item, error=error)

    def __repr__(self) -> str:
        if self.succeeded:
            return f"Outcome({self.item!r}, succeeded)"
        return f"Outcome({self.item!r}, failed: {self.error})"
