"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger()

ProgressCallback = Callable[[int], None]


def log_progress(percentage: int) -> None:
    logger.info(f"{percentage}% complete")


class PercentageTracker:
    def __init__(
        self,
        total: int,
        sink: Optional[ProgressCallback] = None,
        suppress_final: bool = False,
        suppress_repeats: bool = False,
    ) -> None:
        self.total = total
        self.sink = sink
        self.suppress_final = suppress_final
        self.suppress_repeats = suppress_repeats
        self.transferred = 0
        self.last_reported: Optional[int] = None

    @property
    def percentage(self) -> int:
        if self.total <= 0:
            return 100
        return round(self.transferred / self.total * 100)

    def update(self, byte_count: int) -> None:
        self.transferred += byte_count
        percentage = self.percentage
        # An unknown size gives no meaningful percentage.
        if self.sink is None or self.total <= 0:
            return
        if self.suppress_final and percentage >= 100:
            return
        if self.suppress_repeats and percentage == self.last_reported:
            return
        self.last_reported = percentage
        self.sink(percentage)
