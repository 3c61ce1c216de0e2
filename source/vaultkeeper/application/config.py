"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import os
import logging
from typing import Mapping, Optional

from vaultkeeper.application.util.exceptions import ConfigurationError

logger = logging.getLogger()

DEFAULT_PART_SIZE = 2**23
DEFAULT_DOWNLOAD_CHUNK_SIZE = 2**16


class Config:
    def __init__(
        self,
        region: Optional[str] = None,
        profile: Optional[str] = None,
        part_size: int = DEFAULT_PART_SIZE,
        download_chunk_size: int = DEFAULT_DOWNLOAD_CHUNK_SIZE,
    ) -> None:
        self.region = region
        self.profile = profile
        self.part_size = part_size
        self.download_chunk_size = download_chunk_size

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        return cls(
            region=env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION"),
            profile=env.get("AWS_PROFILE"),
            part_size=_int_setting(env, "VAULTKEEPER_PART_SIZE", DEFAULT_PART_SIZE),
            download_chunk_size=_int_setting(
                env, "VAULTKEEPER_DOWNLOAD_CHUNK_SIZE", DEFAULT_DOWNLOAD_CHUNK_SIZE
            ),
        )


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    logger.debug(f"Using {name}={value}")
    return value
