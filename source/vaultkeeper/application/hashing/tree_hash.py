"""
Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
SPDX-License-Identifier: Apache-2.0
"""

import hashlib

TREE_HASH_LEAF_SIZE = 2**20


class TreeHash:
    """
    Glacier's SHA-256 tree hash: leaf hashes over fixed size chunks, combined
    pairwise level by level until a single root hash remains.
    """

    def __init__(self, chunk_size: int = TREE_HASH_LEAF_SIZE) -> None:
        self.chunk_size = chunk_size
        self.hashes: list[bytes] = []
        self.buffer = bytearray()

    def update(self, data: bytes) -> None:
        self.buffer.extend(data)
        while len(self.buffer) >= self.chunk_size:
            self.hashes.append(hashlib.sha256(self.buffer[: self.chunk_size]).digest())
            del self.buffer[: self.chunk_size]

    def digest(self) -> bytes:
        level = list(self.hashes)
        if self.buffer:
            level.append(hashlib.sha256(self.buffer).digest())
        if not level:
            return b""
        while len(level) > 1:
            level = [
                hashlib.sha256(b"".join(level[i : i + 2])).digest()
                if i + 1 < len(level)
                else level[i]
                for i in range(0, len(level), 2)
            ]
        return level[0]

    def hexdigest(self) -> str:
        return self.digest().hex()
