"""The wire layout of a virtio block device request header."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

_LAYOUT = struct.Struct("<IIQ")
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


class RequestType(IntEnum):
    """Kind of block request."""

    IN = 0
    OUT = 1
    FLUSH = 4


@dataclass
class VirtioBlockRequest:
    """A block request header: type, reserved word and sector number."""

    request_type: RequestType = RequestType.IN
    reserved: int = 0
    sector: int = 0

    def __post_init__(self) -> None:
        self.request_type = RequestType(self.request_type)
        if not 0 <= self.reserved <= _U32_MAX:
            raise ValueError(f"reserved out of range: {self.reserved}")
        if not 0 <= self.sector <= _U64_MAX:
            raise ValueError(f"sector out of range: {self.sector}")

    def as_bytes(self) -> bytes:
        """The 16-byte little-endian encoding of the header."""
        return _LAYOUT.pack(self.request_type, self.reserved, self.sector)