"""Signature types and randomness domain separation tags."""

from __future__ import annotations

import enum
import io
from dataclasses import dataclass
from typing import BinaryIO

from statetypes.cbor import MajorType, read_exact, read_header, write_header

SIGNATURE_MAX_LENGTH = 200


class DomainSeparationTag(enum.IntEnum):
    """Specifies a domain for randomness generation."""

    TICKET_PRODUCTION = 1
    ELECTION_PROOF_PRODUCTION = 2
    WINNING_POST_CHALLENGE_SEED = 3
    WINDOWED_POST_CHALLENGE_SEED = 4
    SEAL_RANDOMNESS = 5
    INTERACTIVE_SEAL_CHALLENGE_SEED = 6
    WINDOWED_POST_DEADLINE_ASSIGNMENT = 7
    MARKET_DEAL_CRON_SEED = 8
    POST_CHAIN_COMMIT = 9


class SigType(enum.IntEnum):
    """Signature scheme identifier."""

    SECP256K1 = 0
    BLS = 1
    UNKNOWN = 255


_SIG_NAMES = {
    SigType.UNKNOWN: "unknown",
    SigType.SECP256K1: "secp256k1",
    SigType.BLS: "bls",
}


def sig_type_name(value: int) -> str:
    """Return the lower-case name of a signature type."""
    try:
        return _SIG_NAMES[SigType(value)]
    except ValueError:
        raise ValueError(f"invalid signature type: {int(value)}") from None


@dataclass(frozen=True)
class Signature:
    """A typed signature."""

    type: SigType = SigType.SECP256K1
    data: bytes = b""

    def equals(self, other: Signature | None) -> bool:
        if other is None:
            return False
        return self.type == other.type and bytes(self.data) == bytes(other.data)

    def write_cbor(self, stream: BinaryIO) -> None:
        """Write the signature as a CBOR byte string: type byte then data."""
        write_header(stream, MajorType.BYTE_STRING, len(self.data) + 1)
        stream.write(bytes([int(self.type)]))
        stream.write(bytes(self.data))

    def to_cbor(self) -> bytes:
        buffer = io.BytesIO()
        self.write_cbor(buffer)
        return buffer.getvalue()

    @classmethod
    def read_cbor(cls, stream: BinaryIO) -> Signature:
        """Read a CBOR-encoded signature, rejecting unknown types."""
        major, length = read_header(stream)
        if major != MajorType.BYTE_STRING:
            raise ValueError("not a byte string")
        if length > SIGNATURE_MAX_LENGTH:
            raise ValueError("string too long")
        if length == 0:
            raise ValueError("string empty")
        buf = read_exact(stream, length)
        if buf[0] not in (SigType.SECP256K1, SigType.BLS):
            raise ValueError(f"invalid signature type in cbor input: {buf[0]}")
        return cls(SigType(buf[0]), bytes(buf[1:]))

    def to_bytes(self) -> bytes:
        return bytes([int(self.type)]) + bytes(self.data)

    @classmethod
    def from_bytes(cls, data: bytes) -> Signature:
        """Decode the binary form; an unrecognised type becomes UNKNOWN."""
        if len(data) > SIGNATURE_MAX_LENGTH:
            raise ValueError(f"invalid signature bytes, too long ({len(data)})")
        if not data:
            raise ValueError("invalid signature bytes of length 0")
        if data[0] in (SigType.SECP256K1, SigType.BLS):
            sig_type = SigType(data[0])
        else:
            sig_type = SigType.UNKNOWN
        return cls(sig_type, bytes(data[1:]))