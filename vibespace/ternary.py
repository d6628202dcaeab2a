"""Binary encodings and a compact packing for balanced ternary data."""

from __future__ import annotations

import base64
import binascii
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "DataEncoding",
    "BinaryData",
    "EncodingError",
    "encode_binary_data",
    "decode_binary_data",
    "ternary_to_bytes",
    "bytes_to_ternary",
    "create_binary_data",
]

TRITS_PER_BYTE = 4

# Two-bit patterns for each trit; the pattern 0b11 is unused.
_TRIT_TO_BITS = {-1: 0b00, 0: 0b01, 1: 0b10}
_BITS_TO_TRIT = {0b00: -1, 0b01: 0, 0b10: 1}


class DataEncoding(str, Enum):
    """How a block of binary data is represented."""

    BINARY = "binary"
    BASE64 = "base64"
    HEX = "hex"


class EncodingError(ValueError):
    """Raised for an unsupported encoding or data that cannot be decoded."""


@dataclass
class BinaryData:
    """Binary payload together with its encoding and a format label."""

    data: bytes
    encoding: DataEncoding
    format: str


def _resolve(encoding: DataEncoding | str) -> DataEncoding:
    try:
        return DataEncoding(encoding)
    except ValueError:
        raise EncodingError(f"unsupported encoding format: {encoding}") from None


def encode_binary_data(data: bytes, encoding: DataEncoding | str) -> bytes:
    """Encode raw bytes in the given encoding."""
    kind = _resolve(encoding)
    raw = bytes(data)
    if kind is DataEncoding.BINARY:
        return raw
    if kind is DataEncoding.BASE64:
        return base64.b64encode(raw)
    return binascii.hexlify(raw)


def decode_binary_data(data: bytes, encoding: DataEncoding | str) -> bytes:
    """Decode bytes in the given encoding back to raw bytes."""
    kind = _resolve(encoding)
    raw = bytes(data)
    if kind is DataEncoding.BINARY:
        return raw
    if kind is DataEncoding.BASE64:
        cleaned = raw.replace(b"\r", b"").replace(b"\n", b"")
        try:
            return base64.b64decode(cleaned, validate=True)
        except binascii.Error as exc:
            raise EncodingError(f"failed to decode base64: {exc}") from exc
    try:
        return binascii.unhexlify(raw)
    except binascii.Error as exc:
        raise EncodingError(f"failed to decode hex: {exc}") from exc


def ternary_to_bytes(ternary: Sequence[int]) -> bytes:
    """Pack balanced ternary digits four to a byte, first trit in the low bits.

    Values other than -1, 0 and 1 are stored as 0.
    """
    result = bytearray((len(ternary) + TRITS_PER_BYTE - 1) // TRITS_PER_BYTE)
    for index, trit in enumerate(ternary):
        byte_index, position = divmod(index, TRITS_PER_BYTE)
        result[byte_index] |= _TRIT_TO_BITS.get(trit, 0b01) << (position * 2)
    return bytes(result)


def bytes_to_ternary(data: bytes, num_trits: int) -> list[int]:
    """Unpack ``num_trits`` balanced ternary digits from packed bytes.

    Positions beyond the available bytes and the unused pattern 0b11 read as 0.
    """
    if num_trits < 0:
        raise ValueError("num_trits must not be negative")
    if not data or num_trits == 0:
        return []
    available = min(num_trits, len(data) * TRITS_PER_BYTE)
    result = [0] * num_trits
    for index in range(available):
        byte_index, position = divmod(index, TRITS_PER_BYTE)
        bits = (data[byte_index] >> (position * 2)) & 0b11
        result[index] = _BITS_TO_TRIT.get(bits, 0)
    return result


def create_binary_data(
    data: bytes, encoding: DataEncoding | str, format: str
) -> BinaryData:
    """Encode ``data`` and wrap it with its encoding and format."""
    kind = _resolve(encoding)
    return BinaryData(data=encode_binary_data(data, kind), encoding=kind, format=format)