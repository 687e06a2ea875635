"""An append-only key-value store kept in a single file.

Every record is written as a little-endian header of three unsigned 32-bit
integers (CRC-32 checksum, key length, value length) followed by the key
bytes and the value bytes. Updates and deletions append new records; an
in-memory index maps each key to the offset of its most recent record.
"""

from __future__ import annotations

import io
import os
import struct
import zlib
from dataclasses import dataclass
from typing import BinaryIO

_HEADER = struct.Struct("<III")


class DataCorruptionError(Exception):
    """Raised when a stored record does not match its checksum."""


@dataclass(frozen=True)
class KeyValuePair:
    """A key and its value as stored in one record."""

    key: bytes
    value: bytes


def _read_record(handle: BinaryIO) -> KeyValuePair | None:
    """Read one record from ``handle``; return ``None`` at end of file."""
    header = handle.read(_HEADER.size)
    if len(header) < _HEADER.size:
        return None
    saved_checksum, key_len, value_len = _HEADER.unpack(header)
    data_len = key_len + value_len
    data = handle.read(data_len)
    checksum = zlib.crc32(data) & 0xFFFFFFFF
    if checksum != saved_checksum or len(data) != data_len:
        raise DataCorruptionError(
            f"data corruption encountered: {checksum:08x} != {saved_checksum:08x}"
        )
    return KeyValuePair(key=data[:key_len], value=data[key_len:])


class ActionKV:
    """A log-structured key-value store backed by a file."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        self.file: BinaryIO = open(self.path, "a+b")
        self.file.seek(0)
        self.index: dict[bytes, int] = {}

    def __enter__(self) -> ActionKV:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying file."""
        self.file.close()

    def _records(self):
        """Yield ``(position, record)`` for every record in the file."""
        self.file.seek(0)
        while True:
            position = self.file.tell()
            record = _read_record(self.file)
            if record is None:
                return
            yield position, record

    def load(self) -> None:
        """Build the index from the records in the file."""
        for position, record in self._records():
            self.index[record.key] = position

    def get(self, key: bytes) -> bytes | None:
        """Return the latest value stored under ``key``, or ``None``."""
        position = self.index.get(bytes(key))
        if position is None:
            return None
        return self.get_at(position).value

    def get_at(self, position: int) -> KeyValuePair:
        """Read the record that starts at byte offset ``position``."""
        self.file.seek(position)
        record = _read_record(self.file)
        if record is None:
            raise EOFError(f"no record at position {position}")
        return record

    def find(self, target: bytes) -> tuple[int, bytes] | None:
        """Scan the file for the last record with key ``target``."""
        target = bytes(target)
        found = None
        for position, record in self._records():
            if record.key == target:
                found = (position, record.value)
        return found

    def insert(self, key: bytes, value: bytes) -> None:
        """Append a record for ``key`` and point the index at it."""
        position = self.insert_but_ignore_index(key, value)
        self.index[bytes(key)] = position

    def insert_but_ignore_index(self, key: bytes, value: bytes) -> int:
        """Append a record and return its offset without touching the index."""
        data = bytes(key) + bytes(value)
        checksum = zlib.crc32(data) & 0xFFFFFFFF
        self.file.seek(0, io.SEEK_END)
        position = self.file.tell()
        self.file.write(_HEADER.pack(checksum, len(key), len(value)))
        self.file.write(data)
        self.file.flush()
        return position

    def update(self, key: bytes, value: bytes) -> None:
        """Store a new value for ``key``."""
        self.insert(key, value)

    def delete(self, key: bytes) -> None:
        """Mark ``key`` as deleted by storing an empty value."""
        self.insert(key, b"")