"""A simple in-memory file that can be opened, read and closed."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass


class FileState(enum.Enum):
    """Whether a file is open or closed."""

    OPEN = "OPEN"
    CLOSE = "CLOSED"

    def __str__(self) -> str:
        return self.value


class FileNotOpenError(Exception):
    """Raised when reading from a file that is not open."""


@dataclass
class File:
    """A named file that holds bytes in memory."""

    name: str
    data: bytes = b""
    state: FileState = FileState.CLOSE

    def __str__(self) -> str:
        return f"<{self.name}, {self.state}>"

    def read(self) -> bytes:
        """Return the whole contents of the file."""
        if self.state is not FileState.OPEN:
            raise FileNotOpenError("File must be open for reading")
        return bytes(self.data)

    def open(self) -> File:
        """Open the file and return it."""
        self.state = FileState.OPEN
        return self

    def close(self) -> File:
        """Close the file and return it."""
        self.state = FileState.CLOSE
        return self


def main(argv: list[str] | None = None) -> int:
    """Show opening, reading and closing a file."""
    f5 = File("f5.txt")
    buffer = bytearray()

    try:
        buffer += f5.read()
    except FileNotOpenError:
        print("Error checking is working")

    f5.open()
    contents = f5.read()
    buffer += contents
    f5.close()

    text = buffer.decode("utf-8", errors="replace")

    print(repr(f5))
    print(f5)
    print(f"{f5.name} is {len(contents)} bytes long")
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())