"""Port for the append-only list of headwords the user dropped."""

from typing import Protocol


class IgnoreLog(Protocol):
    """One headword per line. Duplicates are allowed.

    Both methods raise OSError on I/O failure.
    """

    def append(self, line: str) -> None:
        """Append a line, creating the log if absent."""
        ...

    def read_all(self) -> set[str]:
        """Return every recorded headword. Empty when the log does not exist."""
        ...
