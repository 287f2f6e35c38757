"""File-backed IgnoreLog: one headword per line, UTF-8, append-only."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileIgnoreLog:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def append(self, line: str) -> None:
        """Append ``line`` plus a newline, creating parent directories and the file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open('a', encoding='utf-8', newline='\n') as f:
            f.write(f"{line}\n")
        logger.debug("Ignore list updated", extra={"headword": line, "path": str(self.path)})

    def read_all(self) -> set[str]:
        if not self.path.exists():
            return set()
        with self.path.open(encoding='utf-8') as f:
            return {line.strip() for line in f if line.strip()}
