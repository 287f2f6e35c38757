"""In-memory implementation of IgnoreLog for testing."""


class FakeIgnoreLog:
    def __init__(self, lines: list[str] | None = None, fail: bool = False):
        self.lines: list[str] = list(lines or [])
        self.fail = fail

    def append(self, line: str) -> None:
        if self.fail:
            raise OSError("ignore log is not writable")
        self.lines.append(line)

    def read_all(self) -> set[str]:
        if self.fail:
            raise OSError("ignore log is not readable")
        return set(self.lines)
