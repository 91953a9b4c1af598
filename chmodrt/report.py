from enum import Enum
from typing import Optional, TextIO

from genutility.filesystem import PathType

from .errors import StreamError


class Outcome(Enum):
    changed = "changed"
    would_change = "would_change"
    skipped = "skipped"
    not_found = "not_found"
    failed = "failed"


class Reporter:
    """Writes one line per path outcome. Changes go to `stdout`, skips and errors to `stderr`.
    Changes and skips are only reported when `verbose` is set, dry-run and errors always.
    """

    def __init__(self, stdout: TextIO, stderr: TextIO, verbose: bool = False) -> None:
        self.stdout = stdout
        self.stderr = stderr
        self.verbose = verbose

    def _write(self, stream: TextIO, line: str) -> None:
        try:
            stream.write(f"{line}\n")
        except OSError as e:
            raise StreamError(f"cannot write report: {e}")

    def report(self, outcome: Outcome, path: PathType, detail: Optional[str] = None) -> None:
        if outcome == Outcome.changed:
            if self.verbose:
                self._write(self.stdout, f'"{path}": mode changed.')
        elif outcome == Outcome.would_change:
            self._write(self.stdout, f'"{path}": mode will be changed.')
        elif outcome == Outcome.skipped:
            if self.verbose:
                self._write(self.stderr, f'"{path}": skipped.')
        elif outcome == Outcome.not_found:
            self._write(self.stderr, f'Error: cannot find "{path}": {detail or "no such file or directory"}')
        elif outcome == Outcome.failed:
            self._write(self.stderr, f'Error: cannot access "{path}": {detail}')
        else:
            raise ValueError(f"Invalid outcome: {outcome}")
