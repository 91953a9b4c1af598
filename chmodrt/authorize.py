import logging
from enum import Enum
from typing import Optional, TextIO

from genutility.filesystem import PathType

from .errors import StreamError

logger = logging.getLogger(__name__)

YES = "y"
NO = "n"
CONTINUE = "- continue? [y/n]"


class Auth(Enum):
    """The reason a confirmation is requested."""

    absolute = "is an absolute path"
    interactive = "mode will be changed"


class Decision(Enum):
    proceed = "proceed"
    skip = "skip"


class Authorizer:
    """Asks the user on `stream` and reads the answers line by line from `stdin`.

    Only `y` and `n` (case-insensitive, surrounding whitespace ignored) are accepted, anything else
    asks again. If `max_prompts` is None, there is no limit, so a closed or empty input will keep
    asking forever. Otherwise the question is given up after `max_prompts` attempts or at the end
    of the input, which counts as a skip.
    """

    def __init__(self, stdin: TextIO, stream: TextIO, max_prompts: Optional[int] = None) -> None:
        self.stdin = stdin
        self.stream = stream
        self.max_prompts = max_prompts

    def _prompt(self, path: PathType, auth: Auth) -> None:
        try:
            self.stream.write(f'"{path}" {auth.value} {CONTINUE} ')
            self.stream.flush()
        except OSError as e:
            raise StreamError(f"cannot write prompt: {e}")

    def _readline(self) -> str:
        try:
            return self.stdin.readline()
        except OSError as e:
            raise StreamError(f"cannot read from stdin: {e}")

    def ask(self, path: PathType, auth: Auth) -> Decision:
        attempts = 0
        while self.max_prompts is None or attempts < self.max_prompts:
            attempts += 1
            self._prompt(path, auth)
            line = self._readline()
            answer = line.strip().lower()

            if answer == YES:
                return Decision.proceed
            elif answer == NO:
                return Decision.skip

            if not line and self.max_prompts is not None:
                logger.warning("End of input reached while asking about `%s`", path)
                return Decision.skip

        logger.warning("No valid answer for `%s` after %d prompts", path, attempts)
        return Decision.skip
