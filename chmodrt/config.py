from dataclasses import dataclass
from enum import Enum, Flag
from typing import Optional

from .classify import PathKind
from .errors import ConflictingOptions, MissingScope, UsageError


class Scope(Flag):
    files = 1
    dirs = 2
    both = 3

    @classmethod
    def from_flags(cls, files: bool, dirs: bool) -> "Scope":
        scope = cls(0)
        if files:
            scope |= cls.files
        if dirs:
            scope |= cls.dirs
        return scope

    def includes(self, kind: PathKind) -> bool:
        if kind == PathKind.file:
            return Scope.files in self
        elif kind == PathKind.directory:
            return Scope.dirs in self
        return False


class TraversalOrder(Enum):
    post = "post"  # children before their directory
    pre = "pre"


@dataclass(frozen=True)
class RunConfig:
    scope: Scope
    dry_run: bool = False
    interactive: bool = False
    suppress: bool = False
    verbose: bool = False
    order: TraversalOrder = TraversalOrder.post
    max_prompts: Optional[int] = None

    def __post_init__(self) -> None:
        if self.interactive and self.suppress:
            raise ConflictingOptions("conflicting options: 'interactive', 'suppress'")
        if not self.scope & Scope.both:
            raise MissingScope("missing type option: 'dir', 'file'")
        if self.max_prompts is not None and self.max_prompts < 1:
            raise UsageError(f"max_prompts must be at least 1, not {self.max_prompts}")

    @property
    def prompt_absolute(self) -> bool:
        return not self.suppress

    @property
    def prompt_each(self) -> bool:
        return self.interactive and not self.suppress
