import logging
import os
from typing import Callable, Iterable, List, Optional, Set, Tuple

from genutility.filesystem import PathType

from .authorize import Auth, Authorizer, Decision
from .classify import PathKind, classify
from .config import RunConfig, TraversalOrder
from .report import Outcome, Reporter

logger = logging.getLogger(__name__)

SetModeFunc = Callable[[str, int], None]


def _detail(e: OSError) -> str:
    return e.strerror or str(e)


class Traverser:
    """Changes the mode of every in-scope path under a list of roots.

    Errors are isolated per path: a path which cannot be read or changed is reported and the
    remaining paths are processed as usual. Only `StreamError`s, ie. a failing prompt or report
    stream, propagate.
    """

    def __init__(
        self,
        config: RunConfig,
        authorizer: Authorizer,
        reporter: Reporter,
        set_mode: SetModeFunc = os.chmod,
    ) -> None:
        self.config = config
        self.authorizer = authorizer
        self.reporter = reporter
        self.set_mode = set_mode

    def run(self, roots: Iterable[PathType], mode: int) -> None:
        for root in roots:
            self.run_root(os.fspath(root), mode)

    def run_root(self, path: str, mode: int) -> None:
        # asked once per root, never for descendants
        if os.path.isabs(path) and self.config.prompt_absolute:
            if self.authorizer.ask(path, Auth.absolute) == Decision.skip:
                self.reporter.report(Outcome.skipped, path)
                return

        try:
            kind = classify(path)
        except OSError as e:
            self.reporter.report(Outcome.failed, path, _detail(e))
            return

        if kind == PathKind.missing:
            self.reporter.report(Outcome.not_found, path)
        elif kind == PathKind.directory:
            self.chmod_tree(path, mode, set())
        elif self.config.scope.includes(kind):
            self.chmod_one(path, mode)

    def chmod_one(self, path: str, mode: int) -> None:
        """Changes the mode of a single path. The permission primitive is never called for skipped
        paths or during a dry run.
        """

        if self.config.prompt_each:
            if self.authorizer.ask(path, Auth.interactive) == Decision.skip:
                self.reporter.report(Outcome.skipped, path)
                return

        if self.config.dry_run:
            self.reporter.report(Outcome.would_change, path)
            return

        try:
            self.set_mode(path, mode)
        except OSError as e:
            self.reporter.report(Outcome.failed, path, _detail(e))
        else:
            self.reporter.report(Outcome.changed, path)

    def _list_dir(self, dirpath: str) -> Optional[List[str]]:
        try:
            with os.scandir(dirpath) as it:
                names = sorted(entry.name for entry in it)
        except OSError as e:
            self.reporter.report(Outcome.failed, dirpath, _detail(e))
            return None

        return [os.path.join(dirpath, name) for name in names]

    def chmod_tree(self, dirpath: str, mode: int, ancestors: Set[Tuple[int, int]]) -> None:
        """Recurses into `dirpath`. The directory itself is included if directories are in scope.
        `ancestors` holds the (device, inode) pairs of the directories which are currently descended.
        """

        try:
            st = os.stat(dirpath)
        except OSError as e:
            self.reporter.report(Outcome.failed, dirpath, _detail(e))
            return

        key = (st.st_dev, st.st_ino)
        if key in ancestors:
            logger.warning("Skipping `%s` which links back to one of its parent directories", dirpath)
            return

        include_self = self.config.scope.includes(PathKind.directory)
        pre_order = self.config.order == TraversalOrder.pre

        if include_self and pre_order:
            self.chmod_one(dirpath, mode)

        logger.debug("Descending into `%s`", dirpath)
        children = self._list_dir(dirpath)

        ancestors.add(key)
        try:
            # if listing fails, only the subtree is abandoned
            for path in children or ():
                try:
                    kind = classify(path)
                except OSError as e:
                    self.reporter.report(Outcome.failed, path, _detail(e))
                    continue

                if kind == PathKind.directory:
                    self.chmod_tree(path, mode, ancestors)
                elif kind == PathKind.file and self.config.scope.includes(kind):
                    self.chmod_one(path, mode)
                elif kind == PathKind.missing:
                    logger.debug("Ignoring broken link `%s`", path)
        finally:
            ancestors.discard(key)

        if include_self and not pre_order:
            self.chmod_one(dirpath, mode)
