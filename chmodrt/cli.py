import logging
import os
import sys
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace
from pathlib import Path
from typing import List, Optional, TextIO

from genutility.rich import MarkdownHighlighter
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .authorize import Authorizer
from .config import RunConfig, Scope, TraversalOrder
from .errors import StreamError, UsageError
from .mode import octal_mode
from .report import Reporter
from .traverse import Traverser

logger = logging.getLogger(__name__)

EX_SUCCESS = 0
EX_FAILURE = 2


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="chmodrt",
        description="Recursively change the mode of directories or files. One mode is used for all types.",
        formatter_class=ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("mode", type=octal_mode, help="Numeric mode, an octal between one and four digits")
    parser.add_argument("paths", metavar="PATH", type=Path, nargs="+", help="Files or directories")
    parser.add_argument("-d", "--dir", action="store_true", help="Change the mode of directories")
    parser.add_argument("-f", "--file", action="store_true", help="Change the mode of files")
    parser.add_argument("-D", "--dry-run", action="store_true", help="Do not change any files (verbose)")
    parser.add_argument("-i", "--interactive", action="store_true", help="Prompt before changing each file")
    parser.add_argument("-s", "--suppress", action="store_true", help="Suppress all interaction")
    parser.add_argument("-v", "--verbose", action="store_true", help="Explain what's being done")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--order",
        choices=tuple(e.value for e in TraversalOrder),
        default=TraversalOrder.post.value,
        help="post: change directories after their contents. pre: change directories before their contents.",
    )
    parser.add_argument(
        "--max-prompts",
        metavar="N",
        type=int,
        default=None,
        help="Give up asking after N invalid answers or at the end of input and skip the path. Infinite if not given.",
    )
    parser.add_argument("--log", type=Path, help="Write logs to file")
    parser.add_argument("--debug", action="store_true", help="Show debug output")
    return parser


def get_config(args: Namespace) -> RunConfig:
    return RunConfig(
        scope=Scope.from_flags(files=args.file, dirs=args.dir),
        dry_run=args.dry_run,
        interactive=args.interactive,
        suppress=args.suppress,
        verbose=args.verbose,
        order=TraversalOrder(args.order),
        max_prompts=args.max_prompts,
    )


def setup_logging(debug: bool, logpath: Optional[Path] = None) -> None:
    # stdout is reserved for the outcome lines
    handler = RichHandler(
        console=Console(stderr=True), log_time_format="%Y-%m-%d %H-%M-%S%Z", highlighter=MarkdownHighlighter()
    )
    FORMAT = "%(message)s"

    if debug:
        logging.basicConfig(level=logging.DEBUG, format=FORMAT, handlers=[handler])
    else:
        logging.basicConfig(level=logging.INFO, format=FORMAT, handlers=[handler])

    if logpath:
        root = logging.getLogger()
        filename = os.path.abspath(logpath)
        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == filename for h in root.handlers):
            root.addHandler(logging.FileHandler(filename, encoding="utf-8", delay=True))


def run(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    parser = get_parser()
    args = parser.parse_args(argv)

    try:
        config = get_config(args)
    except UsageError as e:
        parser.error(str(e))

    setup_logging(args.debug, args.log)

    authorizer = Authorizer(stdin, stderr, config.max_prompts)
    reporter = Reporter(stdout, stderr, config.verbose)
    traverser = Traverser(config, authorizer, reporter)

    try:
        traverser.run(args.paths, args.mode)
    except StreamError as e:
        logger.error("%s", e)
        return EX_FAILURE
    except Exception:
        logger.exception("Changing modes failed")
        return EX_FAILURE

    return EX_SUCCESS


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
