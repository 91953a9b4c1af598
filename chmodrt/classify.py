import os
import stat
from enum import Enum

from genutility.filesystem import PathType

from .errors import AccessDenied


class PathKind(Enum):
    file = "file"
    directory = "directory"
    other = "other"
    missing = "missing"


def classify(path: PathType) -> PathKind:
    """Symlinks are followed, so a link is classified by its target. Broken links are missing.
    Raises `AccessDenied` if the metadata cannot be read.
    """

    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return PathKind.missing
    except PermissionError as e:
        raise AccessDenied(e.errno, e.strerror, os.fspath(path))

    if stat.S_ISDIR(st.st_mode):
        return PathKind.directory
    elif stat.S_ISREG(st.st_mode):
        return PathKind.file
    else:
        return PathKind.other
