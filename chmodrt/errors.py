class UsageError(ValueError):
    """Detected before any path is touched. The run is aborted."""


class InvalidMode(UsageError):
    pass


class ConflictingOptions(UsageError):
    pass


class MissingScope(UsageError):
    pass


class PathError(OSError):
    """Scoped to a single path or subtree. Reported, never fatal."""


class AccessDenied(PathError):
    pass


class StreamError(OSError):
    """Reading an answer or writing a report line failed."""
