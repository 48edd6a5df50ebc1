class PathNotFoundError(FileNotFoundError):
    """Raised when an operation requires a path that does not exist. Subclass of FileNotFoundError."""
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path not found: '{path}'")


class InvalidPatternError(ValueError):
    """Raised when a glob pattern cannot be compiled. Subclass of ValueError."""
    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid glob pattern {pattern!r}: {reason}.")


class InvalidModeError(ValueError):
    """Raised when a permission mode string is malformed. Subclass of ValueError."""
    def __init__(self, mode: str) -> None:
        self.mode = mode
        super().__init__(
            f"Bad mode {mode!r}: expected [u](+|-) followed by 1-3 of 'rwx'."
        )


class DestinationIsFileError(FileExistsError):
    """Raised when a directory copy targets an existing file. Subclass of FileExistsError."""
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Destination is a file: '{path}'")


class UnsafeArchiveError(ValueError):
    """Raised when an archive entry would be written outside the target directory."""
    def __init__(self, entry: str, target: str) -> None:
        self.entry = entry
        self.target = target
        super().__init__(
            f"Archive entry {entry!r} escapes target directory '{target}'."
        )
