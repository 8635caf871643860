"""my-copy exceptions."""


class MyCopyError(Exception):
    """my-copy exception class."""

    message = "Copy failed"

    def __init__(self, path=None):
        self.path = path
        super().__init__(self._format())

    def _format(self):
        if self.path is None:
            return f"Error: {self.message}"
        return f"Error: {self.message} '{self.path}'"


class ConfirmationError(MyCopyError):
    """Raised when the overwrite answer cannot be read from the input stream."""

    message = "Failed to read user input"


class OpenError(MyCopyError):
    """Raised when a file cannot be opened."""


class SourceOpenError(OpenError):
    """Source file missing or unreadable."""

    message = "Cannot open source file"


class DestinationOpenError(OpenError):
    """Destination file cannot be created or truncated."""

    message = "Cannot create destination file"


class TransferError(MyCopyError):
    """Raised when moving bytes from source to destination fails mid-copy."""


class ReadError(TransferError):
    """Reading from the source failed."""

    message = "Failed to read from source file"


class WriteError(TransferError):
    """Writing to the destination failed."""

    message = "Failed to write to destination file"


class ShortWriteError(TransferError):
    """Fewer bytes were written than were read.

    Short writes are not retried.
    """

    message = "Incomplete write to destination file"

    def __init__(self, path=None, requested=0, written=0):
        self.requested = requested
        self.written = written
        super().__init__(path)


class CloseError(MyCopyError):
    """Releasing a file handle failed after the transfer."""

    def __init__(self, path=None, role="source"):
        self.role = role
        super().__init__(path)

    @property
    def message(self):
        return f"Failed to close {self.role} file"
