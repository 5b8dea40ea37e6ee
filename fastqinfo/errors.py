"""Exceptions raised while opening, reading and summarising FASTQ files."""


class FastQError(Exception):
    """Base class for every error this package raises."""


class PathError(FastQError):
    """The given path cannot be represented as a text path."""


class FastQIOError(FastQError):
    """The file could not be opened."""


class UnknownCompressionError(FastQError):
    """The file extension names no supported compression format."""

    def __init__(self, extension):
        super().__init__(f"Unsupported compression format `{extension}`.")
        self.extension = extension


class DecompressionError(FastQError):
    """Compressed input could not be decompressed."""

    def __init__(self, reason):
        super().__init__(f"Decompression error. Reason: {reason}")
        self.reason = reason


class WrongFormatError(FastQError):
    """A record does not follow the four-line FASTQ layout."""

    def __init__(self, malformed_line, line_number):
        super().__init__(
            "File is not a properly formatted fastQ file. "
            f"[Line {line_number}: {malformed_line}]"
        )
        self.malformed_line = malformed_line
        self.line_number = line_number


class FileReadError(FastQError):
    """The underlying stream failed while lines were being read."""

    def __init__(self, reason):
        super().__init__(f"Error while reading file. Reason: {reason}")
        self.reason = reason