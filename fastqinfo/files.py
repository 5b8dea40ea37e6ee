"""Opening FASTQ files and working out their compression from the name."""

import enum
import io
import os

from .errors import FastQIOError, PathError


class CompressionType(enum.Enum):
    """Compression formats recognised from a file extension."""

    GZIP = "GZIP"
    BZIP2 = "BZIP2"
    XZ = "XZ"
    UNCOMPRESSED = "UNCOMPRESSED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def infer_from_filename(cls, filename):
        """Infer the compression type from the file extension alone."""
        extension = _extension(filename)
        return _EXTENSIONS.get(extension, cls.UNKNOWN)

    def __str__(self):
        return self.value


_EXTENSIONS = {
    "gz": CompressionType.GZIP,
    "bz2": CompressionType.BZIP2,
    "xz": CompressionType.XZ,
    "fastq": CompressionType.UNCOMPRESSED,
    "fq": CompressionType.UNCOMPRESSED,
}


def _extension(filename):
    return filename.rsplit(".", 1)[-1]


class FastQFile:
    """An open FASTQ file together with its inferred compression type."""

    def __init__(self, filename):
        self.filename = filename
        self.extension = _extension(filename)
        self.compression_type = CompressionType.infer_from_filename(filename)
        try:
            self._file = open(filename, "rb")
        except OSError as exc:
            raise FastQIOError("Could not open file.") from exc

    @classmethod
    def from_path(cls, path):
        """Open a path-like object; raise PathError if it is not valid text."""
        try:
            raw = os.fspath(path)
        except TypeError as exc:
            raise PathError("Malformed path.") from exc
        try:
            if isinstance(raw, bytes):
                text = raw.decode("utf-8")
            else:
                raw.encode("utf-8")
                text = raw
        except UnicodeError as exc:
            raise PathError("Malformed path.") from exc
        return cls(text)

    def is_compressed(self):
        return self.compression_type is not CompressionType.UNCOMPRESSED

    def open_text(self):
        """Return a UTF-8 text stream over the raw file, split on newlines."""
        return io.TextIOWrapper(self._file, encoding="utf-8", newline="\n")

    def close(self):
        self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()