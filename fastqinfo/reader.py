"""Iterating over the records of a FASTQ text stream."""

from dataclasses import dataclass

from .errors import FileReadError, WrongFormatError

_LINES_PER_RECORD = 4


@dataclass(frozen=True)
class FastQRecord:
    """One FASTQ record: header, sequence and quality string."""

    identifier: str
    nucleotides: str
    quality: str


class FastQReader:
    """Yield FastQRecord objects from an iterable of text lines.

    A trailing incomplete record is silently ignored.
    """

    def __init__(self, stream):
        self._lines = iter(stream)
        self.records_read = 0
        self.lines_read = 0

    def __iter__(self):
        return self

    def __next__(self):
        lines = []
        for _ in range(_LINES_PER_RECORD):
            self.lines_read += 1
            try:
                line = next(self._lines, None)
            except (UnicodeDecodeError, OSError) as exc:
                raise FileReadError(
                    f"Error while parsing line {self.lines_read} (Reason: {exc})"
                ) from exc
            if line is None:
                raise StopIteration
            lines.append(line.rstrip())

        identifier, nucleotides, separator, quality = lines
        if separator != "+":
            raise WrongFormatError(separator, self.lines_read - 1)

        self.records_read += 1
        return FastQRecord(identifier, nucleotides, quality)