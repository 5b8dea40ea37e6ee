"""Counting records and read lengths in a FASTQ file."""

from dataclasses import dataclass

from .errors import DecompressionError, UnknownCompressionError
from .files import CompressionType
from .reader import FastQReader

# Minimum length reported when the input holds no records: the largest
# unsigned 64-bit value, so any real read is shorter.
NO_RECORDS_MIN_LENGTH = 2**64 - 1


@dataclass(frozen=True)
class FastQSummary:
    """Record count and the shortest and longest sequence lengths."""

    num_records: int
    min_record_len: int
    max_record_len: int


def summarize_stream(stream):
    """Summarise the records found in an iterable of text lines."""
    num_records = 0
    min_len = NO_RECORDS_MIN_LENGTH
    max_len = 0
    for record in FastQReader(stream):
        length = len(record.nucleotides)
        num_records += 1
        min_len = min(min_len, length)
        max_len = max(max_len, length)
    return FastQSummary(num_records, min_len, max_len)


def summarize(fastq_file):
    """Summarise an opened FastQFile according to its compression type."""
    kind = fastq_file.compression_type
    if kind is CompressionType.UNKNOWN:
        raise UnknownCompressionError(fastq_file.extension)
    if kind is not CompressionType.UNCOMPRESSED:
        raise DecompressionError(f"{kind} input is not supported.")
    with fastq_file.open_text() as text:
        return summarize_stream(text)