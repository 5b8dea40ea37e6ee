"""Summarize FASTQ files: record count and read length range."""

__version__ = "0.1.0"
__all__ = ["__version__"]