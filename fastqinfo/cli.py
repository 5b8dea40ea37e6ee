"""Command line entry point printing a summary of a FASTQ file."""

import argparse
import sys

from .errors import FastQError
from .files import FastQFile
from .summarize import summarize


def _parser():
    parser = argparse.ArgumentParser(
        prog="fastq-info",
        description="Print record count and read lengths of a FASTQ file.",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("fname")
    return parser


def main(argv=None):
    args = _parser().parse_args(argv)
    try:
        fastq = FastQFile(args.fname)
    except FastQError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    with fastq:
        if fastq.is_compressed():
            print(f"Compression: {fastq.compression_type}")
        try:
            summary = summarize(fastq)
        except FastQError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    print(f"Number of records: {summary.num_records}")
    print(f"Max. read length: {summary.max_record_len}")
    print(f"Min. read length: {summary.min_record_len}")
    return 0


if __name__ == "__main__":
    sys.exit(main())