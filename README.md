# fastqinfo

A small tool and library for getting a quick overview of a FASTQ file:
how many records it holds and the shortest and longest read lengths.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Command line

```
fastq-info reads.fastq
```

Example output:

```
Number of records: 1000
Max. read length: 151
Min. read length: 35
```

`fastq-info --version` prints the version.

The compression type is inferred from the file extension only:

- `.fastq` and `.fq` files are read as plain UTF-8 text.
- `.gz`, `.bz2` and `.xz` are recognised as GZIP, BZIP2 and XZ.
- Any other extension is treated as unknown.

For every name that is not `.fastq` or `.fq`, the detected compression is
printed first, for example `Compression: GZIP` or `Compression: UNKNOWN`.
The tool then reports an error on standard error and exits with status 1:
for an unknown extension it says the compression format is unsupported, and
for GZIP, BZIP2 and XZ it gives a decompression error. A file that cannot be
opened is also reported as an error with exit status 1.

A file is malformed if any record's third line is not exactly `+` (trailing
whitespace on a line is ignored). In that case the error message gives the
line number of the offending line and its text. An incomplete record at the
end of the file is ignored.

If the file holds no records, the count is 0, the maximum length is 0 and
the minimum length is shown as 18446744073709551615.

## What it does not do

Compressed input is not read: files named `.gz`, `.bz2` or `.xz` are
recognised, but summarising them raises `DecompressionError`. Decompress
them first, for example to a `.fq` file, and summarise that.

## Library

```python
from fastqinfo.files import FastQFile
from fastqinfo.summarize import summarize

with FastQFile("reads.fq") as fastq_file:
    summary = summarize(fastq_file)

print(summary.num_records, summary.min_record_len, summary.max_record_len)
```

`FastQFile(filename)` opens the file at once and raises `FastQIOError` if it
cannot. `FastQFile.from_path(path)` accepts any path-like object and raises
`PathError` if it cannot be turned into a text path. The file's
`compression_type` is a `CompressionType` member (`GZIP`, `BZIP2`, `XZ`,
`UNCOMPRESSED` or `UNKNOWN`); `CompressionType.infer_from_filename(name)`
gives the same result without opening anything, and `is_compressed()` is
true for every type except `UNCOMPRESSED`.

To iterate over individual records, use `FastQReader`. It takes any iterable
of text lines, such as an open text file, and yields frozen `FastQRecord`
objects, each with `identifier`, `nucleotides` and `quality` fields:

```python
from fastqinfo.reader import FastQReader

with open("reads.fq") as stream:
    for record in FastQReader(stream):
        print(record.identifier, len(record.nucleotides))
```

The reader keeps `records_read` and `lines_read` counters.

`summarize_stream(stream)` summarises an already open text stream or any
iterable of lines and returns a `FastQSummary`.

## Errors

All errors raised by the package derive from `fastqinfo.errors.FastQError`:

- `PathError`: the path is not a valid text path.
- `FastQIOError`: the file could not be opened.
- `UnknownCompressionError`: unsupported extension (`extension` attribute).
- `DecompressionError`: compressed input that cannot be read (`reason`).
- `WrongFormatError`: a record's third line is not `+` (`malformed_line`,
  `line_number`).
- `FileReadError`: the stream failed while being read, for example on text
  that is not valid UTF-8 (`reason`).