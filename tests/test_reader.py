import io

import pytest

from fastqinfo.errors import FileReadError, WrongFormatError
from fastqinfo.reader import FastQReader, FastQRecord

SAMPLE = "@r1\nACGT\n+\nIIII\n@r2\nAC\n+\nII\n"


def test_reads_records_from_text_stream():
    records = list(FastQReader(io.StringIO(SAMPLE)))
    assert records == [
        FastQRecord("@r1", "ACGT", "IIII"),
        FastQRecord("@r2", "AC", "II"),
    ]


def test_trailing_whitespace_trimmed():
    records = list(FastQReader(["@r1  \r\n", "ACGT\r\n", "+\r\n", "IIII\t\n"]))
    assert records == [FastQRecord("@r1", "ACGT", "IIII")]


def test_incomplete_record_ignored():
    reader = FastQReader(io.StringIO(SAMPLE + "@r3\nACG\n"))
    records = list(reader)
    assert [r.identifier for r in records] == ["@r1", "@r2"]
    assert reader.records_read == 2


def test_empty_stream_yields_nothing():
    assert list(FastQReader([])) == []


def test_bad_separator_reports_line():
    reader = FastQReader(io.StringIO("@r1\nACGT\n-\nIIII\n"))
    with pytest.raises(WrongFormatError) as info:
        next(reader)
    assert str(info.value) == "File is not a properly formatted fastQ file. [Line 3: -]"
    assert info.value.malformed_line == "-"
    assert info.value.line_number == 3
    assert reader.records_read == 0


def test_bad_separator_in_second_record():
    reader = FastQReader(io.StringIO("@r1\nACGT\n+\nIIII\n@r2\nAC\nxx\nII\n"))
    assert next(reader).nucleotides == "ACGT"
    with pytest.raises(WrongFormatError) as info:
        next(reader)
    assert info.value.malformed_line == "xx"
    assert info.value.line_number == 7


def test_decode_error_becomes_file_read_error():
    stream = io.TextIOWrapper(io.BytesIO(b"@r1\n\xff\xfe\n+\nII\n"), encoding="utf-8")
    with pytest.raises(FileReadError) as info:
        list(FastQReader(stream))
    assert "Error while parsing line 1" in str(info.value)