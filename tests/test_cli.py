from fastqinfo.cli import main


def test_prints_summary(tmp_path, capsys):
    path = tmp_path / "reads.fq"
    path.write_text("@r1\nACGTAC\n+\nIIIIII\n@r2\nACG\n+\nIII\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Number of records: 2",
        "Max. read length: 6",
        "Min. read length: 3",
    ]


def test_unknown_extension_reports_error(tmp_path, capsys):
    path = tmp_path / "reads.fq.foo"
    path.write_text("")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out.strip() == "Compression: UNKNOWN"
    assert "Unsupported compression format `foo`." in captured.err


def test_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fq")]) == 1
    assert "Could not open file." in capsys.readouterr().err


def test_malformed_file_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.fq"
    path.write_text("@r1\nACGT\n=\nIIII\n")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: File is not a properly formatted fastQ file.")