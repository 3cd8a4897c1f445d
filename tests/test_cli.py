import json

import pytest

from linetfidf.cli import main


def test_prints_report(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("Hello, World!\nhello again\n", encoding="utf-8")

    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "TF-IDF Scores by Document:" in out
    assert "Document 1 (Lines 1-1000)" in out
    assert "Total documents processed: 1" in out
    assert "Total unique terms: 3" in out


def test_config_and_json_out(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("\n".join(["alpha", "beta", "gamma"]) + "\n", encoding="utf-8")
    cfg = tmp_path / "run.yaml"
    cfg.write_text("lines_per_document: 2\n", encoding="utf-8")
    out_json = tmp_path / "report.json"

    assert main([str(src), "--config", str(cfg), "--json-out", str(out_json)]) == 0
    out = capsys.readouterr().out
    assert "Document 2 (Lines 3-4)" in out
    assert "Lines per document: 2" in out
    assert json.loads(out_json.read_text(encoding="utf-8"))["n_documents"] == 2


def test_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Total documents processed: 0" in out
    assert "Total unique terms: 0" in out


@pytest.mark.parametrize("argv", [[], ["a.txt", "b.txt"]])
def test_wrong_argument_count_exits_nonzero(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([str(tmp_path / "nope.txt")])


def test_undecodable_file_propagates(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"ok\n\xff\xfe\n")
    with pytest.raises(UnicodeDecodeError):
        main([str(path)])
