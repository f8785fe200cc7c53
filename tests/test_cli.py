"""Tests for the command line entry point."""
import pytest

from asyncocr.cli import main


def test_runs_selected_strategy(tmp_path, capsys):
    main(["-n", "2", "-o", str(tmp_path / "samples"), "--seed", "1", "--strategy", "concurrent", "-q"])
    out = capsys.readouterr().out

    assert "Created 2 sample PDFs" in out
    assert "Concurrent OCR processing completed in" in out
    assert "Sequential OCR processing" not in out
    assert out.count("  > PDF: ") == 2
    assert "===== Done. =====" in out
    assert (tmp_path / "samples" / "sample-document-1.pdf").exists()


def test_zero_samples(tmp_path, capsys):
    main(["-n", "0", "-o", str(tmp_path), "-q"])
    out = capsys.readouterr().out
    assert "Created 0 sample PDFs" in out
    assert "Average time per PDF: 0ms" in out


def test_setup_failure_exits_non_zero(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        main(["-o", str(blocker), "-q"])
    assert excinfo.value.code not in (0, None)


def test_negative_count_exits_non_zero(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["-n", "-1", "-o", str(tmp_path), "-q"])
    assert excinfo.value.code not in (0, None)


def test_log_file_written(tmp_path):
    log_file = tmp_path / "run.log"
    main(["-n", "1", "-o", str(tmp_path / "samples"), "--strategy", "concurrent", "-q", "--log-file", str(log_file)])
    text = log_file.read_text(encoding="utf-8")
    assert "Starting OCR for sample-document-1.pdf" in text
    assert "Run finished" in text
