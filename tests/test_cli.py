import argparse
import logging

import pytest

from mocoabm.cli import main
from mocoabm.config import DEFAULT_REL_TOLERANCE, apply_preset, setup_logging


@pytest.fixture
def front_file(tmp_path):
    path = tmp_path / "front.txt"
    path.write_text("0.0 1.0 1.0 0.0\n")
    return str(path)


def test_cli_prints_report(front_file, capsys):
    assert main(["-n", "3", "-f", front_file]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("index\t")
    assert lines[1] == "1\t0.25\t0.25\t0.5\t0.5,0.5"
    assert len(lines) == 4


def test_cli_no_header(front_file, capsys):
    assert main(["-n", "1", "-f", front_file, "--no-header"]) == 0
    assert capsys.readouterr().out == "1\t0.25\t0.25\t0.5\t0.5,0.5\n"


def test_cli_zero_count(front_file, capsys):
    assert main(["-n", "0", "-f", front_file]) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_empty_input(tmp_path, capsys):
    path = tmp_path / "empty.txt"
    path.write_text("")
    assert main(["-n", "2", "-f", str(path)]) == 1
    assert "at least one segment" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    assert main(["-n", "2", "-f", str(tmp_path / "nope.txt")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_cli_requires_count():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


def test_cli_exhaustion_is_not_an_error(tmp_path, capsys):
    path = tmp_path / "point.txt"
    path.write_text("0.5 0.5 0.5 0.5")
    assert main(["-n", "4", "-f", str(path), "--no-header"]) == 0
    assert capsys.readouterr().out == ""


def test_cli_nadir_reference(tmp_path, capsys):
    path = tmp_path / "front.txt"
    path.write_text("1 2 2 1")
    assert main(["-n", "1", "-f", str(path), "--nadir-reference", "--no-header"]) == 0
    assert capsys.readouterr().out == "1\t0.25\t0.25\t0.5\t1.5,1.5\n"


def test_cli_writes_plots(front_file, tmp_path):
    sel = tmp_path / "plots" / "selection.png"
    curve = tmp_path / "plots" / "anytime.png"
    assert main(["-n", "5", "-f", front_file, "--plot", str(sel), "--anytime-plot", str(curve)]) == 0
    assert sel.exists()
    assert curve.exists()


def test_apply_preset_overrides():
    args = argparse.Namespace(preset="nadir", reference=None, nadir_reference=False, rel_tolerance=None)
    assert apply_preset(args) == {"reference": "nadir", "rel_tolerance": DEFAULT_REL_TOLERANCE}

    args = argparse.Namespace(preset="nadir", reference=[-1, -2], nadir_reference=False, rel_tolerance=1e-6)
    assert apply_preset(args) == {"reference": (-1.0, -2.0), "rel_tolerance": 1e-6}


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    setup_logging(level=logging.INFO)
    logger = logging.getLogger("mocoabm")
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))
    logging.getLogger("mocoabm.selector").info("run done")
    for h in logging.getLogger("mocoabm").handlers:
        h.flush()
    text = log_file.read_text()
    assert "INFO" in text
    assert "mocoabm.selector: run done" in text
    setup_logging(level=logging.WARNING)
