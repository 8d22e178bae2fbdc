"""Command-line entry point."""

import io

import pytest

from bfvm import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("BF_TAPE_LENGTH", "BF_EOF_POLICY", "BF_DEBUG_INSTRUCTIONS", "BF_TRAILING_NEWLINE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(cli, "load_dotenv", lambda: False)


def test_no_arguments_prints_usage(capsys):
    assert cli.main([]) == 0
    assert "usage: bfvm" in capsys.readouterr().out


def test_too_many_arguments_prints_usage(capsys, tmp_path):
    assert cli.main([str(tmp_path / "a.bf"), str(tmp_path / "b.bf")]) == 0
    assert "usage: bfvm" in capsys.readouterr().out


def test_runs_program_from_file(capsys, tmp_path):
    path = tmp_path / "three.bf"
    path.write_text("+++ +++ [>++++++++<-]>.")
    assert cli.main([str(path)]) == 0
    assert capsys.readouterr().out == "0\n"


def test_reads_stdin(monkeypatch, capsys, tmp_path):
    path = tmp_path / "echo.bf"
    path.write_text(",[.,]")
    monkeypatch.setattr("sys.stdin", io.StringIO("hi"))
    assert cli.main([str(path)]) == 0
    assert capsys.readouterr().out == "hi\n"


def test_missing_file(capsys, tmp_path):
    path = tmp_path / "missing.bf"
    assert cli.main([str(path)]) == 1
    assert capsys.readouterr().out == f"File {path} could not be used\n"


def test_invalid_program(capsys, tmp_path):
    path = tmp_path / "bad.bf"
    path.write_text("+[")
    assert cli.main([str(path)]) == 1
    out = capsys.readouterr().out
    assert out.startswith(f"File {path} does not contain a valid Brainfuck program: ")
    assert "opening brace" in out


def test_options_override_config(capsys, tmp_path):
    path = tmp_path / "wrap.bf"
    path.write_text("<+!! print")
    assert cli.main(["--tape-length", "4", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "\t2\t3\t0\t1\t2\t3\t0\t1\t2\t3\t0"


def test_no_debug_flag(capsys, tmp_path):
    path = tmp_path / "dbg.bf"
    path.write_text("+!! print")
    assert cli.main(["--no-debug", str(path)]) == 0
    assert capsys.readouterr().out == "\n"


def test_eof_flag(monkeypatch, capsys, tmp_path):
    path = tmp_path / "eof.bf"
    path.write_text("+++,.")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main(["--eof", "unchanged", str(path)]) == 0
    assert capsys.readouterr().out == "\x03\n"


def test_bad_config_file(capsys, tmp_path):
    cfg = tmp_path / "bf.yaml"
    cfg.write_text("tape_length: -1\n")
    path = tmp_path / "p.bf"
    path.write_text("+")
    assert cli.main(["--config", str(cfg), str(path)]) == 1
    assert capsys.readouterr().out.startswith("Invalid configuration:")
