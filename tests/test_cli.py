"""CLI tests for tersargs subcommands."""

import json

import pytest

from tersargs import cli


def test_parse_valid(run_cli, capsys):
    code = run_cli(["parse", "--schema", "l,p#,d*", "--", "-l", "-p", "42", "-d", "test"])

    assert code == cli.EXIT_OK
    out = json.loads(capsys.readouterr().out)
    assert out["valid"] is True
    assert out["values"] == {"d": "test", "l": True, "p": 42}
    assert out["found"] == ["l", "p", "d"]
    assert out["errors"] == []


def test_parse_output_is_canonical(run_cli, capsys):
    run_cli(["parse", "--schema", "b,a", "--", "-ab"])
    out = capsys.readouterr().out.strip()
    assert out == (
        '{"errors":[],"found":["a","b"],"positionals":[],'
        '"unexpected":[],"valid":true,"values":{"a":true,"b":true}}'
    )


def test_parse_invalid_integer(run_cli, capsys):
    code = run_cli(["parse", "--schema", "p#", "--", "-p", "abc"])

    assert code == cli.EXIT_INVALID_ARGUMENTS
    captured = capsys.readouterr()
    assert json.loads(captured.out)["valid"] is False
    assert "Error: Argument -p expects an integer but was 'abc'." in captured.err


def test_parse_quiet(run_cli, capsys):
    code = run_cli(["parse", "--schema", "l", "--quiet", "--", "-l", "-x"])

    assert code == cli.EXIT_INVALID_ARGUMENTS
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Argument(s) -x unexpected." in captured.err


def test_parse_positionals(run_cli, capsys):
    code = run_cli(["parse", "--schema", "l", "--", "input.txt", "-l"])

    assert code == cli.EXIT_OK
    out = json.loads(capsys.readouterr().out)
    assert out["positionals"] == ["input.txt"]


def test_parse_bad_schema(run_cli, capsys):
    code = run_cli(["parse", "--schema", "l,3", "--", "-l"])

    assert code == cli.EXIT_SCHEMA_ERROR
    assert "Error: Bad character 3 in Args format: l,3" in capsys.readouterr().err


def test_usage(run_cli, capsys):
    code = run_cli(["usage", "--schema", "l,p#"])

    assert code == cli.EXIT_OK
    assert capsys.readouterr().out == "-[l,p#]\n"


def test_check_schema(run_cli, capsys):
    code = run_cli(["check-schema", "--schema", "l, p#, d*"])

    assert code == cli.EXIT_OK
    out = json.loads(capsys.readouterr().out)
    assert out == {
        "elements": {"d": "STRING", "l": "BOOLEAN", "p": "INTEGER"},
        "text": "l, p#, d*",
    }


def test_check_schema_invalid_format(run_cli, capsys):
    code = run_cli(["check-schema", "--schema", "p%"])

    assert code == cli.EXIT_SCHEMA_ERROR
    assert "Error: Argument p has invalid format: %" in capsys.readouterr().err


def test_no_command_prints_help(run_cli, capsys):
    code = run_cli([])

    assert code == cli.EXIT_INVALID_ARGUMENTS
    assert "usage: tersargs" in capsys.readouterr().out


def test_main_accepts_argv(capsys, reset_logging):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["usage", "--schema", "x"])
    assert excinfo.value.code == cli.EXIT_OK
    assert capsys.readouterr().out.strip() == "-[x]"
