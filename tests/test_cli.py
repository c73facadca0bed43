from __future__ import annotations

import json

import pytest

import cli
from windows_error.exit_codes import ExitCode


@pytest.fixture
def run(tmp_path, capsys):
    config_path = tmp_path / "config.json"

    def _run(*argv: str):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["--config-path", str(config_path), *argv])
        out, err = capsys.readouterr()
        return excinfo.value.code, out, err

    _run.config_path = config_path
    return _run


def test_lookup_hresult(run) -> None:
    code, out, _ = run("lookup", "0x80004005")

    assert code == ExitCode.SUCCESS
    assert "E_FAIL" in out
    assert "0x80004005" in out


def test_lookup_signed_value(run) -> None:
    code, out, _ = run("lookup", "-2147024891")

    assert code == ExitCode.SUCCESS
    assert "E_ACCESSDENIED" in out


def test_lookup_no_match(run) -> None:
    code, out, _ = run("lookup", "0")

    assert code == ExitCode.SUCCESS_NO_MATCH
    assert "No entry" in out


def test_lookup_win32_table(run) -> None:
    code, out, _ = run("lookup", "0", "--table", "win32")

    assert code == ExitCode.SUCCESS
    assert "ERROR_SUCCESS" in out


def test_lookup_all_tables_json(run) -> None:
    code, out, _ = run("--json", "lookup", "0x102", "--table", "all")

    assert code == ExitCode.SUCCESS
    payload = json.loads(out)
    found = {(m["table"], m["name"]) for m in payload["matches"]}
    assert ("win32", "WAIT_TIMEOUT") in found
    assert ("ntstatus", "STATUS_TIMEOUT") in found


def test_lookup_unparseable(run) -> None:
    code, _, err = run("lookup", "zz")

    assert code == ExitCode.INVALID_ARGUMENTS
    assert "Cannot parse" in err


def test_lookup_out_of_range(run) -> None:
    code, _, _ = run("lookup", "0x100000000")

    assert code == ExitCode.INVALID_ARGUMENTS


def test_lookup_lowercase_hex(run) -> None:
    run("config", "set", "--uppercase-hex", "false")
    code, out, _ = run("lookup", "0x8000ffff")

    assert code == ExitCode.SUCCESS
    assert "0x8000ffff" in out
    assert "E_UNEXPECTED" in out


def test_decode_text(run) -> None:
    code, out, _ = run("decode", "0x80070005")

    assert code == ExitCode.SUCCESS
    assert "FACILITY_WIN32" in out
    assert "failure" in out
    assert "E_ACCESSDENIED" in out


def test_decode_json_unregistered_facility(run) -> None:
    code, out, _ = run("--json", "decode", "0x80050001")

    assert code == ExitCode.SUCCESS
    payload = json.loads(out)
    assert payload["facility"] is None
    assert payload["facility_code"] == 5
    assert payload["names"] == []


def test_facility_by_code_and_name(run) -> None:
    code, out, _ = run("facility", "7")
    assert code == ExitCode.SUCCESS
    assert "FACILITY_WIN32" in out

    code, out, _ = run("facility", "security")
    assert code == ExitCode.SUCCESS
    assert "FACILITY_SECURITY" in out


def test_facility_unknown(run) -> None:
    code, _, _ = run("facility", "0x05")

    assert code == ExitCode.SUCCESS_NO_MATCH


def test_list_facility_failures(run) -> None:
    code, out, _ = run("--json", "list", "--facility", "WIN32", "--failures")

    assert code == ExitCode.SUCCESS
    rows = json.loads(out)
    assert rows
    assert all(r["facility"] == "FACILITY_WIN32" and r["failure"] for r in rows)


def test_list_successes_win32(run) -> None:
    code, out, _ = run("list", "--table", "win32", "--successes")

    assert code == ExitCode.SUCCESS
    lines = out.strip().splitlines()
    assert len(lines) == 1
    assert "ERROR_SUCCESS" in lines[0]


def test_list_facility_rejected_outside_hresult(run) -> None:
    code, _, _ = run("list", "--table", "win32", "--facility", "WIN32")

    assert code == ExitCode.INVALID_ARGUMENTS


def test_list_unknown_facility(run) -> None:
    code, _, _ = run("list", "--facility", "NOPE")

    assert code == ExitCode.INVALID_ARGUMENTS


def test_verify_all(run) -> None:
    code, out, _ = run("--no-progress", "verify")

    assert code == ExitCode.SUCCESS
    assert "HRESULT" in out
    assert "Win32" in out
    assert "NTSTATUS" in out


def test_config_lifecycle(run) -> None:
    code, _, _ = run("config", "init")
    assert code == ExitCode.SUCCESS
    assert run.config_path.exists()

    code, _, _ = run("config", "set", "--default-table", "win32")
    assert code == ExitCode.SUCCESS

    code, out, _ = run("config", "show")
    assert json.loads(out)["lookup"]["default_table"] == "win32"

    code, out, _ = run("lookup", "5")
    assert code == ExitCode.SUCCESS
    assert "ERROR_ACCESS_DENIED" in out

    code, _, _ = run("config", "validate")
    assert code == ExitCode.SUCCESS

    code, _, _ = run("config", "reset")
    assert code == ExitCode.SUCCESS
    assert not run.config_path.exists()


def test_broken_config(run) -> None:
    run.config_path.write_text("{broken", encoding="utf-8")

    code, _, _ = run("lookup", "5")

    assert code == ExitCode.CONFIG_INVALID


def test_invalid_config_value(run) -> None:
    run.config_path.write_text(json.dumps({"output": {"format": "xml"}}), encoding="utf-8")

    code, _, _ = run("config", "validate")

    assert code == ExitCode.CONFIG_INVALID


@pytest.mark.parametrize("alias", ["exit", "quit", "q", "x"])
def test_exit_aliases(run, alias) -> None:
    code, _, _ = run(alias)

    assert code == ExitCode.SUCCESS_OPERATOR_EXIT


def test_missing_command(run) -> None:
    code, _, _ = run()

    assert code == ExitCode.INVALID_ARGUMENTS


def test_bad_choice(run) -> None:
    code, _, err = run("lookup", "1", "--table", "posix")

    assert code == ExitCode.INVALID_ARGUMENTS
    assert "invalid choice" in err


def test_parse_value() -> None:
    assert cli.parse_value("0x80004005") == 0x80004005
    assert cli.parse_value("-2147467259") == 0x80004005
    assert cli.parse_value("0x8000_4005") == 0x80004005
    assert cli.parse_value("010") == 10


@pytest.mark.parametrize("name", ["BACKGROUNDCOPY", "FVE", "FACILITY_OPC"])
def test_list_rejects_facility_wider_than_field(run, name) -> None:
    code, _, err = run("list", "--facility", name)

    assert code == ExitCode.INVALID_ARGUMENTS
    assert "5-bit facility field" in err


def test_list_accepts_widest_facility_in_field(run) -> None:
    code, _, _ = run("list", "--facility", "USERMODE_FILTER_MANAGER")

    assert code in (ExitCode.SUCCESS, ExitCode.SUCCESS_NO_MATCH)
