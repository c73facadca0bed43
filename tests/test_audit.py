from __future__ import annotations

import pytest

from windows_error import nt_status, win32
from windows_error.audit import TableAudit
from windows_error.error_code import ErrorCode, ErrorCodeTable
from windows_error.exit_codes import ExitCode
from windows_error.h_result import codes
from windows_error.h_result.h_result_code import HResultCode
from windows_error.status_codes import StatusCode


@pytest.mark.parametrize("module, check", [(codes, True), (win32, False), (nt_status, False)])
def test_shipped_tables_are_clean(module, check) -> None:
    result = TableAudit(module.TABLE, check_facilities=check, show_progress=False).run()

    assert result.status_code == StatusCode.OK
    assert result.exit_code == ExitCode.SUCCESS
    assert result.entries_checked == len(module.TABLE)
    assert result.violations == []
    assert result.warnings == []


def test_empty_table_fails() -> None:
    result = TableAudit(ErrorCodeTable("EMPTY", {}), show_progress=False).run()

    assert result.status_code == StatusCode.TABLE_EMPTY
    assert result.exit_code == ExitCode.TABLE_VERIFY_FAILED


def test_shared_value_is_warning() -> None:
    table = ErrorCodeTable(
        "T",
        {
            "A": ErrorCode("A", 1, "one"),
            "B": ErrorCode("B", 1, "uno"),
        },
    )
    result = TableAudit(table, show_progress=False).run()

    assert result.status_code == StatusCode.TABLE_DUPLICATE_VALUE
    assert result.exit_code == ExitCode.TABLE_VERIFY_WARNINGS
    assert result.warnings[0].name == "A,B"


def test_out_of_range_value_is_violation() -> None:
    table = ErrorCodeTable("T", {"BIG": ErrorCode("BIG", 2 ** 32, "too big")})
    result = TableAudit(table, show_progress=False).run()

    assert result.status_code == StatusCode.TABLE_VALUE_OUT_OF_RANGE
    assert result.exit_code == ExitCode.TABLE_VERIFY_FAILED


def test_blank_description_is_violation() -> None:
    table = ErrorCodeTable("T", {"BLANK": ErrorCode("BLANK", 1, "   ")})
    result = TableAudit(table, show_progress=False).run()

    assert result.status_code == StatusCode.TABLE_EMPTY_DESCRIPTION
    assert result.exit_code == ExitCode.TABLE_VERIFY_FAILED


def test_unregistered_facility_is_warning() -> None:
    table = ErrorCodeTable("T", {"E_ODD": HResultCode("E_ODD", 0x80050001, "facility 5")})

    unchecked = TableAudit(table, show_progress=False).run()
    checked = TableAudit(table, check_facilities=True, show_progress=False).run()

    assert unchecked.exit_code == ExitCode.SUCCESS
    assert checked.status_code == StatusCode.TABLE_FACILITY_UNRESOLVED
    assert checked.exit_code == ExitCode.TABLE_VERIFY_WARNINGS


def test_rejects_non_table() -> None:
    with pytest.raises(TypeError):
        TableAudit([codes.E_FAIL])


def test_result_to_dict() -> None:
    out = TableAudit(win32.TABLE, show_progress=False).run().to_dict()

    assert out["table"] == "Win32"
    assert out["status"] == "OK"
    assert out["exit_code"] == 0
