from __future__ import annotations

import pytest

from windows_error import nt_status, win32
from windows_error.error_code import InvalidArgument
from windows_error.h_result import codes


def test_win32_success_is_listed() -> None:
    assert win32.find_by_retval(0) == [win32.ERROR_SUCCESS]
    assert win32.ERROR_SUCCESS.is_success()


def test_win32_lookup() -> None:
    assert win32.find_by_retval(5) == [win32.ERROR_ACCESS_DENIED]
    assert win32.ERROR_ACCESS_DENIED.is_failure()


def test_win32_to_h_result() -> None:
    assert win32.ERROR_SUCCESS.to_h_result() == 0
    assert win32.ERROR_ACCESS_DENIED.to_h_result() == codes.E_ACCESSDENIED.value
    assert win32.ERROR_OUTOFMEMORY.to_h_result() == codes.E_OUTOFMEMORY.value
    assert win32.ERROR_INVALID_PARAMETER.to_h_result() == codes.E_INVALIDARG.value


def test_win32_rejects_bad_values() -> None:
    with pytest.raises(InvalidArgument):
        win32.find_by_retval(-5)
    with pytest.raises(InvalidArgument):
        win32.Win32Code("ERROR_X", 2 ** 32, "too big")


def test_nt_status_success_is_listed() -> None:
    assert nt_status.find_by_retval(0) == [nt_status.STATUS_SUCCESS]


def test_nt_status_severity() -> None:
    assert nt_status.STATUS_SUCCESS.severity() == nt_status.SEVERITY_SUCCESS
    assert nt_status.STATUS_BUFFER_OVERFLOW.severity() == nt_status.SEVERITY_WARNING
    assert nt_status.STATUS_ACCESS_DENIED.severity() == nt_status.SEVERITY_ERROR
    assert nt_status.STATUS_ACCESS_DENIED.is_error()
    assert not nt_status.STATUS_BUFFER_OVERFLOW.is_error()


def test_nt_status_failure_follows_nt_success() -> None:
    assert nt_status.STATUS_PENDING.is_success()
    assert nt_status.STATUS_TIMEOUT.is_success()
    assert nt_status.STATUS_BUFFER_OVERFLOW.is_failure()
    assert nt_status.STATUS_ACCESS_DENIED.is_failure()


def test_families_do_not_compare_equal() -> None:
    assert win32.WAIT_TIMEOUT.value == nt_status.STATUS_TIMEOUT.value
    assert win32.WAIT_TIMEOUT != nt_status.STATUS_TIMEOUT


def test_tables_labelled() -> None:
    assert win32.TABLE.label == "Win32"
    assert nt_status.TABLE.label == "NTSTATUS"
    assert len(win32.TABLE) > 100
    assert len(nt_status.TABLE) > 100
