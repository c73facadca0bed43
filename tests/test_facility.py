from __future__ import annotations

import pytest

from windows_error.error_code import InvalidArgument
from windows_error.h_result import facility


def test_find_by_code_known() -> None:
    assert facility.find_by_code(7) is facility.FACILITY_WIN32
    assert facility.find_by_code(0) is facility.FACILITY_NULL
    assert facility.find_by_code(0x51) is facility.FACILITY_OPC


def test_find_by_code_shared_value_prefers_sorted_name() -> None:
    assert facility.find_by_code(9) is facility.FACILITY_SECURITY


def test_find_by_code_unknown_returns_none() -> None:
    assert facility.find_by_code(0x05) is None
    assert facility.find_by_code(0x3B) is None


def test_find_by_code_rejects_non_integer() -> None:
    with pytest.raises(InvalidArgument):
        facility.find_by_code("7")
    with pytest.raises(InvalidArgument):
        facility.find_by_code(None)


def test_find_by_name() -> None:
    assert facility.find_by_name("FACILITY_RPC") is facility.FACILITY_RPC
    assert facility.find_by_name("win32") is facility.FACILITY_WIN32
    assert facility.find_by_name(" Security ") is facility.FACILITY_SECURITY
    assert facility.find_by_name("nope") is None


def test_facility_equality() -> None:
    assert facility.FACILITY_SECURITY == facility.FACILITY_SSPI
    assert facility.FACILITY_WIN32 == 7
    assert facility.FACILITY_WIN32 != 8
    assert (facility.FACILITY_WIN32 == None) is False  # noqa: E711
    assert facility.FACILITY_WIN32 != None  # noqa: E711
    assert (facility.FACILITY_WIN32 == "FACILITY_WIN32") is False


def test_facility_str() -> None:
    assert str(facility.FACILITY_WIN32).startswith("(0x0007) FACILITY_WIN32: ")


def test_registry_holds_every_constant() -> None:
    assert len(facility.FACILITIES) == 52
    assert all(name == f.name for name, f in facility.FACILITIES.items())
