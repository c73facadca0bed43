from __future__ import annotations

import pytest

from windows_error.error_code import (
    ErrorCode,
    ErrorCodeTable,
    InvalidArgument,
    require_uint32,
)
from windows_error.status_codes import StatusCode


def _table() -> ErrorCodeTable:
    ns = {
        "B_CODE": ErrorCode("B_CODE", 7, "second"),
        "A_CODE": ErrorCode("A_CODE", 7, "first"),
        "C_CODE": ErrorCode("C_CODE", 9, "third"),
        "not_a_code": 7,
    }
    return ErrorCodeTable.from_namespace("TEST", ns, ErrorCode)


def test_error_code_rejects_bad_fields() -> None:
    with pytest.raises(InvalidArgument, match="Invalid Error Code Value!"):
        ErrorCode("X", "1", "desc")
    with pytest.raises(InvalidArgument, match="Invalid Error Name!"):
        ErrorCode("", 1, "desc")
    with pytest.raises(InvalidArgument, match="Invalid Error Description!"):
        ErrorCode("X", 1, "")


def test_error_code_equality_and_hash() -> None:
    a = ErrorCode("A", 5, "one")
    b = ErrorCode("B", 5, "two")

    assert a == b
    assert a == 5
    assert a != 6
    assert hash(a) == hash(b)
    assert (a == "5") is False


def test_error_code_is_immutable() -> None:
    code = ErrorCode("A", 5, "one")
    with pytest.raises(AttributeError):
        code.value = 6


def test_error_code_str_and_dict() -> None:
    code = ErrorCode("E_FAIL", 0x80004005, "Unspecified error.")

    assert str(code) == "(0x80004005) E_FAIL: Unspecified error."
    assert code.to_dict() == {
        "name": "E_FAIL",
        "value": 0x80004005,
        "hex": "0x80004005",
        "description": "Unspecified error.",
    }


def test_require_uint32_status_codes() -> None:
    assert require_uint32(0) == 0
    assert require_uint32(0xFFFFFFFF) == 0xFFFFFFFF

    with pytest.raises(InvalidArgument) as excinfo:
        require_uint32(True)
    assert excinfo.value.status_code == StatusCode.INPUT_NOT_INTEGER

    with pytest.raises(InvalidArgument) as excinfo:
        require_uint32(2 ** 32)
    assert excinfo.value.status_code == StatusCode.INPUT_OUT_OF_RANGE


def test_invalid_argument_is_type_and_value_error() -> None:
    with pytest.raises(TypeError):
        require_uint32(1.5)
    with pytest.raises(ValueError):
        require_uint32(-1)


def test_table_from_namespace_collects_entries() -> None:
    table = _table()

    assert len(table) == 3
    assert "A_CODE" in table
    assert "not_a_code" not in table
    assert table["C_CODE"].value == 9
    assert table.get("MISSING") is None
    assert table.names() == ["B_CODE", "A_CODE", "C_CODE"]


def test_table_find_by_value_sorted_by_name() -> None:
    table = _table()

    assert [e.name for e in table.find_by_value(7)] == ["A_CODE", "B_CODE"]
    assert table.find_by_value(8) == []


def test_table_find_by_value_validates() -> None:
    with pytest.raises(InvalidArgument):
        _table().find_by_value("7")


def test_table_rejects_misbound_constant() -> None:
    with pytest.raises(ValueError):
        ErrorCodeTable.from_namespace("TEST", {"ALIAS": ErrorCode("REAL", 1, "d")}, ErrorCode)
