from __future__ import annotations

import ast
from collections import Counter
from pathlib import Path

import pytest

from windows_error.error_code import InvalidArgument
from windows_error.h_result import codes, decoder, facility
from windows_error.h_result.h_result_code import HResultCode
from windows_error.status_codes import StatusCode

CODES_PATH = Path(codes.__file__)


def test_find_by_retval_single_match() -> None:
    assert codes.find_by_retval(0x80004005) == [codes.E_FAIL]
    assert codes.find_by_retval(0x80004005)[0] is codes.E_FAIL


def test_find_by_retval_s_ok_is_not_listed() -> None:
    assert codes.find_by_retval(0) == []


def test_find_by_retval_unknown_value() -> None:
    assert codes.find_by_retval(0x8000DEAD) == []


@pytest.mark.parametrize("bad", [True, "0x80004005", 1.0, None])
def test_find_by_retval_rejects_non_integers(bad) -> None:
    with pytest.raises(InvalidArgument):
        codes.find_by_retval(bad)


@pytest.mark.parametrize("bad", [-1, 2 ** 32])
def test_find_by_retval_rejects_out_of_range(bad) -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        codes.find_by_retval(bad)
    assert excinfo.value.status_code == StatusCode.INPUT_OUT_OF_RANGE


def test_find_by_retval_every_entry_finds_itself() -> None:
    for entry in codes.TABLE:
        assert entry in codes.find_by_retval(entry.value)


def test_e_outofmemory_fields() -> None:
    entry = codes.E_OUTOFMEMORY

    assert entry.code() == 0x000E
    assert entry.is_failure()
    assert not entry.is_success()
    assert not entry.is_customer()
    assert entry.facility() is facility.FACILITY_WIN32


def test_e_accessdenied_facility() -> None:
    assert decoder.facility_code(codes.E_ACCESSDENIED.value) == 7
    assert codes.E_ACCESSDENIED.code() == 5


def test_security_codes_resolve_to_facility_security() -> None:
    assert codes.SEC_E_INVALID_TOKEN.facility() is facility.FACILITY_SECURITY


def test_success_code() -> None:
    entry = codes.STG_S_CONVERTED

    assert entry.is_success()
    assert entry.facility() is facility.FACILITY_STORAGE


def test_customer_bit() -> None:
    assert decoder.is_customer(0x20000001)
    assert not decoder.is_customer(0x00000001)
    # severity bit set alongside customer bit reads as not customer
    assert not decoder.is_customer(0xA0000001)


def test_unregistered_facility_is_none() -> None:
    assert decoder.facility(0x80050001) is None


def test_accessors_are_idempotent() -> None:
    entry = codes.E_INVALIDARG
    assert entry.code() == entry.code()
    assert entry.facility() is entry.facility()
    assert entry.is_failure() == entry.is_failure()


def test_decode_matches_accessors() -> None:
    fields = decoder.decode(codes.E_FAIL.value)

    assert fields.code == codes.E_FAIL.code()
    assert fields.facility is codes.E_FAIL.facility()
    assert fields.failure is True
    assert fields.success is False
    assert fields.to_dict()["hex"] == "0x80004005"


def test_to_unsigned() -> None:
    assert decoder.to_unsigned(-2147467259) == 0x80004005
    assert decoder.to_unsigned(0x80004005) == 0x80004005
    with pytest.raises(InvalidArgument):
        decoder.to_unsigned(-0x80000001)
    with pytest.raises(InvalidArgument):
        decoder.to_unsigned(2 ** 32)


def test_h_result_code_rejects_out_of_range() -> None:
    with pytest.raises(InvalidArgument):
        HResultCode("E_TOO_BIG", 2 ** 32, "too big")
    with pytest.raises(InvalidArgument):
        HResultCode("E_NEGATIVE", -1, "negative")


def test_to_dict_carries_decoded_fields() -> None:
    out = codes.E_OUTOFMEMORY.to_dict()

    assert out["name"] == "E_OUTOFMEMORY"
    assert out["facility"] == "FACILITY_WIN32"
    assert out["failure"] is True
    assert out["customer"] is False


def test_table_matches_module_constants() -> None:
    declared = {
        name for name, obj in vars(codes).items() if isinstance(obj, HResultCode)
    }
    assert set(codes.TABLE.names()) == declared


def test_each_constant_assigned_once() -> None:
    tree = ast.parse(CODES_PATH.read_text(encoding="utf-8"))
    targets = Counter(
        target.id
        for node in tree.body
        if isinstance(node, ast.Assign)
        for target in node.targets
        if isinstance(target, ast.Name)
    )
    assert [name for name, count in targets.items() if count > 1] == []


def test_every_entry_has_registered_facility() -> None:
    unresolved = [e.name for e in codes.TABLE if e.facility() is None]
    assert unresolved == []


def test_accessors_match_bit_formulas_for_every_entry() -> None:
    for entry in codes.TABLE:
        v = entry.value

        assert entry.code() == v & 0xFFFF
        assert entry.is_failure() == (v >> 31 == 1)
        assert entry.is_success() == (not entry.is_failure())
        assert entry.is_customer() == (v >> 29 == 1)
        assert entry.facility() is facility.find_by_code((v >> 16) & 0b11111)
