#!/usr/bin/env python3
"""
windows_error/h_result/decoder.py

Bit-field decoding of raw HRESULT values (MS-ERREF 2.1):

    bit 31      : severity (1 = failure, 0 = success)
    bit 29      : customer flag, read as (value >> 29) == 1
    bits 16..20 : facility (5-bit mask)
    bits 0..15  : code

Every function works on the unsigned 32-bit form of the value. Signed
HRESULTs, as handed out by ctypes and comtypes, go through to_unsigned()
first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from windows_error.error_code import InvalidArgument, is_integer, require_uint32
from windows_error.h_result import facility as facility_registry
from windows_error.h_result.facility import FacilityCode
from windows_error.status_codes import StatusCode

CODE_MASK = 0xFFFF
FACILITY_MASK = 0b11111
FACILITY_SHIFT = 16
CUSTOMER_SHIFT = 29
SEVERITY_SHIFT = 31

INT32_MIN = -0x80000000


def to_unsigned(value: Any) -> int:
    """
    Fold a signed 32-bit HRESULT onto its unsigned form.

        >>> hex(to_unsigned(-2147467259))
        '0x80004005'
        >>> to_unsigned(0x80004005) == 0x80004005
        True
    """
    if not is_integer(value):
        raise InvalidArgument("Invalid value!", StatusCode.INPUT_NOT_INTEGER)
    if value < INT32_MIN or value > 0xFFFFFFFF:
        raise InvalidArgument("Invalid value!", StatusCode.INPUT_OUT_OF_RANGE)
    return value & 0xFFFFFFFF


def code(value: int) -> int:
    return require_uint32(value) & CODE_MASK


def facility_code(value: int) -> int:
    return (require_uint32(value) >> FACILITY_SHIFT) & FACILITY_MASK


def facility(value: int) -> Optional[FacilityCode]:
    return facility_registry.find_by_code(facility_code(value))


def is_customer(value: int) -> bool:
    # true only when bits 31..29 read 0b001
    return (require_uint32(value) >> CUSTOMER_SHIFT) == 1


def is_failure(value: int) -> bool:
    return (require_uint32(value) >> SEVERITY_SHIFT) == 1


def is_success(value: int) -> bool:
    return not is_failure(value)


@dataclass(frozen=True)
class HResultFields:
    value: int
    code: int
    facility_code: int
    facility: Optional[FacilityCode]
    customer: bool
    failure: bool

    @property
    def success(self) -> bool:
        return not self.failure

    def to_dict(self) -> Dict[str, Any]:
        return {
            "value": self.value,
            "hex": f"0x{self.value:08X}",
            "code": self.code,
            "facility_code": self.facility_code,
            "facility": self.facility.name if self.facility else None,
            "customer": self.customer,
            "failure": self.failure,
            "success": self.success,
        }


def decode(value: int) -> HResultFields:
    """
    Decode every HRESULT field of an unsigned 32-bit value in one pass.
    """
    require_uint32(value)
    return HResultFields(
        value=value,
        code=code(value),
        facility_code=facility_code(value),
        facility=facility(value),
        customer=is_customer(value),
        failure=is_failure(value),
    )
