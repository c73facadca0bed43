#!/usr/bin/env python3
"""
windows_error/h_result/h_result_code.py

HResultCode: an ErrorCode whose value is an unsigned 32-bit HRESULT, with
accessors for the HRESULT sub-fields. Accessors are recomputed on every call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from windows_error.error_code import ErrorCode, require_uint32
from windows_error.h_result import decoder
from windows_error.h_result.facility import FacilityCode


@dataclass(frozen=True, eq=False)
class HResultCode(ErrorCode):

    def __post_init__(self) -> None:
        super().__post_init__()
        require_uint32(self.value, "Invalid Error Code Value!")

    def code(self) -> int:
        """The low 16 bits of the HRESULT."""
        return decoder.code(self.value)

    def is_customer(self) -> bool:
        """True when the top three bits are exactly 001."""
        return decoder.is_customer(self.value)

    def facility(self) -> Optional[FacilityCode]:
        """
        The registered facility for bits 16..20, or None when that 5-bit
        code has no registered facility.
        """
        return decoder.facility(self.value)

    def is_failure(self) -> bool:
        return decoder.is_failure(self.value)

    def is_success(self) -> bool:
        return not self.is_failure()

    def to_dict(self) -> Dict[str, Any]:
        out = super().to_dict()
        facility = self.facility()
        out.update(
            {
                "code": self.code(),
                "facility": facility.name if facility else None,
                "customer": self.is_customer(),
                "failure": self.is_failure(),
                "success": self.is_success(),
            }
        )
        return out
