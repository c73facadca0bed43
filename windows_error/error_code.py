#!/usr/bin/env python3
"""
windows_error/error_code.py

Value object and read-only table shared by every error code family
(HRESULT, Win32, NTSTATUS).

Rules:
- An ErrorCode is immutable once constructed.
- A table is built once, at import time of the module that declares its
  constants, and never mutated afterwards.
- Lookups scan names in sorted order so results are deterministic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Type

from windows_error.status_codes import StatusCode

logger = logging.getLogger(__name__)

UINT32_MAX = 0xFFFFFFFF


class InvalidArgument(TypeError, ValueError):
    """
    Raised where a caller hands over a value the operation cannot accept.

    Subclasses both TypeError (wrong type) and ValueError (right type, wrong
    range) so callers may catch whichever fits their code.
    """

    def __init__(self, message: str, status_code: StatusCode = StatusCode.INPUT_NOT_INTEGER):
        super().__init__(message)
        self.status_code = status_code


def is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def require_uint32(value: Any, message: str = "Invalid value!") -> int:
    """
    Validate that value is an int within 0..0xFFFFFFFF and return it.
    """
    if not is_integer(value):
        raise InvalidArgument(message, StatusCode.INPUT_NOT_INTEGER)
    if value < 0 or value > UINT32_MAX:
        raise InvalidArgument(message, StatusCode.INPUT_OUT_OF_RANGE)
    return value


# ============================================================
# Value object
# ============================================================

@dataclass(frozen=True, eq=False)
class ErrorCode:
    """
    A named Windows error code and its documented meaning.

    See https://learn.microsoft.com/en-us/openspecs/windows_protocols/ms-erref
    for the code families this library covers.
    """

    name: str
    value: int
    description: str

    def __post_init__(self) -> None:
        if not is_integer(self.value):
            raise InvalidArgument("Invalid Error Code Value!", StatusCode.INPUT_NOT_INTEGER)
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgument("Invalid Error Name!", StatusCode.INPUT_EMPTY_NAME)
        if not isinstance(self.description, str) or not self.description:
            raise InvalidArgument("Invalid Error Description!", StatusCode.INPUT_EMPTY_DESCRIPTION)

    def __eq__(self, other: object) -> bool:
        # codes from different families never compare equal
        if isinstance(other, ErrorCode):
            return type(other) is type(self) and self.value == other.value
        if is_integer(other):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return f"(0x{self.value:08X}) {self.name}: {self.description}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "value": self.value,
            "hex": f"0x{self.value:08X}",
            "description": self.description,
        }


# ============================================================
# Table
# ============================================================

class ErrorCodeTable:
    """
    Read-only, insertion-ordered mapping of constant name -> ErrorCode.

    Build it with from_namespace() at the bottom of the module that declares
    the constants; every module-level ErrorCode of the requested type becomes
    an entry under its variable name.
    """

    def __init__(self, label: str, entries: Mapping[str, ErrorCode]):
        self.label = label
        self._entries: Dict[str, ErrorCode] = dict(entries)
        self._sorted_names: List[str] = sorted(self._entries)

    @classmethod
    def from_namespace(
        cls,
        label: str,
        namespace: Mapping[str, Any],
        entry_type: Type[ErrorCode],
    ) -> "ErrorCodeTable":
        entries: Dict[str, ErrorCode] = {}
        seen: Dict[str, str] = {}

        for attr, obj in namespace.items():
            if not isinstance(obj, entry_type):
                continue
            if attr != obj.name:
                raise ValueError(
                    f"{label}: constant {attr} is bound to entry named {obj.name}"
                )
            if obj.name in seen:
                raise ValueError(f"{label}: duplicate constant name {obj.name}")
            seen[obj.name] = attr
            entries[attr] = obj

        logger.debug("TABLE_LOADED table=%s entries=%d", label, len(entries))
        return cls(label, entries)

    # --------------------------------------------------------
    # Mapping protocol (read-only)
    # --------------------------------------------------------
    def __getitem__(self, name: str) -> ErrorCode:
        return self._entries[name]

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[ErrorCode]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<ErrorCodeTable {self.label} entries={len(self._entries)}>"

    def get(self, name: str) -> Optional[ErrorCode]:
        return self._entries.get(name)

    def names(self) -> List[str]:
        return list(self._entries)

    def entries(self) -> List[ErrorCode]:
        return list(self._entries.values())

    # --------------------------------------------------------
    # Lookup
    # --------------------------------------------------------
    def find_by_value(self, value: Any) -> List[ErrorCode]:
        """
        Return every entry whose value equals the supplied integer.

        Entries are scanned in name-sorted order. An empty list is a normal
        outcome. Raises InvalidArgument unless value is an int in the
        unsigned 32-bit range.
        """
        require_uint32(value)
        return [
            self._entries[name]
            for name in self._sorted_names
            if self._entries[name].value == value
        ]
