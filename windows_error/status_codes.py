#!/usr/bin/env python3
"""
windows_error/status_codes.py

Runtime status code catalog for windows-error.

Rules:
- Each status code represents ONE concrete runtime event.
- No code is reused for multiple failure modes.
- Descriptions are factual and operational.
"""

from enum import IntEnum


class StatusCode(IntEnum):

    # ============================================================
    # 0-9 : SUCCESS / NON-ERROR TERMINATION
    # ============================================================

    OK = 0
    """Execution completed successfully. All operations completed as requested."""

    OK_NO_MATCH = 1
    """Lookup completed successfully. No table entry matched the requested value."""

    OK_MULTIPLE_MATCHES = 2
    """Lookup completed successfully. More than one table entry matched the value."""

    OK_FACILITY_UNREGISTERED = 3
    """Decode completed successfully. The facility field maps to no registered facility."""

    # ============================================================
    # 10-19 : CONFIGURATION
    # ============================================================

    CONFIG_INVALID = 11
    """Configuration exists but failed validation."""

    CONFIG_UNREADABLE = 12
    """Configuration file exists but could not be read or parsed."""

    CONFIG_WRITE_FAILED = 13
    """Configuration file could not be written."""

    CONFIG_UNSUPPORTED = 14
    """Configuration specifies an unsupported option or value."""

    CONFIG_ENV_INVALID = 15
    """Environment variable exists but contains invalid data."""

    # ============================================================
    # 20-29 : INPUT VALIDATION
    # ============================================================

    INPUT_NOT_INTEGER = 20
    """A value that must be an integer was of another type."""

    INPUT_OUT_OF_RANGE = 21
    """An integer value was outside the range accepted by the operation."""

    INPUT_UNPARSEABLE = 22
    """A textual value could not be parsed as an integer."""

    INPUT_EMPTY_NAME = 23
    """An error code name was missing or empty."""

    INPUT_EMPTY_DESCRIPTION = 24
    """An error code description was missing or empty."""

    INPUT_UNKNOWN_TABLE = 25
    """The requested error code table does not exist."""

    INPUT_UNKNOWN_FACILITY = 26
    """The requested facility name is not registered."""

    # ============================================================
    # 30-39 : TABLE INTEGRITY
    # ============================================================

    TABLE_DUPLICATE_NAME = 30
    """Two constants in one table were declared with the same name."""

    TABLE_DUPLICATE_VALUE = 31
    """Two constants in one table share the same value."""

    TABLE_VALUE_OUT_OF_RANGE = 32
    """A table entry carries a value outside the unsigned 32-bit range."""

    TABLE_EMPTY_DESCRIPTION = 33
    """A table entry carries an empty description."""

    TABLE_FACILITY_UNRESOLVED = 34
    """An HRESULT entry's facility field maps to no registered facility."""

    TABLE_EMPTY = 35
    """A table holds no entries."""

    # ============================================================
    # 80-89 : EXECUTION / RUNTIME
    # ============================================================

    EXECUTION_INTERRUPTED = 80
    """Execution was interrupted by operator or signal."""

    EXECUTION_UNHANDLED_EXCEPTION = 81
    """Unhandled exception occurred during execution."""
