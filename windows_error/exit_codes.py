#!/usr/bin/env python3
"""
exit_codes.py

AUTHORITATIVE EXIT CODE CONTRACT FOR windows-error

This file defines the ONLY exit codes allowed to leave the process boundary.
cli.py maps every internal outcome (StatusCode, exceptions) to one of these.

Each exit code below documents:
- EXACT condition that triggers it
- WHICH layer emits it
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """
    ExitCode enumeration.

    All exit codes are unique, stable, and non-overlapping.
    Renumbering is forbidden once published.
    """

    # ------------------------------------------------------------------
    # 0-9 : SUCCESS
    # ------------------------------------------------------------------

    SUCCESS = 0
    """
    WHEN:
        - The requested command completed
        - Lookups returned at least one entry
    SET BY:
        - cli.py after successful handler completion
    """

    SUCCESS_NO_MATCH = 1
    """
    WHEN:
        - A lookup, facility or list query completed but matched nothing
    SET BY:
        - cli.py lookup / facility / list handlers
    """

    SUCCESS_OPERATOR_EXIT = 2
    """
    WHEN:
        - Operator asked to quit or interrupted execution (Ctrl-C)
    SET BY:
        - cli.py
    """

    # ------------------------------------------------------------------
    # 10-19 : CLI / OPERATOR ERRORS (INPUT & INVOCATION)
    # ------------------------------------------------------------------

    INVALID_ARGUMENTS = 10
    """
    WHEN:
        - argparse fails validation
        - A value is not an integer or is outside the 32-bit range
        - An unknown table or facility name is given
    SET BY:
        - cli.py only
    """

    CONFIG_INVALID = 11
    """
    WHEN:
        - Config file exists but cannot be parsed or fails validation
    SET BY:
        - cli.py
        - windows_error.config
    """

    CONFIG_WRITE_FAILED = 12
    """
    WHEN:
        - Config file could not be written or removed
    SET BY:
        - config command handlers
    """

    UNSUPPORTED_COMMAND = 13
    """
    WHEN:
        - CLI command is recognized syntactically
        - But no execution handler exists
    SET BY:
        - cli.py dispatch layer
    """

    # ------------------------------------------------------------------
    # 20-29 : TABLE INTEGRITY
    # ------------------------------------------------------------------

    TABLE_VERIFY_FAILED = 20
    """
    WHEN:
        - verify found at least one integrity violation in a table
    SET BY:
        - windows_error.audit
    """

    TABLE_VERIFY_WARNINGS = 21
    """
    WHEN:
        - verify found no violations but reported warnings
          (shared values, unresolved facilities)
    SET BY:
        - windows_error.audit
    """

    # ------------------------------------------------------------------
    # 70-79 : INTERNAL SYSTEM ERRORS
    # ------------------------------------------------------------------

    RUNTIME_EXCEPTION = 70
    """
    WHEN:
        - Unhandled exception escapes a command handler
    SET BY:
        - Top-level exception handler
    EFFECT:
        - Indicates bug
    """
