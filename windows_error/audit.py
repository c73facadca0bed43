#!/usr/bin/env python3
"""
windows_error/audit.py

Integrity audit for an ErrorCodeTable.

Responsibilities:
- Check exactly ONE table per run
- Track deterministic counts
- Separate violations (table is wrong) from warnings (table is unusual)
- Emit StatusCode for runtime semantics
- Emit ExitCode exactly once at termination

Violations:
- duplicate constant name
- value outside 0..0xFFFFFFFF
- empty description

Warnings:
- two entries share one value
- an HRESULT entry whose facility field has no registered facility
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from tqdm import tqdm

from windows_error.error_code import UINT32_MAX, ErrorCodeTable, is_integer
from windows_error.exit_codes import ExitCode
from windows_error.h_result import decoder
from windows_error.status_codes import StatusCode

logger = logging.getLogger(__name__)


# ============================================================
# Result structure
# ============================================================

@dataclass(frozen=True)
class AuditFinding:
    status_code: StatusCode
    name: str
    detail: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "status": self.status_code.name,
            "name": self.name,
            "detail": self.detail,
        }


@dataclass(frozen=True)
class AuditResult:
    status_code: StatusCode
    exit_code: ExitCode

    table: str
    entries_checked: int

    violations: List[AuditFinding] = field(default_factory=list)
    warnings: List[AuditFinding] = field(default_factory=list)

    duration_seconds: float = 0.0
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        return {
            "table": self.table,
            "status": self.status_code.name,
            "exit_code": int(self.exit_code),
            "entries_checked": self.entries_checked,
            "violations": [f.to_dict() for f in self.violations],
            "warnings": [f.to_dict() for f in self.warnings],
            "duration_seconds": round(self.duration_seconds, 4),
            "message": self.message,
        }


# ============================================================
# Executor
# ============================================================

class TableAudit:
    """
    Audits a single table.

    check_facilities resolves each entry's facility field against the
    HRESULT facility registry; enable it for HRESULT tables only.
    """

    def __init__(
        self,
        table: ErrorCodeTable,
        *,
        check_facilities: bool = False,
        show_progress: bool = True,
    ):
        if not isinstance(table, ErrorCodeTable):
            raise TypeError("table must be an ErrorCodeTable")

        self.table = table
        self.check_facilities = check_facilities
        self.show_progress = show_progress

    # --------------------------------------------------------
    # Public
    # --------------------------------------------------------
    def run(self) -> AuditResult:
        start_time = time.monotonic()

        checked = 0
        violations: List[AuditFinding] = []
        warnings: List[AuditFinding] = []

        seen_names: Dict[str, int] = {}
        by_value: Dict[int, List[str]] = {}

        try:
            entries = self.table.entries()

            if not entries:
                violations.append(
                    AuditFinding(StatusCode.TABLE_EMPTY, self.table.label, "table holds no entries")
                )
                return self._finish(
                    StatusCode.TABLE_EMPTY,
                    ExitCode.TABLE_VERIFY_FAILED,
                    start_time,
                    checked,
                    violations,
                    warnings,
                )

            iterator = entries
            if self.show_progress:
                iterator = tqdm(entries, desc=f"Auditing {self.table.label}", unit="code")

            for entry in iterator:
                checked += 1

                if entry.name in seen_names:
                    logger.error("AUDIT_DUPLICATE_NAME table=%s name=%s", self.table.label, entry.name)
                    violations.append(
                        AuditFinding(StatusCode.TABLE_DUPLICATE_NAME, entry.name, "name declared twice")
                    )
                seen_names[entry.name] = entry.value

                if not is_integer(entry.value) or not 0 <= entry.value <= UINT32_MAX:
                    logger.error("AUDIT_VALUE_OUT_OF_RANGE table=%s name=%s", self.table.label, entry.name)
                    violations.append(
                        AuditFinding(
                            StatusCode.TABLE_VALUE_OUT_OF_RANGE,
                            entry.name,
                            f"value {entry.value!r} is not an unsigned 32-bit integer",
                        )
                    )
                    continue

                if not entry.description.strip():
                    logger.error("AUDIT_EMPTY_DESCRIPTION table=%s name=%s", self.table.label, entry.name)
                    violations.append(
                        AuditFinding(StatusCode.TABLE_EMPTY_DESCRIPTION, entry.name, "description is blank")
                    )

                by_value.setdefault(entry.value, []).append(entry.name)

                if self.check_facilities and decoder.facility(entry.value) is None:
                    logger.warning(
                        "AUDIT_FACILITY_UNRESOLVED table=%s name=%s facility=0x%02X",
                        self.table.label,
                        entry.name,
                        decoder.facility_code(entry.value),
                    )
                    warnings.append(
                        AuditFinding(
                            StatusCode.TABLE_FACILITY_UNRESOLVED,
                            entry.name,
                            f"facility 0x{decoder.facility_code(entry.value):02X} is not registered",
                        )
                    )

            for value, names in sorted(by_value.items()):
                if len(names) > 1:
                    logger.warning(
                        "AUDIT_SHARED_VALUE table=%s value=0x%08X names=%s",
                        self.table.label,
                        value,
                        ",".join(sorted(names)),
                    )
                    warnings.append(
                        AuditFinding(
                            StatusCode.TABLE_DUPLICATE_VALUE,
                            ",".join(sorted(names)),
                            f"value 0x{value:08X} is shared",
                        )
                    )

            # -----------------------------
            # SEMANTICS
            # -----------------------------
            if violations:
                return self._finish(
                    violations[0].status_code,
                    ExitCode.TABLE_VERIFY_FAILED,
                    start_time,
                    checked,
                    violations,
                    warnings,
                )

            if warnings:
                return self._finish(
                    warnings[0].status_code,
                    ExitCode.TABLE_VERIFY_WARNINGS,
                    start_time,
                    checked,
                    violations,
                    warnings,
                )

            return self._finish(
                StatusCode.OK,
                ExitCode.SUCCESS,
                start_time,
                checked,
                violations,
                warnings,
            )

        except KeyboardInterrupt:
            logger.warning("Audit interrupted by operator")
            return self._finish(
                StatusCode.EXECUTION_INTERRUPTED,
                ExitCode.SUCCESS_OPERATOR_EXIT,
                start_time,
                checked,
                violations,
                warnings,
            )

        except Exception as e:
            logger.exception("Unhandled audit exception")
            return self._finish(
                StatusCode.EXECUTION_UNHANDLED_EXCEPTION,
                ExitCode.RUNTIME_EXCEPTION,
                start_time,
                checked,
                violations,
                warnings,
                message=str(e),
            )

    # --------------------------------------------------------
    # Internal
    # --------------------------------------------------------
    def _finish(
        self,
        status: StatusCode,
        exit_code: ExitCode,
        start_time: float,
        checked: int,
        violations: List[AuditFinding],
        warnings: List[AuditFinding],
        message: Optional[str] = None,
    ) -> AuditResult:
        duration = time.monotonic() - start_time

        logger.info(
            "Audit completed | table=%s status=%s exit=%s checked=%d "
            "violations=%d warnings=%d duration=%.2fs",
            self.table.label,
            status.name,
            exit_code.name,
            checked,
            len(violations),
            len(warnings),
            duration,
        )

        return AuditResult(
            status_code=status,
            exit_code=exit_code,
            table=self.table.label,
            entries_checked=checked,
            violations=list(violations),
            warnings=list(warnings),
            duration_seconds=duration,
            message=message,
        )
