#!/usr/bin/env python3
"""
cli.py

windows-error entrypoint

Responsibilities:
- Argument parsing
- Logging setup (text / JSON)
- Config load + override precedence
- Lookup / decode / facility / list / verify dispatch
- Config management dispatch
- Single authoritative ExitCode emission
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

from windows_error import nt_status, win32
from windows_error.audit import AuditResult, TableAudit
from windows_error.config import FORMAT_CHOICES, TABLE_CHOICES, Config, ConfigError
from windows_error.error_code import ErrorCode, InvalidArgument
from windows_error.exit_codes import ExitCode
from windows_error.h_result import codes, decoder, facility
from windows_error.status_codes import StatusCode

TABLES = {
    "hresult": codes,
    "win32": win32,
    "ntstatus": nt_status,
}


# ============================================================
# Logging
# ============================================================

class JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            {
                "timestamp": self.formatTime(record, "%Y-%m-%d %H:%M:%S"),
                "level": record.levelname,
                "message": record.getMessage(),
                "logger": record.name,
            }
        )


def setup_logging(verbose: bool, json_logs: bool) -> None:
    # stdout carries command output, so log records go to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        JsonLogFormatter()
        if json_logs
        else logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            "%Y-%m-%d %H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


# ============================================================
# Exit handling
# ============================================================

def _exit(code: ExitCode) -> None:
    sys.exit(int(code))


def _map_config_error(e: ConfigError) -> ExitCode:
    mapping = {
        StatusCode.CONFIG_WRITE_FAILED: ExitCode.CONFIG_WRITE_FAILED,
        StatusCode.CONFIG_ENV_INVALID: ExitCode.INVALID_ARGUMENTS,
    }
    return mapping.get(e.status_code, ExitCode.CONFIG_INVALID)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        sys.stderr.write(f"{self.prog}: error: {message}\n")
        _exit(ExitCode.INVALID_ARGUMENTS)


# ============================================================
# Helpers
# ============================================================

def parse_value(text: str) -> int:
    """
    Parse a raw code given on the command line.

    Accepts decimal, 0x-prefixed hex and negative (signed 32-bit) forms and
    returns the unsigned 32-bit value.
    """
    raw = text.strip().replace("_", "")
    try:
        value = int(raw, 0)
    except ValueError:
        try:
            value = int(raw, 10)
        except ValueError:
            raise InvalidArgument(f"Cannot parse {text!r} as an integer", StatusCode.INPUT_UNPARSEABLE) from None
    return decoder.to_unsigned(value)


def _parse_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {text!r}")


def _selected_tables(name: str) -> List[str]:
    if name == "all":
        return list(TABLES)
    if name not in TABLES:
        raise InvalidArgument(f"Unknown table {name!r}", StatusCode.INPUT_UNKNOWN_TABLE)
    return [name]


def _hex(value: int, width: int, uppercase: bool) -> str:
    return f"0x{value:0{width}X}" if uppercase else f"0x{value:0{width}x}"


def _render_entry(table: str, entry: ErrorCode, uppercase: bool) -> str:
    return f"{TABLES[table].TABLE.label:<8} ({_hex(entry.value, 8, uppercase)}) {entry.name}: {entry.description}"


def _emit_json(payload: Any) -> None:
    sys.stdout.write(json.dumps(payload, indent=2, sort_keys=True) + "\n")


def _emit_lines(lines: Iterable[str]) -> None:
    for line in lines:
        sys.stdout.write(line + "\n")


# ============================================================
# Command handlers
# ============================================================

def cmd_lookup(args: argparse.Namespace, settings: Dict[str, Any]) -> ExitCode:
    value = parse_value(args.value)
    table_names = _selected_tables(args.table or settings["default_table"])

    found: List[Dict[str, Any]] = []
    lines: List[str] = []
    for name in table_names:
        for entry in TABLES[name].find_by_retval(value):
            found.append({"table": name, **entry.to_dict()})
            lines.append(_render_entry(name, entry, settings["uppercase_hex"]))

    if not found:
        logging.info(
            "LOOKUP_NO_MATCH value=0x%08X tables=%s status=%s",
            value,
            ",".join(table_names),
            StatusCode.OK_NO_MATCH.name,
        )
    elif len(found) > 1:
        logging.info(
            "LOOKUP_MULTIPLE value=0x%08X matches=%d status=%s",
            value,
            len(found),
            StatusCode.OK_MULTIPLE_MATCHES.name,
        )
    else:
        logging.info("LOOKUP_OK value=0x%08X", value)

    if settings["json"]:
        _emit_json({"value": value, "hex": f"0x{value:08X}", "matches": found})
    elif found:
        _emit_lines(lines)
    else:
        _emit_lines([f"No entry for {_hex(value, 8, settings['uppercase_hex'])}"])

    return ExitCode.SUCCESS if found else ExitCode.SUCCESS_NO_MATCH


def cmd_decode(args: argparse.Namespace, settings: Dict[str, Any]) -> ExitCode:
    value = parse_value(args.value)
    fields = decoder.decode(value)

    if fields.facility is None:
        logging.info(
            "DECODE_FACILITY_UNREGISTERED value=0x%08X facility=0x%02X status=%s",
            value,
            fields.facility_code,
            StatusCode.OK_FACILITY_UNREGISTERED.name,
        )

    if settings["json"]:
        payload = fields.to_dict()
        payload["names"] = [e.name for e in codes.find_by_retval(value)]
        _emit_json(payload)
        return ExitCode.SUCCESS

    upper = settings["uppercase_hex"]
    facility_text = str(fields.facility) if fields.facility else "(unregistered)"
    names = ", ".join(e.name for e in codes.find_by_retval(value)) or "-"
    _emit_lines(
        [
            f"value     {_hex(fields.value, 8, upper)}",
            f"severity  {'failure' if fields.failure else 'success'}",
            f"customer  {'yes' if fields.customer else 'no'}",
            f"facility  {_hex(fields.facility_code, 2, upper)} {facility_text}",
            f"code      {_hex(fields.code, 4, upper)} ({fields.code})",
            f"names     {names}",
        ]
    )
    return ExitCode.SUCCESS


def cmd_facility(args: argparse.Namespace, settings: Dict[str, Any]) -> ExitCode:
    try:
        found = facility.find_by_code(parse_value(args.code))
    except InvalidArgument as e:
        if e.status_code != StatusCode.INPUT_UNPARSEABLE:
            raise
        found = facility.find_by_name(args.code)

    if found is None:
        logging.info("FACILITY_NO_MATCH query=%s", args.code)
        if settings["json"]:
            _emit_json({"query": args.code, "facility": None})
        else:
            _emit_lines([f"No facility for {args.code}"])
        return ExitCode.SUCCESS_NO_MATCH

    if settings["json"]:
        _emit_json({"query": args.code, "facility": found.to_dict()})
    else:
        _emit_lines([str(found)])
    return ExitCode.SUCCESS


def cmd_list(args: argparse.Namespace, settings: Dict[str, Any]) -> ExitCode:
    table_names = _selected_tables(args.table or settings["default_table"])

    wanted_facility = None
    if args.facility is not None:
        if table_names != ["hresult"]:
            raise InvalidArgument("--facility applies to the hresult table only", StatusCode.INPUT_UNKNOWN_TABLE)
        wanted_facility = facility.find_by_name(args.facility)
        if wanted_facility is None:
            raise InvalidArgument(f"Unknown facility {args.facility!r}", StatusCode.INPUT_UNKNOWN_FACILITY)
        # the facility field is 5 bits wide
        if wanted_facility.value > decoder.FACILITY_MASK:
            raise InvalidArgument(
                f"{wanted_facility.name} (0x{wanted_facility.value:02X}) does not fit the 5-bit facility field",
                StatusCode.INPUT_UNKNOWN_FACILITY,
            )

    rows: List[Dict[str, Any]] = []
    lines: List[str] = []
    for name in table_names:
        for entry in TABLES[name].TABLE:
            if wanted_facility is not None and decoder.facility_code(entry.value) != wanted_facility.value:
                continue
            if args.failures and not entry.is_failure():
                continue
            if args.successes and not entry.is_success():
                continue
            rows.append({"table": name, **entry.to_dict()})
            lines.append(_render_entry(name, entry, settings["uppercase_hex"]))

    logging.info("LIST_OK tables=%s entries=%d", ",".join(table_names), len(rows))

    if settings["json"]:
        _emit_json(rows)
    else:
        _emit_lines(lines)
    return ExitCode.SUCCESS if rows else ExitCode.SUCCESS_NO_MATCH


def cmd_verify(args: argparse.Namespace, settings: Dict[str, Any]) -> ExitCode:
    table_names = _selected_tables(args.table or "all")

    results: List[AuditResult] = []
    for name in table_names:
        audit = TableAudit(
            TABLES[name].TABLE,
            check_facilities=(name == "hresult"),
            show_progress=settings["show_progress"],
        )
        results.append(audit.run())

    if settings["json"]:
        _emit_json([r.to_dict() for r in results])
    else:
        for r in results:
            _emit_lines(
                [f"{r.table:<8} {r.status_code.name:<28} checked={r.entries_checked} "
                 f"violations={len(r.violations)} warnings={len(r.warnings)}"]
            )
            _emit_lines(f"  ! {f.name}: {f.detail}" for f in r.violations)
            _emit_lines(f"  ? {f.name}: {f.detail}" for f in r.warnings)

    exit_codes = {r.exit_code for r in results}
    for worst in (
        ExitCode.RUNTIME_EXCEPTION,
        ExitCode.SUCCESS_OPERATOR_EXIT,
        ExitCode.TABLE_VERIFY_FAILED,
        ExitCode.TABLE_VERIFY_WARNINGS,
    ):
        if worst in exit_codes:
            return worst
    return ExitCode.SUCCESS


# ============================================================
# Config handlers
# ============================================================

def _config_init(cfg: Config) -> ExitCode:
    if cfg.path.exists():
        logging.warning("CONFIG_ALREADY_EXISTS path=%s", cfg.path)
        return ExitCode.SUCCESS

    cfg.reset()
    cfg.save()
    logging.info("CONFIG_INIT_OK path=%s", cfg.path)
    return ExitCode.SUCCESS


def _config_show(cfg: Config) -> ExitCode:
    cfg.load()
    _emit_json(cfg.as_dict())
    logging.info("CONFIG_SHOW_OK path=%s", cfg.path)
    return ExitCode.SUCCESS


def _config_validate(cfg: Config) -> ExitCode:
    cfg.load()
    cfg.validate()
    logging.info("CONFIG_VALIDATE_OK path=%s", cfg.path)
    return ExitCode.SUCCESS


def _config_reset(cfg: Config) -> ExitCode:
    """
    Remove config file from disk (full reset).
    """
    if not cfg.path.exists():
        logging.info("CONFIG_RESET_NOOP path=%s", cfg.path)
        return ExitCode.SUCCESS

    try:
        cfg.path.unlink()
    except OSError as e:
        raise ConfigError(f"Unable to remove {cfg.path}: {e}", StatusCode.CONFIG_WRITE_FAILED) from e
    logging.info("CONFIG_RESET_OK path=%s", cfg.path)
    return ExitCode.SUCCESS


def _config_set(cfg: Config, args: argparse.Namespace) -> ExitCode:
    cfg.load()

    if args.format is not None:
        cfg.set("output", "format", args.format)
    if args.uppercase_hex is not None:
        cfg.set("output", "uppercase_hex", args.uppercase_hex)
    if args.default_table is not None:
        cfg.set("lookup", "default_table", args.default_table)
    if args.verbose_logs is not None:
        cfg.set("logging", "verbose", args.verbose_logs)
    if args.json_logs_default is not None:
        cfg.set("logging", "json_logs", args.json_logs_default)
    if args.show_progress is not None:
        cfg.set("audit", "show_progress", args.show_progress)

    cfg.validate()
    cfg.save()
    logging.info("CONFIG_SET_OK path=%s", cfg.path)
    return ExitCode.SUCCESS


def dispatch_config(cfg: Config, args: argparse.Namespace) -> ExitCode:
    if args.subcommand == "init":
        return _config_init(cfg)
    if args.subcommand == "show":
        return _config_show(cfg)
    if args.subcommand == "validate":
        return _config_validate(cfg)
    if args.subcommand == "reset":
        return _config_reset(cfg)
    if args.subcommand == "set":
        return _config_set(cfg, args)

    logging.error("CONFIG_UNHANDLED subcommand=%s", args.subcommand)
    return ExitCode.UNSUPPORTED_COMMAND


# ============================================================
# Main
# ============================================================

def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="windows-error",
        description="Look up and decode Windows HRESULT, Win32 and NTSTATUS error codes",
    )

    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--json-logs", action="store_true")
    parser.add_argument("--json", action="store_true", help="Write command output as JSON")
    parser.add_argument("--no-progress", action="store_true")
    parser.add_argument(
        "--config-path",
        default=None,
        help="Override config path (default: ~/.windows_error/config.json)",
    )

    subparsers = parser.add_subparsers(dest="command")

    for name in ("exit", "quit", "q", "x"):
        subparsers.add_parser(name)

    lookup_p = subparsers.add_parser("lookup", help="Find table entries by value")
    lookup_p.add_argument("value")
    lookup_p.add_argument("--table", choices=TABLE_CHOICES)

    decode_p = subparsers.add_parser("decode", help="Decode the HRESULT fields of a value")
    decode_p.add_argument("value")

    facility_p = subparsers.add_parser("facility", help="Resolve a facility by code or name")
    facility_p.add_argument("code")

    list_p = subparsers.add_parser("list", help="List table entries")
    list_p.add_argument("--table", choices=TABLE_CHOICES)
    list_p.add_argument("--facility", help="HRESULT facility name; codes above 0x1F are rejected")
    severity = list_p.add_mutually_exclusive_group()
    severity.add_argument("--failures", action="store_true")
    severity.add_argument("--successes", action="store_true")

    verify_p = subparsers.add_parser("verify", help="Audit table integrity")
    verify_p.add_argument("--table", choices=TABLE_CHOICES)

    cfg_p = subparsers.add_parser("config", help="Configuration management")
    cfg_sub = cfg_p.add_subparsers(dest="subcommand", required=True)
    for name in ("init", "show", "validate", "reset"):
        cfg_sub.add_parser(name)

    cfg_set = cfg_sub.add_parser("set")
    cfg_set.add_argument("--format", choices=FORMAT_CHOICES)
    cfg_set.add_argument("--uppercase-hex", type=_parse_bool)
    cfg_set.add_argument("--default-table", choices=TABLE_CHOICES)
    cfg_set.add_argument("--verbose-logs", type=_parse_bool)
    cfg_set.add_argument("--json-logs-default", type=_parse_bool)
    cfg_set.add_argument("--show-progress", type=_parse_bool)

    return parser


def _settings(cfg: Config, args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "json": args.json or cfg.get("output", "format") == "json",
        "uppercase_hex": bool(cfg.get("output", "uppercase_hex", True)),
        "default_table": cfg.get("lookup", "default_table", "hresult"),
        "show_progress": bool(cfg.get("audit", "show_progress", True)) and not args.no_progress,
    }


COMMANDS = {
    "lookup": cmd_lookup,
    "decode": cmd_decode,
    "facility": cmd_facility,
    "list": cmd_list,
    "verify": cmd_verify,
}


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.json_logs)

    if args.command is None:
        parser.print_help(sys.stderr)
        _exit(ExitCode.INVALID_ARGUMENTS)

    if args.command in ("exit", "quit", "q", "x"):
        _exit(ExitCode.SUCCESS_OPERATOR_EXIT)

    try:
        cfg = Config(path=Path(args.config_path) if args.config_path else None)

        if args.command == "config":
            _exit(dispatch_config(cfg, args))

        cfg.load()
        cfg.validate()
        setup_logging(
            args.verbose or bool(cfg.get("logging", "verbose")),
            args.json_logs or bool(cfg.get("logging", "json_logs")),
        )
        logging.debug("CLI arguments: %s", vars(args))

        handler = COMMANDS.get(args.command)
        if handler is None:
            logging.error("COMMAND_UNHANDLED command=%s", args.command)
            _exit(ExitCode.UNSUPPORTED_COMMAND)

        _exit(handler(args, _settings(cfg, args)))

    except ConfigError as e:
        logging.error("CONFIG_ERROR status=%s %s", e.status_code.name, e)
        _exit(_map_config_error(e))

    except InvalidArgument as e:
        logging.error("INVALID_ARGUMENT status=%s %s", e.status_code.name, e)
        sys.stderr.write(f"windows-error: {e}\n")
        _exit(ExitCode.INVALID_ARGUMENTS)

    except KeyboardInterrupt:
        _exit(ExitCode.SUCCESS_OPERATOR_EXIT)

    except Exception:
        logging.exception("Unhandled exception")
        _exit(ExitCode.RUNTIME_EXCEPTION)


if __name__ == "__main__":
    main()
