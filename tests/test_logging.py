from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

import cli

REPO_ROOT = Path(__file__).resolve().parents[1]

IMPORT_AND_LOOKUP = """
import logging
from pathlib import Path

from windows_error import config, nt_status, win32
from windows_error.audit import TableAudit
from windows_error.h_result import codes

codes.find_by_retval(0x80004005)
win32.find_by_retval(5)
nt_status.find_by_retval(0)
config.Config(Path("missing-config.json")).load()
TableAudit(win32.TABLE, show_progress=False).run()
print(len(logging.getLogger().handlers))
"""


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_library_leaves_root_logger_untouched(tmp_path) -> None:
    env = dict(os.environ, PYTHONPATH=str(REPO_ROOT))
    completed = subprocess.run(
        [sys.executable, "-c", IMPORT_AND_LOOKUP],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )

    assert completed.stdout.strip() == "0"


@pytest.mark.parametrize("module_name", [
    "windows_error.error_code",
    "windows_error.h_result.codes",
    "windows_error.win32",
    "windows_error.nt_status",
    "windows_error.config",
    "windows_error.audit",
])
def test_modules_log_through_named_loggers(module_name) -> None:
    module = __import__(module_name, fromlist=["logger"])

    assert module.logger.name == module_name


def test_setup_logging_configures_root(capsys, restore_root_logger) -> None:
    from windows_error.h_result import codes

    cli.setup_logging(verbose=True, json_logs=True)
    codes.find_by_retval(0x80004005)
    err = capsys.readouterr().err

    assert '"message": "HRESULT_LOOKUP value=0x80004005 matches=1"' in err
    assert '"logger": "windows_error.h_result.codes"' in err
