from __future__ import annotations

import stat
import sys
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

VALID_OUTPUT = {
    "version_major": "3",
    "version_minor": "11",
    "implementation": "CPython",
    "ld_version": "3.11",
    "base_prefix": "/usr",
    "shared": "True",
    "executable": "/usr/bin/stub",
    "calcsize_pointer": "8",
}


def render_output(fields: dict[str, str]) -> str:
    return "".join(f"{key} {value}\n" for key, value in fields.items())


@pytest.fixture
def valid_fields() -> dict[str, str]:
    return dict(VALID_OUTPUT)


@pytest.fixture
def stub_interpreter(tmp_path: Path) -> Callable[..., str]:
    """Create a shell script that ignores its arguments, prints *stdout* and exits with *code*."""
    if sys.platform == "win32":
        pytest.skip("shebang stubs need a POSIX shell")

    def _create(name: str = "stub", stdout: str = "", code: int = 0) -> str:
        data = tmp_path / f"{name}.out"
        data.write_text(stdout, encoding="utf-8")
        exe = tmp_path / name
        exe.write_text(f'#!/bin/sh\ncat "{data}"\nexit {code}\n', encoding="utf-8")
        exe.chmod(exe.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(exe)

    return _create
