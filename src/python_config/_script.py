"""Run the interrogation script inside a target interpreter and capture what it reports.

Talking to the interpreter over a subprocess means we never have to load it into our own process: we hand it a fixed
program via ``-c`` and read back ``key value`` lines from its standard output.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import TYPE_CHECKING

from ._errors import (
    InterpreterLaunchError,
    InterpreterNotFoundError,
    OutputEncodingError,
    ScriptFailedError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

LOGGER = logging.getLogger(__name__)

INTROSPECTION_SCRIPT = r"""
import platform
import struct
import sys
import sysconfig

PYPY = platform.python_implementation() == "PyPy"

try:
    base_prefix = sys.base_prefix
except AttributeError:
    base_prefix = sys.exec_prefix

libdir = sysconfig.get_config_var("LIBDIR")

print("version_major", sys.version_info[0])
print("version_minor", sys.version_info[1])
print("implementation", platform.python_implementation())
if libdir is not None:
    print("libdir", libdir)
print("ld_version", sysconfig.get_config_var("LDVERSION") or sysconfig.get_config_var("py_version_short"))
print("base_prefix", base_prefix)
print("shared", PYPY or bool(sysconfig.get_config_var("Py_ENABLE_SHARED")))
print("executable", sys.executable)
print("calcsize_pointer", struct.calcsize("P"))
"""


def run_script(
    exe: str,
    script: str = INTROSPECTION_SCRIPT,
    *,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> str:
    """Run a python script using the specified interpreter binary.

    :param exe: path or name of the interpreter, names are looked up on the ``PATH`` of *env*
    :param script: the program text passed via ``-c``
    :param env: environment of the child process, defaults to :data:`os.environ`
    :param timeout: seconds to wait for the interpreter before killing it, ``None`` waits forever
    :returns: the standard output of the interpreter
    :raises InterpreterNotFoundError: the executable does not exist
    :raises InterpreterLaunchError: the executable could not be started, or did not finish within *timeout*
    :raises ScriptFailedError: the interpreter exited with a non-zero code
    :raises OutputEncodingError: the standard output is not valid UTF-8

    """
    cmd = [exe, "-c", script]
    # prevent sys.prefix from leaking into the child process - see https://bugs.python.org/issue22490
    child_env = dict(os.environ if env is None else env)
    child_env.pop("__PYVENV_LAUNCHER__", None)
    env_delta = {k: v for k, v in child_env.items() if os.environ.get(k) != v}
    LOGGER.debug("get interpreter info via cmd: %s", LogCmd(cmd, env_delta or None))
    try:
        process = subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=None,  # inherited
            env=child_env,
        )
    except FileNotFoundError as error:
        raise InterpreterNotFoundError(exe) from error
    except OSError as error:
        raise InterpreterLaunchError(exe, error) from error

    try:
        out, _ = process.communicate(timeout=timeout)
    except subprocess.TimeoutExpired as error:
        process.kill()
        process.communicate()
        raise InterpreterLaunchError(exe, error) from error
    except OSError as error:
        process.kill()
        process.wait()
        raise InterpreterLaunchError(exe, error) from error

    if process.returncode != 0:
        raise ScriptFailedError(exe, script, process.returncode, out)
    try:
        return out.decode("utf-8")
    except UnicodeDecodeError as error:
        raise OutputEncodingError(exe, error) from error


class LogCmd:
    """Lazily rendered command line, with the environment entries that differ from ours when given."""

    def __init__(self, cmd: Sequence[str], env: Mapping[str, str] | None = None) -> None:
        self.cmd = cmd
        self.env = env

    def __repr__(self) -> str:
        cmd_repr = " ".join(shlex.quote(str(c)) for c in self.cmd)
        if self.env is not None:
            cmd_repr += f" env of {self.env!r}"
        return cmd_repr


__all__ = [
    "INTROSPECTION_SCRIPT",
    "LogCmd",
    "run_script",
]
