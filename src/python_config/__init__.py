"""Discover Python interpreters and the configuration needed to link against or embed them."""

from __future__ import annotations

from ._builtin import (
    CANDIDATES,
    Builtin,
    Interpreters,
    find_interpreter_matching,
    find_interpreters,
    get_config_from_interpreter,
)
from ._config import InterpreterConfig, PythonImplementation, PythonVersion
from ._errors import (
    InterpreterConfigError,
    InterpreterLaunchError,
    InterpreterNotFoundError,
    MalformedFieldError,
    MissingFieldError,
    OutputEncodingError,
    OutputParseError,
    ScriptFailedError,
    ScriptRunError,
)
from ._parse import parse_output
from ._py_spec import PythonSpec
from ._script import INTROSPECTION_SCRIPT, run_script

__all__ = [
    "CANDIDATES",
    "INTROSPECTION_SCRIPT",
    "Builtin",
    "InterpreterConfig",
    "InterpreterConfigError",
    "InterpreterLaunchError",
    "InterpreterNotFoundError",
    "Interpreters",
    "MalformedFieldError",
    "MissingFieldError",
    "OutputEncodingError",
    "OutputParseError",
    "PythonImplementation",
    "PythonSpec",
    "PythonVersion",
    "ScriptFailedError",
    "ScriptRunError",
    "find_interpreter_matching",
    "find_interpreters",
    "get_config_from_interpreter",
    "parse_output",
    "run_script",
]
