"""Failures raised while running the interrogation script or parsing its output."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from subprocess import TimeoutExpired


class InterpreterConfigError(RuntimeError):
    """Base class for every failure while acquiring an interpreter's configuration."""


class ScriptRunError(InterpreterConfigError):
    """The interrogation script could not be run to a trustworthy result."""

    def __init__(self, msg: str, exe: str) -> None:
        super().__init__(msg)
        self.exe = exe


class InterpreterNotFoundError(ScriptRunError):
    def __init__(self, exe: str) -> None:
        super().__init__(
            f"could not find any interpreter at {exe}, are you sure you have Python installed on your PATH?",
            exe,
        )


class InterpreterLaunchError(ScriptRunError):
    def __init__(self, exe: str, error: OSError | TimeoutExpired) -> None:
        super().__init__(f"failed to run the Python interpreter at {exe}: {error}", exe)
        self.error = error


class ScriptFailedError(ScriptRunError):
    """The interpreter started but exited with a non-zero code; any output is untrusted."""

    def __init__(self, exe: str, script: str, returncode: int, output: bytes) -> None:
        super().__init__(f"python script failed with code {returncode} via {exe}: {script}", exe)
        self.script = script
        self.returncode = returncode
        self.output = output


class OutputEncodingError(ScriptRunError):
    def __init__(self, exe: str, error: UnicodeDecodeError) -> None:
        super().__init__(f"output of {exe} is not valid UTF-8: {error}", exe)
        self.error = error


class OutputParseError(InterpreterConfigError):
    """The interrogation output does not describe a valid configuration."""

    def __init__(self, msg: str, field: str) -> None:
        super().__init__(msg)
        self.field = field


class MissingFieldError(OutputParseError):
    def __init__(self, field: str, output: str) -> None:
        super().__init__(f"missing field {field!r} in interpreter output: {output!r}", field)
        self.output = output


class MalformedFieldError(OutputParseError):
    def __init__(self, field: str, value: str, expected: str) -> None:
        super().__init__(f"field {field!r} has value {value!r} which is not a valid {expected}", field)
        self.value = value
        self.expected = expected


__all__ = [
    "InterpreterConfigError",
    "InterpreterLaunchError",
    "InterpreterNotFoundError",
    "MalformedFieldError",
    "MissingFieldError",
    "OutputEncodingError",
    "OutputParseError",
    "ScriptFailedError",
    "ScriptRunError",
]
