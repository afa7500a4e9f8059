"""Typed build configuration of a Python interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class PythonImplementation(Enum):
    CPython = "CPython"
    PyPy = "PyPy"

    def __str__(self) -> str:
        return self.value


class PythonVersion(NamedTuple):
    major: int
    minor: int
    implementation: PythonImplementation

    def __str__(self) -> str:
        return f"{self.implementation} {self.major}.{self.minor}"


@dataclass(frozen=True)
class InterpreterConfig:
    """Information returned from a Python interpreter, as needed to link against or embed it."""

    version: PythonVersion
    libdir: str | None
    shared: bool
    ld_version: str
    #: prefix used for determining the directory of libpython
    base_prefix: str
    executable: str
    calcsize_pointer: int

    @property
    def architecture(self) -> int:
        """:returns: the pointer width in bits"""
        return self.calcsize_pointer * 8


__all__ = [
    "InterpreterConfig",
    "PythonImplementation",
    "PythonVersion",
]
