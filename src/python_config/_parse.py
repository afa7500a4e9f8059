"""Turn the ``key value`` lines printed by the interrogation script into an :class:`InterpreterConfig`."""

from __future__ import annotations

import re

from ._config import InterpreterConfig, PythonImplementation, PythonVersion
from ._errors import MalformedFieldError, MissingFieldError

_INT = re.compile(r"\+?[0-9]+")
_U8_MAX = 2**8 - 1
_U32_MAX = 2**32 - 1
_TRUE = "True"  # what str(True) prints inside the interpreter


def parse_output(output: str) -> InterpreterConfig:
    """Parse the interrogation output; either every required field is valid or an error is raised.

    :raises MissingFieldError: a required key is not present
    :raises MalformedFieldError: a value cannot be converted to its type

    """
    fields = _to_mapping(output)

    def required(key: str) -> str:
        try:
            return fields[key]
        except KeyError:
            raise MissingFieldError(key, output) from None

    version = PythonVersion(
        major=_parse_int("version_major", required("version_major"), _U8_MAX),
        minor=_parse_int("version_minor", required("version_minor"), _U8_MAX),
        implementation=_parse_implementation(required("implementation")),
    )
    return InterpreterConfig(
        version=version,
        libdir=fields.get("libdir"),
        shared=required("shared") == _TRUE,
        ld_version=required("ld_version"),
        base_prefix=required("base_prefix"),
        executable=required("executable"),
        calcsize_pointer=_parse_int("calcsize_pointer", required("calcsize_pointer"), _U32_MAX),
    )


def _to_mapping(output: str) -> dict[str, str]:
    fields: dict[str, str] = {}
    for line in output.split("\n"):
        key, sep, value = line.removesuffix("\r").partition(" ")
        if sep:  # lines without a value are not part of the protocol
            fields[key] = value
    return fields


def _parse_int(field: str, value: str, maximum: int) -> int:
    if _INT.fullmatch(value) is None or int(value) > maximum:
        raise MalformedFieldError(field, value, f"integer in range 0..{maximum}")
    return int(value)


def _parse_implementation(value: str) -> PythonImplementation:
    try:
        return PythonImplementation(value)
    except ValueError:
        expected = " or ".join(i.value for i in PythonImplementation)
        raise MalformedFieldError("implementation", value, f"implementation ({expected})") from None


__all__ = [
    "parse_output",
]
