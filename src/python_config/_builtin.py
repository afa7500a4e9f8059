from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._errors import InterpreterConfigError
from ._parse import parse_output
from ._py_spec import PythonSpec
from ._script import INTROSPECTION_SCRIPT, run_script

if TYPE_CHECKING:
    from collections.abc import Callable, Generator, Mapping, Sequence

    from ._config import InterpreterConfig

LOGGER = logging.getLogger(__name__)

#: executables probed by :func:`find_interpreters`, in order of preference
CANDIDATES: tuple[str, ...] = ("python", "python3")


def get_config_from_interpreter(
    exe: str,
    *,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> InterpreterConfig:
    """Extract the build configuration from the specified interpreter.

    Every failure is raised to the caller, use :func:`find_interpreters` for a search that skips broken candidates.

    """
    output = run_script(exe, INTROSPECTION_SCRIPT, env=env, timeout=timeout)
    return parse_output(output)


class Interpreters:
    """The configurations of all candidates that could be interrogated, in candidate order.

    Iteration is lazy: a candidate is only run once the previous one is fully resolved and the consumer asks for the
    next element. Every new iteration runs discovery again, nothing is cached.

    """

    def __init__(
        self,
        candidates: str | Sequence[str] = CANDIDATES,
        *,
        env: Mapping[str, str] | None = None,
        timeout: float | None = None,
        probe: Callable[..., InterpreterConfig] = get_config_from_interpreter,
    ) -> None:
        self.candidates = _as_tuple(candidates)
        self.env = env
        self.timeout = timeout
        self.probe = probe

    def __iter__(self) -> Generator[InterpreterConfig, None, None]:
        for exe in self.candidates:
            LOGGER.info("proposed %s", exe)
            try:
                config = self.probe(exe, env=self.env, timeout=self.timeout)
            except InterpreterConfigError as exception:
                LOGGER.debug("skip %s due to %s: %s", exe, type(exception).__name__, exception)
                continue
            yield config

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(candidates={list(self.candidates)!r})"


def find_interpreters(
    candidates: str | Sequence[str] = CANDIDATES,
    *,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> Interpreters:
    """Search for python interpreters and yield them in order.

    The following locations are checked in the order listed:

    1. ``python``
    2. ``python3``

    Candidates that are missing or fail to report a valid configuration are silently skipped.

    """
    return Interpreters(candidates, env=env, timeout=timeout)


def find_interpreter_matching(
    predicate: Callable[[InterpreterConfig], bool],
    candidates: str | Sequence[str] = CANDIDATES,
    *,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> InterpreterConfig | None:
    """:returns: the first discovered interpreter accepted by *predicate*, or ``None``; stops probing on a match"""
    return _first_match(predicate, Interpreters(candidates, env=env, timeout=timeout))


def _first_match(
    predicate: Callable[[InterpreterConfig], bool],
    interpreters: Interpreters,
) -> InterpreterConfig | None:
    for config in interpreters:
        if predicate(config):
            LOGGER.debug("accepted %s at %s", config.version, config.executable)
            return config
        LOGGER.debug("refused interpreter %s at %s", config.version, config.executable)
    return None


class Builtin:
    """Find the first interpreter satisfying any of the requirement strings, tried in order.

    The search runs once, on first access of :attr:`interpreter`; call :meth:`run` to search again.

    """

    python_spec: tuple[str, ...]
    candidates: tuple[str, ...]
    timeout: float | None

    def __init__(
        self,
        python_spec: str | Sequence[str] | None = None,
        candidates: str | Sequence[str] = CANDIDATES,
        timeout: float | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self.python_spec = _as_tuple(python_spec or ["python"])
        self.candidates = _as_tuple(candidates)
        self.timeout = timeout
        self._env = env
        self._has_run = False
        self._interpreter: InterpreterConfig | None = None

    def run(self) -> InterpreterConfig | None:
        for python_spec in self.python_spec:
            spec = PythonSpec.from_string_spec(python_spec)
            LOGGER.info("find interpreter for spec %r", spec)
            interpreters = Interpreters(self.candidates, env=self._env, timeout=self.timeout)
            result = _first_match(spec.satisfies, interpreters)
            if result is not None:
                return result
        return None

    @property
    def interpreter(self) -> InterpreterConfig | None:
        """:returns: the interpreter as returned by :meth:`run`, cached"""
        if self._has_run is False:
            self._interpreter = self.run()
            self._has_run = True
        return self._interpreter

    def __repr__(self) -> str:
        spec = self.python_spec[0] if len(self.python_spec) == 1 else list(self.python_spec)
        return f"{self.__class__.__name__} discover of python_spec={spec!r}"


def _as_tuple(values: str | Sequence[str]) -> tuple[str, ...]:
    return (values,) if isinstance(values, str) else tuple(values)


__all__ = [
    "CANDIDATES",
    "Builtin",
    "Interpreters",
    "find_interpreter_matching",
    "find_interpreters",
    "get_config_from_interpreter",
]
