"""Public API for disksort algorithm authors.

Algorithm modules only need to import from this module:
    from disksort.algorithm_api import algorithm, logger
"""
import warnings
from typing import Callable, Dict, Optional


# --- Algorithm registry (filled by @algorithm decorator) ---

_ALGORITHM_REGISTRY: dict = {}
_SORTERS: dict = {}


def _origin(func: Optional[Callable]):
    if func is None:
        return None
    return (getattr(func, "__module__", None), getattr(func, "__qualname__", None))


def register_algorithm(info: Dict, func: Optional[Callable]) -> Dict:
    """Register a sorter from an info dict. Returns the stored spec.

    info keys: name (required), label, description, doc.
    Registering a different function under an existing name warns and
    replaces the old entry. Reloading the same module does not warn.
    """
    name = info["name"]
    if name in _ALGORITHM_REGISTRY and _origin(_SORTERS.get(name)) != _origin(func):
        warnings.warn(f"Algorithm '{name}' is already registered; replacing it", stacklevel=3)

    spec = {
        "name": name,
        "label": info.get("label", name),
        "description": info.get("description", ""),
        "doc": info.get("doc", ""),
    }
    _ALGORITHM_REGISTRY[name] = spec
    if func is not None:
        _SORTERS[name] = func
    else:
        _SORTERS.pop(name, None)
    return spec


def unregister_algorithm(name: str) -> None:
    _ALGORITHM_REGISTRY.pop(name, None)
    _SORTERS.pop(name, None)


def algorithm(
    name: str,
    label: str,
    description: str = "",
    doc: str = "",
):
    """Decorator to register a function as a disk sorter.

    Usage:
        @algorithm(
            name="my_sort",
            label="My Sort",
            description="Sorts the disks somehow",
        )
        def my_sort(before: DiskRow) -> SortedDisks:
            ...
    """

    def decorator(func: Callable) -> Callable:
        spec = register_algorithm(
            {"name": name, "label": label, "description": description, "doc": doc},
            func,
        )
        func._algorithm_spec = spec
        return func

    return decorator


def get_registry() -> dict:
    """Return a copy of the algorithm registry."""
    return dict(_ALGORITHM_REGISTRY)


def get_sorters() -> dict:
    """Return a copy of the sorter functions."""
    return dict(_SORTERS)


# --- Logger ---

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class SortLogger:
    """Logger that tags messages with the running algorithm.

    The executor sets context before a sorter runs and clears it after.
    Algorithm authors just call logger.info(), logger.debug(), etc.
    Without a handler, messages at or above `level` are printed.
    """

    def __init__(self, level: str = "INFO"):
        self.level = level
        self._handler: Optional[Callable] = None
        self._algorithm: Optional[str] = None

    @property
    def level(self) -> str:
        return self._level

    @level.setter
    def level(self, value: str):
        if value not in _LEVELS:
            raise ValueError(f"Unknown log level {value!r}; expected one of {sorted(_LEVELS)}")
        self._level = value

    def _set_context(self, algorithm: str, handler: Callable):
        self._algorithm = algorithm
        self._handler = handler

    def _clear_context(self):
        self._algorithm = None
        self._handler = None

    def _emit(self, level: str, message: str):
        if self._handler:
            self._handler(level, self._algorithm, message)
        elif _LEVELS[level] >= _LEVELS[self._level]:
            print(f"[{level}] [{self._algorithm or 'disksort'}] {message}")

    def debug(self, message: str):
        self._emit("DEBUG", message)

    def info(self, message: str):
        self._emit("INFO", message)

    def warn(self, message: str):
        self._emit("WARN", message)

    def error(self, message: str):
        self._emit("ERROR", message)


# Singleton logger instance - algorithms import and use this directly
logger = SortLogger()
