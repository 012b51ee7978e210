"""Discovers disk sorters and loads them into the registry.

Two sources:
  disksort/algorithms/*.py        <- built-in sorters, imported as package modules
  {extra_dir}/{name}.py           <- optional external sorters, imported by path

Either kind registers itself with the @algorithm decorator, or by exposing
ALGORITHM_INFO plus a sort() function.
"""
import importlib
import importlib.util
import os
import pkgutil
import sys
from typing import Any, Dict, List, Optional

import disksort.algorithms
from disksort.algorithm_api import _ALGORITHM_REGISTRY, _SORTERS, register_algorithm


# --- Module import ---

def _register_convention(module) -> None:
    """Register modules that use ALGORITHM_INFO + sort() instead of the decorator."""
    if hasattr(module, "ALGORITHM_INFO"):
        register_algorithm(module.ALGORITHM_INFO, getattr(module, "sort", None))


def _import_builtin(name: str):
    """Import (or re-import) a module from the disksort.algorithms package."""
    if name in sys.modules:
        module = importlib.reload(sys.modules[name])
    else:
        module = importlib.import_module(name)
    _register_convention(module)
    return module


def _import_file(name: str, path: str):
    """Import a Python file as a module."""
    if name in sys.modules:
        del sys.modules[name]
    spec = importlib.util.spec_from_file_location(name, path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[name] = module
    spec.loader.exec_module(module)
    _register_convention(module)
    return module


def _module_algorithms(module) -> List[str]:
    """Names of the algorithms a loaded module registered itself.

    Sorters merely imported from another module are not counted.
    """
    names = {
        obj._algorithm_spec["name"]
        for obj in vars(module).values()
        if callable(obj)
        and hasattr(obj, "_algorithm_spec")
        and getattr(obj, "__module__", None) == module.__name__
    }
    if hasattr(module, "ALGORITHM_INFO"):
        names.add(module.ALGORITHM_INFO["name"])
    return sorted(names)


def _load_one(module_name: str, loader, *args) -> Dict[str, Any]:
    """Import one module and report which algorithms it provides."""
    try:
        module = loader(*args)
    except Exception as e:
        print(f"  Algorithm module '{module_name}' FAILED: {e}")
        return {"module": module_name, "algorithms": [], "error": str(e)}
    return {"module": module_name, "algorithms": _module_algorithms(module)}


# --- Main API ---

def load_algorithms(extra_dir: Optional[str] = None) -> List[Dict[str, Any]]:
    """Load built-in sorters, then any external ones from extra_dir.

    Returns one info dict per module: {"module", "algorithms", "error"?}.
    A module that fails to import is reported and skipped.
    """
    results = []

    for mod in sorted(pkgutil.iter_modules(disksort.algorithms.__path__), key=lambda m: m.name):
        if mod.name.startswith("_"):
            continue
        full_name = f"{disksort.algorithms.__name__}.{mod.name}"
        results.append(_load_one(full_name, _import_builtin, full_name))

    if extra_dir is not None and os.path.isdir(extra_dir):
        for fname in sorted(os.listdir(extra_dir)):
            if not fname.endswith(".py") or fname.startswith("_"):
                continue
            module_name = f"disksort_external_{fname[:-3]}"
            path = os.path.join(extra_dir, fname)
            results.append(_load_one(module_name, _import_file, module_name, path))

    return results


def reload_algorithms(extra_dir: Optional[str] = None) -> List[Dict[str, Any]]:
    """Clear registries and reload all sorters."""
    _ALGORITHM_REGISTRY.clear()
    _SORTERS.clear()
    return load_algorithms(extra_dir)
