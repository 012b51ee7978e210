"""Tests for algorithm discovery."""
import textwrap

from disksort.algorithm_api import get_registry, get_sorters
from disksort.algorithm_loader import load_algorithms, reload_algorithms
from disksort.disks import DiskRow


def _write(path, source):
    path.write_text(textwrap.dedent(source), encoding="utf-8")


def test_load_builtins():
    results = load_algorithms()
    by_module = {r["module"]: r for r in results}
    assert by_module["disksort.algorithms.left_to_right"]["algorithms"] == ["left_to_right"]
    assert by_module["disksort.algorithms.lawnmower"]["algorithms"] == ["lawnmower"]
    assert all("error" not in r for r in results)


def test_reload_restores_builtins():
    reload_algorithms()
    sorters = get_sorters()
    assert set(sorters) >= {"left_to_right", "lawnmower"}
    assert sorters["lawnmower"](DiskRow(3)).swap_count() == 3


def test_external_decorator_module(tmp_path):
    _write(tmp_path / "reverse_bubble.py", """
        from disksort.algorithm_api import algorithm
        from disksort.disks import SortedDisks

        @algorithm(name="test_passthrough", label="Passthrough")
        def passthrough(before):
            return SortedDisks(before, 0)
    """)
    results = load_algorithms(str(tmp_path))
    ext = [r for r in results if r["module"] == "disksort_external_reverse_bubble"]
    assert ext == [{"module": "disksort_external_reverse_bubble",
                    "algorithms": ["test_passthrough"]}]
    assert "test_passthrough" in get_registry()


def test_external_convention_module(tmp_path):
    _write(tmp_path / "convention.py", """
        from disksort.disks import SortedDisks

        ALGORITHM_INFO = {"name": "test_convention", "label": "Convention"}

        def sort(before):
            return SortedDisks(before, 0)
    """)
    load_algorithms(str(tmp_path))
    assert get_registry()["test_convention"]["label"] == "Convention"
    assert get_sorters()["test_convention"](DiskRow(1)).swap_count() == 0


def test_broken_module_is_reported(tmp_path):
    _write(tmp_path / "broken.py", "raise RuntimeError('nope')\n")
    results = load_algorithms(str(tmp_path))
    broken = [r for r in results if r["module"] == "disksort_external_broken"][0]
    assert broken["algorithms"] == []
    assert "nope" in broken["error"]
    assert "lawnmower" in get_registry()


def test_private_and_non_python_files_skipped(tmp_path):
    _write(tmp_path / "_helper.py", "raise RuntimeError('should not load')\n")
    _write(tmp_path / "notes.txt", "not python\n")
    results = load_algorithms(str(tmp_path))
    assert all(not r["module"].startswith("disksort_external_") for r in results)


def test_missing_extra_dir_is_ignored(tmp_path):
    results = load_algorithms(str(tmp_path / "does_not_exist"))
    assert {r["module"] for r in results} == {
        "disksort.algorithms.lawnmower",
        "disksort.algorithms.left_to_right",
    }


def test_imported_sorter_not_credited_to_external_module(tmp_path):
    _write(tmp_path / "reexport.py", """
        from disksort.algorithms.lawnmower import sort_lawnmower
        from disksort.algorithm_api import algorithm
        from disksort.disks import SortedDisks

        @algorithm(name="test_own", label="Own")
        def own(before):
            return SortedDisks(before, 0)
    """)
    results = load_algorithms(str(tmp_path))
    ext = [r for r in results if r["module"] == "disksort_external_reexport"][0]
    assert ext["algorithms"] == ["test_own"]
