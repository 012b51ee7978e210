"""Request validator for disksort.

Validates a SortRequest and returns a list of issues, each a dict:
    {"level": "error"|"warning"|"info", "message": str}
"""
from typing import Any, Dict, List

from disksort.algorithm_api import get_registry, get_sorters
from disksort.disks import DiskRow
from disksort.models import DiskParseError, SortRequest

# Both sorters are quadratic in the row length
MAX_LIGHT_COUNT = 5000


def validate_request(request: SortRequest) -> List[Dict[str, Any]]:
    """Validate a sort request and return a list of issues.

    Checks performed:
    1. Unknown algorithm, or one registered without a sort function (error)
    2. Unparseable initial row (error)
    3. Initial row not alternating (error)
    4. Row too long for a quadratic sort (warning)
    5. Row already sorted (info)

    Without an initial row nothing is allocated: the row DiskRow(light_count)
    would build is alternating, and only the two-disk one is also sorted.
    """
    issues: List[Dict[str, Any]] = []

    # --- Check 1: Algorithm must be runnable ---
    if request.algorithm not in get_sorters():
        if request.algorithm in get_registry():
            message = f"Algorithm '{request.algorithm}' is registered but has no sort function"
        else:
            message = f"Unknown algorithm '{request.algorithm}'"
        issues.append({"level": "error", "message": message})

    # --- Checks 2-3: Initial row ---
    if request.initial is not None:
        try:
            row = DiskRow.from_string(request.initial)
        except DiskParseError as e:
            issues.append({"level": "error", "message": f"Initial row is invalid: {e}"})
            return issues
        if not row.is_alternating():
            issues.append({
                "level": "error",
                "message": f"Initial row '{row}' is not alternating",
            })
        light_count = row.light_count()
        already_sorted = row.is_sorted()
    else:
        light_count = request.light_count
        already_sorted = light_count == 1

    # --- Check 4: Size ---
    if light_count > MAX_LIGHT_COUNT:
        issues.append({
            "level": "warning",
            "message": (
                f"light_count {light_count} exceeds {MAX_LIGHT_COUNT}; "
                f"sorting takes quadratic time"
            ),
        })

    # --- Check 5: Already sorted ---
    if already_sorted:
        issues.append({
            "level": "info",
            "message": "Row is already sorted; no swaps will be made",
        })

    return issues
