"""
OKR progress.

Key results are plain dicts (title, metric, target_value, current_value,
unit, weight) stored as JSON on the objective. Progress of one key result
is current / target in percent, capped at 100. The objective's progress is
the weighted mean over its key results.

Dependencies: None (pure domain layer)
System role: Objective scoring for check-ins and closing
"""

from typing import Mapping, Sequence

DEFAULT_WEIGHT = 100


def key_result_progress(key_result: Mapping) -> float:
    """Percent of target reached; a missing or zero target counts as 1."""
    target = float(key_result.get("target_value") or 1)
    current = min(float(key_result.get("current_value") or 0), target)
    return current / target * 100


def okr_progress(key_results: Sequence[Mapping]) -> float:
    """
    Weighted progress of an objective.

    A missing or zero weight counts as DEFAULT_WEIGHT.

    Returns:
        float: 0 to 100; 0 without key results
    """
    total_weight = 0.0
    weighted = 0.0
    for key_result in key_results:
        weight = float(key_result.get("weight") or DEFAULT_WEIGHT)
        weighted += key_result_progress(key_result) * weight
        total_weight += weight
    if not total_weight:
        return 0.0
    return min(weighted / total_weight, 100.0)


def apply_checkin(key_results: Sequence[Mapping], updates: Mapping[int, float]) -> list[dict]:
    """
    Copy of key_results with new current values.

    Args:
        key_results: Stored key results
        updates: current_value by key-result index; unknown indexes are skipped
    """
    updated = [dict(kr) for kr in key_results]
    for index, current_value in updates.items():
        if 0 <= index < len(updated):
            updated[index]["current_value"] = current_value
    return updated
