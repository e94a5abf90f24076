"""Feature flag lookups over a resolution result.

Every catalog flag defaults to OFF; only flags in the resolved enabled set
are reported ON.
"""

from __future__ import annotations

from typing import Dict, Iterable

from .models import Flag, ResolutionResult


def flag_states(catalog: Iterable[Flag], result: ResolutionResult) -> Dict[str, bool]:
    states = {flag.name: False for flag in catalog}
    for name in result.enabled_names:
        states[name] = True
    return states


def is_flag_enabled(result: ResolutionResult, name: str) -> bool:
    return name in result.enabled_names
