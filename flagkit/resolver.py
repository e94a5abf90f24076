from __future__ import annotations
import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from rapidfuzz.distance import Levenshtein

from .messages import PLAIN_STYLE, MessageStyle, compose_active_flags_message, compose_unknown_flag_message
from .models import ALL_COMMANDS, Flag, ResolutionResult, UnknownFlag

log = logging.getLogger(__name__)

DistanceFn = Callable[[str, str], int]

SUGGESTION_MAX_DISTANCE = 4  # exclusive
DEFAULT_CONFIG_NAME = "flagkit.json"


def build_flag_index(catalog: Iterable[Flag]) -> Dict[str, Flag]:
    # dicts keep insertion order, so iteration follows the catalog
    index: Dict[str, Flag] = {}
    for flag in catalog:
        index.setdefault(flag.name, flag)
    return index


def suggest_flag(
    name: str,
    catalog: Sequence[Flag],
    distance: DistanceFn = Levenshtein.distance,
) -> UnknownFlag:
    best: Optional[Tuple[int, Flag]] = None
    for flag in catalog:
        d = distance(name, flag.name)
        if best is None or d < best[0]:
            best = (d, flag)

    if best is None:
        return UnknownFlag(name=name)

    dist, flag = best
    did_you_mean = flag.name if dist < SUGGESTION_MAX_DISTANCE else None
    return UnknownFlag(name=name, did_you_mean=did_you_mean, distance=dist)


def find_unknown_flags(
    requested: Mapping[str, object],
    catalog: Sequence[Flag],
    index: Optional[Mapping[str, Flag]] = None,
    distance: DistanceFn = Levenshtein.distance,
) -> List[UnknownFlag]:
    if index is None:
        index = build_flag_index(catalog)
    return [suggest_flag(name, catalog, distance) for name in requested if name not in index]


def flag_applies(flag: Flag, executing_command: Optional[str], ci: bool) -> bool:
    if ci and flag.no_ci:
        return False
    return flag.command == ALL_COMMANDS or flag.command == executing_command


def _filter_applicable(flags: List[Flag], executing_command: Optional[str], ci: bool) -> List[Flag]:
    kept: List[Flag] = []
    for flag in flags:
        if flag_applies(flag, executing_command, ci):
            kept.append(flag)
        else:
            log.debug("Dropping %s (command=%s, no_ci=%s, ci=%s)", flag.name, flag.command, flag.no_ci, ci)
    return kept


def expand_included_flags(enabled: Sequence[Flag], index: Mapping[str, Flag]) -> List[Flag]:
    """Append every flag reachable through `included_flags`.

    Included flags go after the given flags, in depth-first pre-order of
    each flag's inclusion tree. Each flag's inclusions are expanded at most
    once, so cycles terminate. Unknown inclusion names are skipped.
    The result may contain duplicates; see `dedupe_flags`.
    """
    out: List[Flag] = list(enabled)
    expanded = set()

    for root in enabled:
        stack: List[Tuple[Flag, bool]] = [(root, False)]
        while stack:
            flag, is_included = stack.pop()
            if is_included:
                out.append(flag)
            if flag.name in expanded:
                continue
            expanded.add(flag.name)

            children = [index[n] for n in flag.included_flags if n in index]
            if children:
                log.debug("%s includes %s", flag.name, [c.name for c in children])
            stack.extend((child, True) for child in reversed(children))
    return out


def dedupe_flags(flags: Iterable[Flag]) -> List[Flag]:
    seen = set()
    out: List[Flag] = []
    for flag in flags:
        if flag.name in seen:
            continue
        seen.add(flag.name)
        out.append(flag)
    return out


def resolve_flags(
    catalog: Optional[Sequence[Flag]],
    requested: Optional[Mapping[str, object]],
    executing_command: Optional[str] = None,
    *,
    ci: bool = False,
    distance: DistanceFn = Levenshtein.distance,
    style: MessageStyle = PLAIN_STYLE,
    config_name: str = DEFAULT_CONFIG_NAME,
    refilter_included: bool = False,
) -> ResolutionResult:
    catalog = list(catalog or ())
    requested = requested or {}
    index = build_flag_index(catalog)

    unknown = find_unknown_flags(requested, catalog, index=index, distance=distance)
    if unknown:
        log.debug("Unknown flags requested: %s", [u.name for u in unknown])

    seed = [index[name] for name, value in requested.items() if value and name in index]
    seed = _filter_applicable(seed, executing_command, ci)

    enabled = dedupe_flags(expand_included_flags(seed, index))
    if refilter_included:
        enabled = _filter_applicable(enabled, executing_command, ci)

    return ResolutionResult(
        enabled=enabled,
        unknown_flags=unknown,
        unknown_flag_message=compose_unknown_flag_message(unknown, config_name, style),
        message=compose_active_flags_message(enabled, style),
    )
