"""flagkit: feature flag resolution against a framework flag catalog."""
from .models import (
    ALL_COMMANDS,
    Flag,
    FlagCatalog,
    FlagConfig,
    UnknownFlag,
    ResolutionResult,
)
from .resolver import (
    resolve_flags,
    build_flag_index,
    suggest_flag,
    find_unknown_flags,
    expand_included_flags,
    dedupe_flags,
    flag_applies,
    SUGGESTION_MAX_DISTANCE,
)
from .messages import MessageStyle, PLAIN_STYLE, RICH_STYLE, plain_link, rich_link
from .environment import detect_ci, executing_command
from .catalog import DEFAULT_CATALOG, load_catalog, FlagCatalogError
from .config import load_flag_config, FlagConfigError
from .feature_flags import flag_states, is_flag_enabled

__all__ = [
    "ALL_COMMANDS",
    "Flag",
    "FlagCatalog",
    "FlagConfig",
    "UnknownFlag",
    "ResolutionResult",
    "resolve_flags",
    "build_flag_index",
    "suggest_flag",
    "find_unknown_flags",
    "expand_included_flags",
    "dedupe_flags",
    "flag_applies",
    "SUGGESTION_MAX_DISTANCE",
    "MessageStyle",
    "PLAIN_STYLE",
    "RICH_STYLE",
    "plain_link",
    "rich_link",
    "detect_ci",
    "executing_command",
    "DEFAULT_CATALOG",
    "load_catalog",
    "FlagCatalogError",
    "load_flag_config",
    "FlagConfigError",
    "flag_states",
    "is_flag_enabled",
]
