from __future__ import annotations
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .models import FlagConfig


class FlagConfigError(Exception):
    pass


def load_flag_config(path: Union[str, Path]) -> FlagConfig:
    """Read the requested flags from a JSON config file.

    The file is an object with a "flags" mapping of flag name to bool,
    e.g. {"flags": {"FAST_DEV": true}}. Other top-level keys are ignored.
    """
    path = Path(path)
    try:
        raw = path.read_text()
    except OSError as exc:
        raise FlagConfigError(f"Could not read config {path}: {exc}") from exc

    try:
        return FlagConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise FlagConfigError(f"Invalid config {path}: {exc}") from exc
