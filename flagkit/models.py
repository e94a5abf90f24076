from __future__ import annotations
from typing import Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, model_validator

ALL_COMMANDS = "all"

FlagCommand = Literal["all", "build", "develop", "serve"]

# --- Catalog ---

class Flag(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    command: FlagCommand = ALL_COMMANDS
    no_ci: bool = False
    experimental: bool = False
    umbrella_issue_url: Optional[str] = None
    included_flags: Tuple[str, ...] = ()


class FlagCatalog(BaseModel):
    shape_id: Literal["flagkit.flag_catalog.v1"] = "flagkit.flag_catalog.v1"
    version: str
    flags: List[Flag]

    @model_validator(mode="after")
    def _unique_names(self) -> "FlagCatalog":
        seen = set()
        for flag in self.flags:
            if flag.name in seen:
                raise ValueError(f"duplicate flag name in catalog: {flag.name}")
            seen.add(flag.name)
        return self


# --- User config ---

class FlagConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    flags: Dict[str, bool] = Field(default_factory=dict)


# --- Resolution ---

class UnknownFlag(BaseModel):
    name: str
    did_you_mean: Optional[str] = None
    distance: Optional[int] = None  # to the closest catalog name


class ResolutionResult(BaseModel):
    shape_id: Literal["flagkit.flag_resolution.v1"] = "flagkit.flag_resolution.v1"
    enabled: List[Flag] = []
    unknown_flags: List[UnknownFlag] = []
    unknown_flag_message: str = ""
    message: str = ""

    @property
    def enabled_names(self) -> List[str]:
        return [f.name for f in self.enabled]
