"""Framework flag catalog.
The built-in catalog is what the CLI resolves against unless a
flagkit.flag_catalog.v1 JSON file is supplied.
"""
from __future__ import annotations
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .models import Flag, FlagCatalog


class FlagCatalogError(Exception):
    pass


DEFAULT_CATALOG = FlagCatalog(
    version="0.1.0",
    flags=[
        Flag(
            name="FAST_DEV",
            command="develop",
            description="Enable all experiments aimed at improving develop server start time and develop DX.",
            included_flags=("DEV_SSR", "QUERY_ON_DEMAND", "LAZY_IMAGES", "DEV_WEBPACK_CACHE"),
        ),
        Flag(
            name="DEV_SSR",
            command="develop",
            description="Server side render pages on full reloads during develop to catch SSR bugs without a full build.",
            umbrella_issue_url="https://example.com/flagkit/dev-ssr-feedback",
        ),
        Flag(
            name="QUERY_ON_DEMAND",
            command="develop",
            no_ci=True,
            description="Only run queries when needed instead of running all queries upfront. Speeds up starting the develop server.",
            umbrella_issue_url="https://example.com/flagkit/query-on-demand-feedback",
        ),
        Flag(
            name="LAZY_IMAGES",
            command="develop",
            no_ci=True,
            description="Don't process images during develop until the browser requests them. Speeds up starting the develop server.",
            umbrella_issue_url="https://example.com/flagkit/lazy-images-feedback",
        ),
        Flag(
            name="DEV_WEBPACK_CACHE",
            command="develop",
            description="Use webpack's persistent caching in develop so restarts reuse previous compilation work.",
        ),
        Flag(
            name="PRESERVE_WEBPACK_CACHE",
            command="build",
            description="Keep webpack's cache when the site config or node APIs change.",
        ),
        Flag(
            name="PRESERVE_FILE_DOWNLOAD_CACHE",
            command="all",
            description="Keep the downloaded files cache when the site config or node APIs change.",
        ),
        Flag(
            name="PARALLEL_SOURCING",
            command="all",
            experimental=True,
            description="Run all source plugins at the same time instead of one after another.",
        ),
        Flag(
            name="FUNCTIONS",
            command="all",
            description="Compile serverless functions in the project and write them to disk, ready to deploy.",
        ),
    ],
)


def load_catalog(path: Union[str, Path]) -> FlagCatalog:
    path = Path(path)
    try:
        return FlagCatalog.model_validate_json(path.read_text())
    except OSError as exc:
        raise FlagCatalogError(f"Could not read flag catalog {path}: {exc}") from exc
    except ValidationError as exc:
        raise FlagCatalogError(f"Invalid flag catalog {path}: {exc}") from exc
