"""Read-only environment signals consumed by flag resolution.

Only two things are read from the process environment: whether we are
running under continuous integration, and which command is executing.
Both accept an explicit mapping so callers and tests never need to touch
os.environ.
"""
from __future__ import annotations

import os
from typing import Mapping, Optional

EXECUTING_COMMAND_ENV = "FLAGKIT_EXECUTING_COMMAND"

GENERIC_CI_MARKERS = (
    "BUILD_ID",
    "BUILD_NUMBER",
    "CI_APP_ID",
    "CI_BUILD_ID",
    "CI_BUILD_NUMBER",
    "CI_NAME",
    "CONTINUOUS_INTEGRATION",
    "RUN_ID",
)

VENDOR_CI_MARKERS = (
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "CIRCLECI",
    "TRAVIS",
    "BUILDKITE",
    "JENKINS_URL",
    "TF_BUILD",
    "TEAMCITY_VERSION",
    "CODEBUILD_BUILD_ID",
    "NOW_BUILDER",
    "VERCEL_BUILDER",
)


def detect_ci(env: Optional[Mapping[str, str]] = None) -> bool:
    if env is None:
        env = os.environ

    ci = env.get("CI")
    if ci is not None and ci.strip().lower() == "false":
        return False
    if ci:
        return True
    if any(env.get(name) for name in GENERIC_CI_MARKERS):
        return True
    return any(env.get(name) for name in VENDOR_CI_MARKERS)


def executing_command(env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    if env is None:
        env = os.environ
    value = (env.get(EXECUTING_COMMAND_ENV) or "").strip()
    return value or None
