from __future__ import annotations

from pydantic import BaseModel, ConfigDict

DEFAULT_BASE_URL = "http://ci"


class CheckConfig(BaseModel):
    """Settings for one canimerge run, built once from the CLI flags."""

    model_config = ConfigDict(frozen=True)

    detail: bool = False
    debug: bool = False
    base_url: str = DEFAULT_BASE_URL
    master_view: str = "A-master"
    master_display: str = "master"
    branch_view_prefix: str = "branch-"


def branch_view(config: CheckConfig, branch: str) -> str:
    return f"{config.branch_view_prefix}{branch}"


def view_url(config: CheckConfig, view: str) -> str:
    return f"{config.base_url.rstrip('/')}/view/{view}/api/json?pretty=true"


def report_url(config: CheckConfig, view: str, job: str) -> str:
    return (
        f"{config.base_url.rstrip('/')}/view/{view}/job/{job}"
        "/lastCompletedBuild/testReport/api/json?pretty=true"
    )
