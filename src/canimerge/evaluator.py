from __future__ import annotations

import logging
from enum import Enum

import typer

from .config import CheckConfig, view_url
from .details import report_failures
from .jenkins import decode_view, fetch_json
from .logging import log_event
from .models import View

logger = logging.getLogger(__name__)


class JobStatus(Enum):
    PASS = "PASS"
    PASS_IN_PROGRESS = "PASS (in progress)"
    ABORTED = "ABORTED"
    FAIL_IN_PROGRESS = "FAIL (in progress)"
    FAIL = "FAIL"

    @property
    def failing(self) -> bool:
        return self in (JobStatus.FAIL, JobStatus.FAIL_IN_PROGRESS)


def classify(color: str) -> JobStatus:
    """Map a Jenkins ball color to a status.

    Aborted builds never block a merge; every color that is not blue,
    blue_anime or aborted counts as a failure (red, yellow, grey, notbuilt...).
    """
    if color == "blue":
        return JobStatus.PASS
    if color == "blue_anime":
        return JobStatus.PASS_IN_PROGRESS
    if "aborted" in color:
        return JobStatus.ABORTED
    if color == "red_anime":
        return JobStatus.FAIL_IN_PROGRESS
    return JobStatus.FAIL


def is_view_blue(view: View, view_name: str, config: CheckConfig) -> bool:
    blue = True
    for job in view.jobs:
        status = classify(job.color)
        if config.detail:
            typer.echo(f"{status.value}: {job.name}")
        if status.failing:
            if config.detail:
                report_failures(view_name, job.name, config)
            blue = False
    return blue


def check_branch(view_name: str, display: str, config: CheckConfig) -> bool:
    log_event(logger, "check_started", {"view": view_name})
    url = view_url(config, view_name)
    view = decode_view(fetch_json(url, config.debug), url)
    log_event(logger, "view_fetched", {"view": view_name, "jobs": len(view.jobs)})
    blue = is_view_blue(view, view_name, config)
    verdict = "PASS" if blue else "FAIL"
    typer.echo(f">> {verdict}: {display}.")
    log_event(logger, "check_finished", {"view": view_name, "verdict": verdict})
    return blue
