from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

import typer

from .config import CheckConfig, report_url
from .errors import DecodeError, RetrievalError
from .jenkins import decode_test_report, fetch_json
from .logging import log_event
from .models import TestReport, TestReportSuite

FAILED = "FAILED"

logger = logging.getLogger(__name__)


def _failed_in(suites: Iterable[TestReportSuite]) -> List[Tuple[str, str]]:
    failed = []
    for suite in suites:
        for case in suite.cases:
            if case.status == FAILED:
                failed.append((suite.name, case.name))
    return failed


def failing_cases(report: TestReport) -> List[Tuple[str, str]]:
    """(suite, case) pairs for every failed case, child reports first.

    Both shapes are always scanned; a report may populate either or both.
    """
    failed = []
    for child in report.child_reports:
        failed.extend(_failed_in(child.result.suites))
    failed.extend(_failed_in(report.suites))
    return failed


def report_failures(view: str, job: str, config: CheckConfig) -> List[Tuple[str, str]]:
    url = report_url(config, view, job)
    try:
        body = fetch_json(url, config.debug)
        report = decode_test_report(body, url)
    except (RetrievalError, DecodeError) as exc:
        log_event(logger, "detail_unavailable", {"view": view, "job": job, "error": str(exc)})
        typer.echo(f"\tNo detail results available for {job}.")
        return []

    failed = failing_cases(report)
    for suite_name, case_name in failed:
        typer.echo(f"\t{suite_name} {case_name} failed")
    if config.debug and not failed:
        typer.echo(f"DEBUG BODY:\n{body.decode('utf-8', errors='replace')}")
    return failed
