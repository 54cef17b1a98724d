from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class JenkinsModel(BaseModel):
    """Read-only snapshot of a Jenkins JSON object.

    Jenkins uses camelCase keys; unknown keys are ignored and a ``null`` list
    reads as empty, so only type mismatches fail validation.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @field_validator("*", mode="before")
    @classmethod
    def null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)
        return value


class Job(JenkinsModel):
    name: str = ""
    url: str = ""
    color: str = ""


class View(JenkinsModel):
    jobs: List[Job] = Field(default_factory=list)
    url: str = ""


class TestReportCase(JenkinsModel):
    class_name: str = ""
    name: str = ""
    status: str = ""
    duration: float = 0.0


class TestReportSuite(JenkinsModel):
    name: str = ""
    cases: List[TestReportCase] = Field(default_factory=list)


class TestChildReportsResult(JenkinsModel):
    duration: float = 0.0
    fail_count: int = 0
    pass_count: int = 0
    skip_count: int = 0
    suites: List[TestReportSuite] = Field(default_factory=list)


class TestChildReports(JenkinsModel):
    result: TestChildReportsResult = Field(default_factory=TestChildReportsResult)


class TestReport(JenkinsModel):
    fail_count: int = 0
    skip_count: int = 0
    total_count: int = 0
    # jobs aggregating sub-jobs wrap their suites in child reports
    child_reports: List[TestChildReports] = Field(default_factory=list)
    suites: List[TestReportSuite] = Field(default_factory=list)
