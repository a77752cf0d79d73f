"""Run the documented example catalog and summarize pass rates per task."""

from __future__ import annotations

import json
import math
import numbers
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable, Literal

from .catalog import CATALOG, TASKS, CatalogCase
from .errors import classify_exception
from .values import to_display_text, to_python


CaseStatus = Literal["pass", "fail", "error"]


@dataclass(frozen=True)
class CaseResult:
    id: str
    task: str
    status: CaseStatus
    detail: str = ""


@dataclass(frozen=True)
class TaskStats:
    name: str
    cases_run: int
    passed: int
    failed: int
    errors: int
    pass_rate: float | None
    status: str

    @property
    def ok(self) -> bool:
        return self.status in {"pass", "skipped"}


def values_match(got: object, want: object) -> bool:
    """Structural equality that keeps bools apart from numbers and NaN equal to NaN."""
    got = to_python(got)
    want = to_python(want)
    if isinstance(want, list):
        if not isinstance(got, list) or len(got) != len(want):
            return False
        return all(values_match(g, w) for g, w in zip(got, want, strict=True))
    if isinstance(want, bool) or isinstance(got, bool):
        return isinstance(want, bool) and isinstance(got, bool) and want is got
    if isinstance(want, numbers.Number) and isinstance(got, numbers.Number):
        if isinstance(want, numbers.Real) and isinstance(got, numbers.Real):
            if math.isnan(want) or math.isnan(got):
                return math.isnan(want) and math.isnan(got)
        return got == want
    if isinstance(want, (numbers.Number, str)) or isinstance(got, (numbers.Number, str)):
        return type(got) is type(want) and got == want
    return got is want


def run_case(case: CatalogCase) -> CaseResult:
    try:
        got = case.run()
    except Exception as err:
        classified = classify_exception(err)
        return CaseResult(
            id=case.id,
            task=case.task,
            status="error",
            detail=f"{type(classified).__name__}: {classified}",
        )

    if values_match(got, case.expected):
        return CaseResult(id=case.id, task=case.task, status="pass")
    return CaseResult(
        id=case.id,
        task=case.task,
        status="fail",
        detail=f"expected [{to_display_text(case.expected)}], got [{to_display_text(to_python(got))}]",
    )


def run_catalog(cases: Iterable[CatalogCase] = CATALOG) -> list[CaseResult]:
    return [run_case(case) for case in cases]


def _stats(name: str, results: list[CaseResult]) -> TaskStats:
    passed = sum(1 for r in results if r.status == "pass")
    failed = sum(1 for r in results if r.status == "fail")
    errors = sum(1 for r in results if r.status == "error")
    cases_run = len(results)

    if failed or errors:
        status = "fail"
    elif cases_run == 0:
        status = "skipped"
    else:
        status = "pass"

    pass_rate = None if cases_run == 0 else (passed / cases_run) * 100.0
    return TaskStats(
        name=name,
        cases_run=cases_run,
        passed=passed,
        failed=failed,
        errors=errors,
        pass_rate=pass_rate,
        status=status,
    )


def stats_by_task(results: list[CaseResult]) -> list[TaskStats]:
    """One row per registered task, in registry order; tasks with no cases are skipped."""
    rows: list[TaskStats] = []
    for task in TASKS:
        rows.append(_stats(task, [r for r in results if r.task == task]))
    return rows


def aggregate(name: str, stats: list[TaskStats]) -> TaskStats:
    cases_run = sum(s.cases_run for s in stats)
    passed = sum(s.passed for s in stats)
    failed = sum(s.failed for s in stats)
    errors = sum(s.errors for s in stats)
    pass_rate = None if cases_run == 0 else (passed / cases_run) * 100.0
    status = "fail" if (failed or errors) else ("skipped" if cases_run == 0 else "pass")
    return TaskStats(
        name=name,
        cases_run=cases_run,
        passed=passed,
        failed=failed,
        errors=errors,
        pass_rate=pass_rate,
        status=status,
    )


def stats_to_markdown_table(rows: list[TaskStats]) -> str:
    lines = [
        "| Task | Run | Passed | Failed | Errors | Pass Rate | Status |",
        "|---|---:|---:|---:|---:|---:|---|",
    ]
    for row in rows:
        rate = "n/a" if row.pass_rate is None else f"{row.pass_rate:.2f}%"
        lines.append(
            f"| `{row.name}` | {row.cases_run} | {row.passed} | {row.failed} | {row.errors} | {rate} | {row.status} |"
        )
    return "\n".join(lines)


def write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def stats_payload(rows: list[TaskStats]) -> list[dict[str, object]]:
    return [asdict(row) for row in rows]


def failures_payload(results: list[CaseResult]) -> list[dict[str, object]]:
    return [asdict(r) for r in results if r.status != "pass"]

