"""Run every documented example case and report per-task pass rates."""

from __future__ import annotations

import argparse
from pathlib import Path

from array_tasks.catalog import CATALOG, cases_for
from array_tasks.conformance import (
    aggregate,
    failures_payload,
    run_catalog,
    stats_by_task,
    stats_payload,
    stats_to_markdown_table,
    write_json,
)


def _build_markdown(rows, results) -> str:
    overall = aggregate("catalog", rows)
    lines = [
        "# Example Catalog Report",
        "",
        stats_to_markdown_table(rows),
        "",
        "## Summary",
        "",
        f"- Total cases run: {overall.cases_run}",
        f"- Passed: {overall.passed}",
        f"- Failures: {overall.failed}",
        f"- Errors: {overall.errors}",
        f"- Pass rate: {'n/a' if overall.pass_rate is None else f'{overall.pass_rate:.2f}%'}",
        f"- Status: `{overall.status}`",
    ]
    broken = [r for r in results if r.status != "pass"]
    if broken:
        lines.extend(["", "## Failing cases", ""])
        lines.extend(f"- `{r.id}` ({r.status}): {r.detail}" for r in broken)
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--task",
        action="append",
        default=[],
        help="limit the run to this task name (repeatable)",
    )
    parser.add_argument(
        "--json-out",
        default="output/catalog/catalog_report.json",
        help="where to write machine-readable results",
    )
    parser.add_argument(
        "--markdown-out",
        default="output/catalog/catalog_report.md",
        help="where to write markdown summary",
    )
    args = parser.parse_args()

    cases = CATALOG
    if args.task:
        cases = tuple(case for task in args.task for case in cases_for(task))

    results = run_catalog(cases)
    rows = [row for row in stats_by_task(results) if row.cases_run]
    overall = aggregate("catalog", rows)

    report = _build_markdown(rows, results)
    print(report)

    write_json(
        Path(args.json_out),
        {
            "tasks": stats_payload(rows),
            "failures": failures_payload(results),
            "summary": stats_payload([overall])[0],
        },
    )
    Path(args.markdown_out).parent.mkdir(parents=True, exist_ok=True)
    Path(args.markdown_out).write_text(report + "\n", encoding="utf-8")

    return 1 if overall.status == "fail" else 0


if __name__ == "__main__":
    raise SystemExit(main())
