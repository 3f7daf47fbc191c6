# utils.py
"""
Utility helpers: JSON loading, report generation, and console output.

- Uses Rich for colorful, wrapped tables in the terminal.
- Saves JSON, CSV, and HTML reports when the CLI is asked for them.
"""

from dataclasses import asdict
from datetime import datetime, timezone
from html import escape
from typing import List, Dict
import json
import csv
import os
from json import JSONDecodeError

from rich.console import Console
from rich.markup import escape as escape_markup
from rich.table import Table

from models import Violation

_console = Console()

REPORT_FIELDS = ["rule", "resource", "message"]


def load_json_file(path: str) -> dict:
    """
    Load JSON from a file and return a Python dict.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input JSON file not found: {path}.")
    try:
        with open(path, "r", encoding="utf-8-sig") as fh:
            return json.load(fh)
    except JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno} column {e.colno})") from e

def ensure_reports_dir(path: str = "reports") -> str:
    os.makedirs(path, exist_ok=True)
    return path

def violations_to_table_rows(violations: List[Violation]) -> List[List[str]]:
    return [[str(v.resource), str(v.rule), str(v.message)] for v in violations]

def save_report(violations: List[Violation], stage: str, extra: dict = None, out_dir: str = "reports") -> Dict[str, str]:
    """
    Save JSON, CSV, and HTML reports and return their paths.
    """
    out_dir = ensure_reports_dir(out_dir)
    now = datetime.now(timezone.utc).replace(microsecond=0).strftime("%Y-%m-%dT%H:%M:%SZ")
    report = {
        "check_time": now,
        "stage": stage,
        "summary": {"violations_count": len(violations), "passed": not violations},
        "violations": [asdict(v) for v in violations],
    }
    if extra:
        report["extra"] = extra

    base_ts = now.replace(":", "-")
    json_path = os.path.join(out_dir, f"conventions-{base_ts}-{stage}.json")
    csv_path = os.path.join(out_dir, f"conventions-{base_ts}-{stage}.csv")
    html_path = os.path.join(out_dir, f"conventions-{base_ts}-{stage}.html")

    # JSON
    with open(json_path, "w", encoding="utf-8") as fh:
        json.dump(report, fh, indent=2)

    # CSV
    with open(csv_path, "w", encoding="utf-8", newline="") as fh:
        writer = csv.DictWriter(fh, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for v in report["violations"]:
            writer.writerow({k: v.get(k, "") for k in REPORT_FIELDS})

    # HTML
    html_rows: List[str] = []
    html_rows.append("<!doctype html>")
    html_rows.append("<html><head><meta charset='utf-8'><title>Naming Convention Report</title>")
    html_rows.append("<style>body{font-family:Arial,Helvetica,sans-serif;margin:20px}table{border-collapse:collapse;width:100%}th,td{border:1px solid #ddd;padding:8px}th{background:#f2f2f2;text-align:left}tr:nth-child(even){background:#fafafa}</style>")
    html_rows.append("</head><body>")
    html_rows.append(f"<h2>Naming Convention Report - {now} - stage: {escape(stage)}</h2>")
    html_rows.append(f"<p>Total violations: {len(report['violations'])}</p>")
    if extra:
        html_rows.append("<div><strong>Metadata:</strong><ul>")
        for k, v in extra.items():
            html_rows.append(f"<li>{escape(str(k))}: {escape(str(v))}</li>")
        html_rows.append("</ul></div>")
    html_rows.append("<table><thead><tr><th>Resource</th><th>Rule</th><th>Message</th></tr></thead><tbody>")
    for v in report["violations"]:
        resource = escape(str(v.get("resource", "")))
        rule = escape(str(v.get("rule", "")))
        message = escape(str(v.get("message", "")))
        html_rows.append(f"<tr><td>{resource}</td><td>{rule}</td><td>{message}</td></tr>")
    html_rows.append("</tbody></table></body></html>")
    with open(html_path, "w", encoding="utf-8") as fh:
        fh.write("\n".join(html_rows))

    return {"json": json_path, "csv": csv_path, "html": html_path}

# --- Console printing with color/wrapping ---

def print_summary_and_report_path(violations: List[Violation], report_paths: Dict[str, str] = None, show_top: int = 10, print_full_table: bool = False, console: Console = None):
    """
    Print a compact summary and a colorful table of violations.

    - Only the first `show_top` rows are shown unless print_full_table is set.
    - Report paths are listed when reports were written.
    """
    console = console or _console
    total = len(violations)
    console.print("\nConvention check summary:")
    console.print(f"- Total violations: {total}")
    if total:
        rows = violations_to_table_rows(violations)
        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Resource", style="cyan", overflow="fold")
        table.add_column("Rule", style="magenta")
        table.add_column("Message", style="red", overflow="fold")
        for r in (rows if print_full_table else rows[:show_top]):
            table.add_row(*(escape_markup(c) for c in r))
        console.print(table)
        if not print_full_table and total > show_top:
            console.print(f"... {total - show_top} more (use --print-table to show all)")
    if report_paths:
        console.print("\nSaved reports:")
        console.print(f"- JSON: {report_paths.get('json')}")
        console.print(f"- CSV:  {report_paths.get('csv')}")
        console.print(f"- HTML: {report_paths.get('html')}\n")
