# main.py
"""
CLI entrypoint for the naming convention check.

- Reads a resolved deployment description from a JSON file
  (e.g. the output of `serverless print --format json`).
- Supports two modes, mirroring the plugin's lifecycle hooks:
  * check: the on-demand `conventions` command
  * preflight: the automatic check that runs before functions are compiled
- Prints a colorful summary table and, optionally, JSON, CSV and HTML reports.
- Exits non-zero when any convention is broken.
"""

import argparse
import logging
import os

from config import DEFAULT_AWS_REGION
from conventions.plugin import BEFORE_COMPILE_HOOK, COMMAND_HOOK, ConventionsPlugin, DictHost, LoggingSink
from models import ConventionsError
from utils import load_json_file, save_report, print_summary_and_report_path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("conventions")

MODE_HOOKS = {
    "check": COMMAND_HOOK,
    "preflight": BEFORE_COMPILE_HOOK,
}


def run_check(file_path: str, mode: str = "check", stage: str = None, region: str = None,
              report_dir: str = None, print_table: bool = False) -> int:
    """
    Run the convention check against a JSON description and return the exit code.
    """
    # Resolve region: CLI -> env -> config default
    region = region or os.environ.get("AWS_REGION") or DEFAULT_AWS_REGION
    logger.info("Checking naming conventions in %s (mode=%s, region=%s)", file_path, mode, region)

    data = load_json_file(file_path)
    options = {"region": region}
    if stage:
        options["stage"] = stage
    plugin = ConventionsPlugin(DictHost(data), options, {"log": LoggingSink(logger)})

    violations = []
    exit_code = 0
    try:
        plugin.hooks[MODE_HOOKS[mode]]()
    except ConventionsError as e:
        violations = e.violations
        exit_code = 1

    report_paths = None
    if report_dir:
        resolved_stage = plugin.collect().stage
        report_paths = save_report(
            violations,
            stage=resolved_stage,
            extra={"source_file": file_path, "region": region, "mode": mode},
            out_dir=report_dir,
        )
    print_summary_and_report_path(
        violations, report_paths, print_full_table=print_table
    )
    return exit_code


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        description="Serverless naming convention checker."
    )
    p.add_argument(
        "--file",
        required=True,
        help="Path to the resolved deployment description (JSON)",
    )
    p.add_argument(
        "--mode",
        choices=sorted(MODE_HOOKS),
        default="check",
        help="Run as the on-demand command (check) or the pre-package hook (preflight)",
    )
    p.add_argument(
        "--stage",
        help="Stage to check (defaults to provider.stage in the description)",
    )
    p.add_argument(
        "--region",
        help="AWS region (optional)",
    )
    p.add_argument(
        "--report-dir",
        help="Directory to save JSON, CSV and HTML reports (no reports if omitted)",
    )
    p.add_argument(
        "--print-table",
        action="store_true",
        help="Print every violation instead of the first few",
    )
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    exit_code = run_check(
        args.file,
        mode=args.mode,
        stage=args.stage,
        region=args.region,
        report_dir=args.report_dir,
        print_table=args.print_table,
    )
    if exit_code:
        raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
