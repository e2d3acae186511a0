"""kitty-cli command line entry point.

Usage::

    kitty-cli customer
    kitty-cli customer --base-dir ./my-app
    kitty-cli customer --dry-run
    python -m kitty_cli customer
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from kitty_cli.config import Config
from kitty_cli.errors import KittyError, UsageError
from kitty_cli.scaffolder import ScaffoldExecutor, ScaffoldResult, build_plan, render_banner
from kitty_cli.utils import (
    err_console,
    print_error,
    print_plain,
    print_success,
    print_summary_table,
    print_warning,
)

USAGE_EXAMPLE = "Example: kitty-cli customer"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kitty-cli",
        description="kitty-cli -- scaffold a feature module under src/features",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  kitty-cli customer\n"
            "  kitty-cli customer --base-dir ./my-app\n"
            "  kitty-cli customer --dry-run\n"
        ),
    )
    # Optional so that a missing name gets the tool's own message and exit code.
    parser.add_argument(
        "feature_name",
        nargs="?",
        default="",
        help="Name of the feature module, e.g. customer",
    )
    parser.add_argument(
        "--base-dir", "-C",
        default=None,
        help="Project root to create src/features/<name> in (default: current directory)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be created without writing anything",
    )
    return parser


def _print_dry_run_summary(result: ScaffoldResult) -> None:
    print_summary_table(
        {
            "Feature root": str(result.root),
            "Would create": str(result.created_count),
            "Already present": str(result.skipped_count),
        },
        title="Dry run",
    )


def run(feature_name: str, config: Config) -> ScaffoldResult:
    """Plan and apply the scaffold for *feature_name*.

    Raises:
        UsageError: If *feature_name* is empty.
        FilesystemError: If a directory or file could not be created.
    """
    plan = build_plan(
        feature_name,
        config.base_dir,
        features_dir=config.features_dir,
    )
    return ScaffoldExecutor(dry_run=config.dry_run).apply(plan)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``kitty-cli``."""
    args = _build_parser().parse_args(argv)

    if not args.feature_name:
        print_error("Error: Please provide a feature name.")
        print_plain(USAGE_EXAMPLE, target=err_console)
        sys.exit(1)

    config = Config(dry_run=args.dry_run)
    if args.base_dir:
        config.base_dir = Path(args.base_dir)

    try:
        result = run(args.feature_name, config)
    except UsageError as exc:
        print_error(f"Error: {exc}")
        print_plain(USAGE_EXAMPLE, target=err_console)
        sys.exit(1)
    except (KittyError, OSError, ValueError) as exc:
        print_error(f"Error creating folder structure: {exc}")
        sys.exit(1)

    if config.dry_run:
        _print_dry_run_summary(result)
        print_success("Dry run complete: nothing was written.")
        return

    if result.created_count == 0:
        print_warning(
            f"Nothing to create: {result.root} is already scaffolded.",
            target=err_console,
        )

    print_plain(render_banner(args.feature_name, config.docs_url))


if __name__ == "__main__":
    main()
