#!/usr/bin/env python3
"""Command-line interface for wellness outcome analytics.

Usage:
    python -m wellness_outcomes.cli --help
    python -m wellness_outcomes.cli organizations
    python -m wellness_outcomes.cli analytics org-techcorp --output techcorp.json
    python -m wellness_outcomes.cli report org-techcorp --output techcorp.html
    python -m wellness_outcomes.cli --data cohort.json serve --port 3001
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wellness_outcomes.services.analytics_service import AnalyticsConfig, AnalyticsEngine
from wellness_outcomes.shared.database import InMemoryCohortRepository, SnapshotLoadError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_NOT_EXPORTABLE = 2
EXIT_REPORT_FAILED = 3


def setup_parser() -> argparse.ArgumentParser:
    """Set up argument parser."""
    parser = argparse.ArgumentParser(
        description="Wellness Outcomes Analytics CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--data", type=str,
        help="JSON cohort snapshot (default: synthetic demo cohort)"
    )
    parser.add_argument(
        "--seed", type=int, default=12345,
        help="Seed for the synthetic demo cohort"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("organizations", help="List organizations")

    analytics_parser = subparsers.add_parser("analytics", help="Compute organization analytics")
    analytics_parser.add_argument("org_id", help="Organization identifier")
    analytics_parser.add_argument(
        "--output", type=str,
        help="Write JSON to this file instead of stdout"
    )

    report_parser = subparsers.add_parser("report", help="Generate HTML report")
    report_parser.add_argument("org_id", help="Organization identifier")
    report_parser.add_argument(
        "--output", type=str, required=True,
        help="Output HTML file"
    )

    serve_parser = subparsers.add_parser("serve", help="Run the analytics API")
    serve_parser.add_argument(
        "--port", type=int,
        help="Port to listen on (default: $PORT or 3001)"
    )

    return parser


def build_engine(args) -> AnalyticsEngine:
    """Engine over the cohort source selected on the command line."""
    if args.data:
        repository = InMemoryCohortRepository.from_json_file(args.data)
    else:
        repository = InMemoryCohortRepository.from_synthetic(seed=args.seed)
    config = AnalyticsConfig.from_env()
    config.cohort_data_path = args.data
    config.synthetic_seed = args.seed
    return AnalyticsEngine(repository, config=config)


def cmd_organizations(args, engine: AnalyticsEngine) -> int:
    """List organizations command."""
    print("\nOrganizations:")
    print("-" * 60)
    for org in engine.repository.list_organizations():
        enrolled = engine.repository.count_users(org.org_id)
        print(f"  {org.org_id:<20} {org.name:<25} {enrolled:>6,} enrolled")
    return EXIT_OK


def cmd_analytics(args, engine: AnalyticsEngine) -> int:
    """Compute analytics command."""
    analytics = engine.get_organization_analytics(args.org_id)
    if analytics is None:
        print(f"Organization not found: {args.org_id}", file=sys.stderr)
        return EXIT_NOT_FOUND

    payload = json.dumps(analytics.to_dict(), indent=2)
    if args.output:
        Path(args.output).write_text(payload, encoding="utf-8")
        print(f"Analytics written to: {args.output}")
    else:
        print(payload)

    if not analytics.minimum_cohort_met:
        print(
            "Warning: cohort below minimum size; do not display or export these figures.",
            file=sys.stderr,
        )
    return EXIT_OK


def cmd_report(args, engine: AnalyticsEngine) -> int:
    """Generate report command."""
    from wellness_outcomes.services.report_service import (
        ReportError,
        ReportNotExportableError,
        ReportRenderer,
        ensure_exportable,
    )

    analytics = engine.get_organization_analytics(args.org_id)
    if analytics is None:
        print(f"Organization not found: {args.org_id}", file=sys.stderr)
        return EXIT_NOT_FOUND

    try:
        ensure_exportable(analytics)
    except ReportNotExportableError as e:
        print(str(e), file=sys.stderr)
        return EXIT_NOT_EXPORTABLE

    try:
        html = ReportRenderer().render_html(analytics)
    except ReportError as e:
        print(str(e), file=sys.stderr)
        return EXIT_REPORT_FAILED

    Path(args.output).write_text(html, encoding="utf-8")
    print(f"Report written to: {args.output}")
    return EXIT_OK


def cmd_serve(args, engine: AnalyticsEngine) -> int:
    """Run the analytics API."""
    from wellness_outcomes.services.analytics_service import handler

    handler.set_engine(engine)
    handler.run_server(port=args.port)
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = setup_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if not args.command:
        parser.print_help()
        return EXIT_OK

    try:
        engine = build_engine(args)
    except SnapshotLoadError as e:
        print(str(e), file=sys.stderr)
        return EXIT_NOT_FOUND

    commands = {
        "organizations": cmd_organizations,
        "analytics": cmd_analytics,
        "report": cmd_report,
        "serve": cmd_serve,
    }
    return commands[args.command](args, engine)


if __name__ == "__main__":
    sys.exit(main())
