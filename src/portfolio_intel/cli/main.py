"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path


def main() -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="portfolio-intel",
        description="Portfolio data layer: TryHackMe stats normalization and skills radar layout",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--api-base",
        type=str,
        default=None,
        help="Backend base URL (tried before PORTFOLIO_API_BASE and config)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to client config YAML",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # normalize
    normalize_parser = subparsers.add_parser("normalize", help="Normalize a TryHackMe payload")
    normalize_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read payload JSON from file (default: fetch /api/tryhackme)",
    )
    normalize_parser.add_argument("--output", type=Path, default=None, help="Write JSON to file (default: stdout)")

    # chart
    chart_parser = subparsers.add_parser("chart", help="Compute skills radar chart layout")
    chart_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read payload JSON from file (default: fetch /api/tryhackme)",
    )
    chart_parser.add_argument("--axes", type=int, default=5, help="Number of radar axes (default: 5)")
    chart_parser.add_argument("--output", type=Path, default=None, help="Write JSON to file (default: stdout)")

    # dashboard
    dashboard_parser = subparsers.add_parser(
        "dashboard",
        help="Fetch profile, repos and TryHackMe concurrently and print the joined view",
    )
    dashboard_parser.add_argument("--output", type=Path, default=None, help="Write JSON to file (default: stdout)")

    # repo (admin)
    repo_parser = subparsers.add_parser("repo", help="Admin: edit repository metadata")
    repo_sub = repo_parser.add_subparsers(dest="repo_action", required=True)
    update_parser = repo_sub.add_parser("update", help="Set description/readme/pin for a repository")
    update_parser.add_argument("name", type=str, help="Repository name")
    update_parser.add_argument("--description", type=str, default="", help="Custom description")
    update_parser.add_argument("--readme", type=str, default="", help="Custom readme text")
    pin_group = update_parser.add_mutually_exclusive_group()
    pin_group.add_argument("--pinned", dest="pinned", action="store_true", help="Pin repository")
    pin_group.add_argument("--unpinned", dest="pinned", action="store_false", help="Unpin repository")
    update_parser.set_defaults(pinned=False)
    update_parser.add_argument("--pin-order", type=int, default=0, help="Position among pinned repos")
    repo_sub.add_parser("refresh", help="Re-sync repositories from GitHub")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "normalize":
        _run_normalize(args)
    elif args.command == "chart":
        _run_chart(args)
    elif args.command == "dashboard":
        _run_dashboard(args)
    elif args.command == "repo":
        _run_repo(args)
    else:
        parser.print_help()


def _load_config(args: argparse.Namespace):
    from portfolio_intel.config import ClientConfig

    try:
        return ClientConfig.load(args.config)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Invalid config: {e}")


def _load_payload(args: argparse.Namespace):
    """Payload from --input, or the live /api/tryhackme response."""
    from portfolio_intel.client import PortfolioApiClient, PortfolioApiError

    if args.input:
        try:
            return json.loads(args.input.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise SystemExit(f"Could not read payload from {args.input}: {e}")

    with PortfolioApiClient(base_url=args.api_base, config=_load_config(args)) as client:
        try:
            return client.get_tryhackme()
        except PortfolioApiError as e:
            raise SystemExit(f"Fetch failed: {e}")


def _emit(data, output: Path | None, label: str) -> None:
    text = json.dumps(data, indent=2, default=str)
    if output:
        output.write_text(text, encoding="utf-8")
        print(f"Wrote {label} to {output}")
    else:
        print(text)


def _run_normalize(args: argparse.Namespace) -> None:
    """Run normalize command."""
    from portfolio_intel.normalizer import normalize

    stats = normalize(_load_payload(args))
    _emit(stats.model_dump(mode="json"), args.output, "normalized stats")


def _run_chart(args: argparse.Namespace) -> None:
    """Run chart command."""
    from portfolio_intel.chart import build_radar_chart
    from portfolio_intel.normalizer import normalize

    stats = normalize(_load_payload(args))
    if stats.disabled:
        print(stats.message, file=sys.stderr)
    try:
        chart = build_radar_chart(stats.top_skills(args.axes), axis_count=args.axes)
    except ValueError as e:
        raise SystemExit(str(e))
    _emit(chart.model_dump(mode="json"), args.output, "radar chart")


def _run_dashboard(args: argparse.Namespace) -> None:
    """Run dashboard command. Partial failures are reported, not fatal."""
    from portfolio_intel.client import run_dashboard
    from portfolio_intel.display import room_lines, skill_bars

    dashboard = run_dashboard(base_url=args.api_base, config=_load_config(args))
    data = dashboard.model_dump(mode="json")
    data["skill_bars"] = skill_bars(dashboard.stats.skills)
    data["room_lines"] = room_lines(dashboard.stats.rooms, dashboard.stats.room_count)
    _emit(data, args.output, "dashboard")

    for section, message in dashboard.errors.items():
        print(f"Warning: {section} unavailable: {message}", file=sys.stderr)


def _run_repo(args: argparse.Namespace) -> None:
    """Run repo admin command."""
    from portfolio_intel.client import PortfolioApiClient, PortfolioApiError
    from portfolio_intel.models.site import RepoOverride

    with PortfolioApiClient(base_url=args.api_base, config=_load_config(args)) as client:
        try:
            if args.repo_action == "update":
                override = RepoOverride(
                    description=args.description,
                    readme=args.readme,
                    pinned=args.pinned,
                    pin_order=args.pin_order,
                )
                result = client.update_repo(args.name, override)
            else:
                result = client.refresh_repos()
        except (PortfolioApiError, ValueError) as e:
            raise SystemExit(f"Request failed: {e}")
    print(json.dumps(result, indent=2, default=str))


if __name__ == "__main__":
    main()
