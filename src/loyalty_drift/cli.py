"""Loyalty Drift CLI interface."""

import argparse
import json
import logging
import sys
from pathlib import Path

from .drift import fields_by_kind, impact_summary, targeting_summary
from .events import EventParseError, check_events, get_scenario, list_scenarios
from .store import ConfigError, JsonConfigStore, get_root_path

logger = logging.getLogger(__name__)


def get_store(root: Path | None = None) -> JsonConfigStore:
    """Get the config store."""
    if root is None:
        root = get_root_path()
    return JsonConfigStore(root)


def read_event_source(source: str) -> str:
    """Read raw event text from a file path, or stdin for '-'."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def cmd_init(args: argparse.Namespace) -> int:
    """Initialize .loyalty-drift/ in the project root."""
    store = get_store()

    if store.is_initialized():
        print("Loyalty Drift already initialized in this directory.")
        return 0

    store.initialize()
    print(f"Initialized Loyalty Drift in {store.config_dir}")
    return 0


def cmd_fields(args: argparse.Namespace) -> int:
    """Show or replace the tracked fields."""
    store = get_store()

    try:
        if args.set:
            config = store.set_tracked_fields(args.set)
            print(f"Tracked fields updated ({len(config.tracked_fields)}).")
        else:
            config = store.load_config()

        for name in config.tracked_fields:
            print(name)
        return 0

    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_scenarios(args: argparse.Namespace) -> int:
    """List predefined scenarios."""
    for scenario in list_scenarios():
        print(scenario.format_display())
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Compare two versions of an event."""
    store = get_store()

    try:
        config = store.load_config()

        if args.scenario:
            scenario = get_scenario(args.scenario)
            raw_v1, raw_v2 = scenario.v1, scenario.v2
        elif args.v1 == "-" and args.v2 == "-":
            print("Error: only one event can be read from stdin.", file=sys.stderr)
            return 1
        elif args.v1 and args.v2:
            raw_v1 = read_event_source(args.v1)
            raw_v2 = read_event_source(args.v2)
        else:
            print("Error: provide --scenario or two event files.", file=sys.stderr)
            return 1

        report = check_events(raw_v1, raw_v2, config.tracked_fields)

    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1
    except (OSError, ConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"Error: event file is not valid UTF-8 text ({e.reason})", file=sys.stderr)
        return 1
    except EventParseError as e:
        logger.debug("Refusing to compare unparsed events: %s", e.errors)
        print(str(e), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    print(report.format_result())
    if args.details:
        print()
        print(impact_summary(report))
        for kind, names in fields_by_kind(report).items():
            print(f"{kind.capitalize()}: {', '.join(names)}")
        print(targeting_summary(report))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the MCP server."""
    from .server import main as server_main

    server_main()
    return 0


def cmd_web(args: argparse.Namespace) -> int:
    """Start the web dashboard."""
    from .web import main as web_main

    try:
        web_main()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="loyalty-drift",
        description="Loyalty Drift - field-level drift checks for loyalty events",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # init
    subparsers.add_parser("init", help="Initialize .loyalty-drift/ in current directory")

    # fields
    fields_parser = subparsers.add_parser("fields", help="Show or set tracked fields")
    fields_parser.add_argument(
        "--set", nargs="+", metavar="FIELD", help="Replace tracked fields (in order)"
    )

    # scenarios
    subparsers.add_parser("scenarios", help="List predefined scenarios")

    # check
    check_parser = subparsers.add_parser("check", help="Check two event versions for drift")
    check_parser.add_argument("v1", nargs="?", help="Event v1 JSON file ('-' for stdin)")
    check_parser.add_argument("v2", nargs="?", help="Event v2 JSON file ('-' for stdin)")
    check_parser.add_argument("--scenario", "-s", help="Use a predefined scenario")
    check_parser.add_argument(
        "--json", action="store_true", help="Print the report as JSON"
    )
    check_parser.add_argument(
        "--details", "-d", action="store_true", help="Include impact and targeting notes"
    )

    # serve
    subparsers.add_parser("serve", help="Start the MCP server")

    # web
    subparsers.add_parser("web", help="Start the web dashboard")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 0

    # Dispatch to command handlers
    handlers = {
        "init": cmd_init,
        "fields": cmd_fields,
        "scenarios": cmd_scenarios,
        "check": cmd_check,
        "serve": cmd_serve,
        "web": cmd_web,
    }

    handler = handlers.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
