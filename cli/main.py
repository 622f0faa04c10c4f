"""CLI entry point and argument parsing"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from rich.console import Console

import settings
from bridge import BridgeServer
from config import BridgeConfig
from cli.status_display import show_startup_banner


console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Canvas OAuth Bridge")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    parser.add_argument("--bind", "-b", default=None, help="Override bind address (default: from config)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Override listen port (default: from config)")
    parser.add_argument(
        "--institution",
        default=None,
        help="Institution name shown on the pages (default: INSTITUTION_NAME)"
    )
    parser.add_argument(
        "--upstream-host",
        default=None,
        help="Canvas host for the token help link and pass-through (default: UPSTREAM_API_HOST)"
    )
    parser.add_argument(
        "--passthrough",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Mount the /api/v1/ pass-through proxy (default: PASSTHROUGH_ENABLED)"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> BridgeConfig:
    """Apply CLI overrides on top of the configured settings"""
    return BridgeConfig(
        institution_name=args.institution or settings.INSTITUTION_NAME,
        upstream_api_host=args.upstream_host or settings.UPSTREAM_API_HOST,
        passthrough_enabled=settings.PASSTHROUGH_ENABLED if args.passthrough is None else args.passthrough,
    )


def main(argv: Optional[Sequence[str]] = None):
    """Entry point for the CLI"""
    args = build_parser().parse_args(argv)

    if not args.debug:
        logging.basicConfig(
            level=str(settings.LOG_LEVEL).upper(),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        )

    try:
        server = BridgeServer(
            config=config_from_args(args),
            debug=args.debug,
            bind_address=args.bind,
            port=args.port,
        )
        show_startup_banner(server, console)
        server.run()

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
    except Exception as e:
        console.print(f"\n[red]Fatal error:[/red] {e}")
        if args.debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
