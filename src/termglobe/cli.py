"""Command line entry point."""

import argparse
import logging
import sys
from typing import List, Optional

from textual.logging import TextualHandler

from . import __version__
from .app import GlobeApp
from .config import GlobeConfig
from .worldmap import RESOLUTIONS

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termglobe",
        description="Show your approximate location on a terminal world map.",
    )
    parser.add_argument("--endpoint", help="IP geolocation URL (default: ip-api.com)")
    parser.add_argument("--timeout", type=float, help="HTTP timeout in seconds")
    parser.add_argument("--tick-rate", type=int, metavar="MS",
                        help="Milliseconds between state updates (default: 250)")
    parser.add_argument("--resolution", choices=RESOLUTIONS,
                        help="Natural Earth coastline scale (default: 50m)")
    parser.add_argument("--log-file", help="Also write log records to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--strict", action="store_true", default=None,
                        help="Exit with status 1 when the app stops on an error")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.addHandler(TextualHandler())
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)


def load_config(args: argparse.Namespace) -> GlobeConfig:
    tick_rate = args.tick_rate / 1000 if args.tick_rate is not None else None
    if tick_rate is not None and tick_rate <= 0:
        raise ValueError("--tick-rate must be positive")
    if args.timeout is not None and args.timeout <= 0:
        raise ValueError("--timeout must be positive")
    return GlobeConfig.from_env().with_overrides(
        endpoint=args.endpoint,
        timeout=args.timeout,
        tick_rate=tick_rate,
        resolution=args.resolution,
        strict=args.strict,
    )


def exit_status(app: GlobeApp, strict: bool) -> int:
    """
    Map the app's return code to the process exit status.

    A failed run still exits 0 unless strict mode is on.
    """
    code = app.return_code or 0
    if code == 0:
        return 0
    print(f"TermGlobe stopped on an error (return code {code})")
    if strict:
        return 1
    logger.warning("App failed with return code %d but exiting 0; use --strict to propagate", code)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(args.verbose, args.log_file)

    print("\n" + "=" * 50)
    print("  TermGlobe - Terminal World Map")
    print("=" * 50)
    print("\nControls:")
    print("  r = Refresh location")
    print("  q / Esc = Quit")
    print("\n" + "=" * 50 + "\n")

    app = GlobeApp(config)
    app.run()
    return exit_status(app, config.strict)


def run() -> None:
    """Run the TermGlobe application."""
    sys.exit(main())


if __name__ == "__main__":
    run()
