"""
kubeversion - kubectl version manager.

Usage:
    kubeversion list               # Pick a release interactively
    kubeversion install VERSION    # Download a release
    kubeversion use VERSION        # Switch the active kubectl
"""

import argparse
import sys

from . import __version__
from .config import load_config
from .errors import KubeversionError
from .logging_config import setup_logging
from .orchestrator import install, interactive_select, use
from .render import ProgressBar
from .selector import TerminalSelector


def cmd_use(args: argparse.Namespace) -> int:
    """Switch to the specified kubectl version."""
    config = load_config(args.config, verbose=args.verbose)
    use(args.version, config)
    return 0


def cmd_install(args: argparse.Namespace) -> int:
    """Install the specified kubectl version."""
    config = load_config(args.config, verbose=args.verbose)
    bar = ProgressBar(f"Downloading {config.binary_name}")
    try:
        install(args.version, config, progress=bar)
    finally:
        bar.finish()
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    """List available kubectl versions and switch to the chosen one."""
    config = load_config(args.config, verbose=args.verbose)
    bar = ProgressBar(f"Downloading {config.binary_name}")
    try:
        interactive_select(config, TerminalSelector(), progress=bar)
    finally:
        bar.finish()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kubeversion",
        description="Kubeversion is a version manager for kubectl that allows "
                    "you to switch between different versions easily.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print warnings and errors",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Also write debug logs to this file",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    use_parser = subparsers.add_parser("use", help="Switch to specified kubectl version")
    use_parser.add_argument("version", help="Version to activate (e.g. 1.29.0 or v1.29.0)")
    use_parser.set_defaults(func=cmd_use)

    list_parser = subparsers.add_parser("list", help="List all available kubectl versions")
    list_parser.set_defaults(func=cmd_list)

    install_parser = subparsers.add_parser("install", help="Install specified kubectl version")
    install_parser.add_argument("version", help="Version to download (e.g. 1.29.0 or v1.29.0)")
    install_parser.set_defaults(func=cmd_install)

    return parser


def main(argv=None) -> int:
    """Main entry point for kubeversion."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(log_file=args.log_file, verbose=args.verbose, quiet=args.quiet)

    try:
        return args.func(args)
    except KubeversionError as e:
        print(f"Error: {e.message}")
        if e.remediation:
            print(f"  Fix: {e.remediation}")
        return 1


def run() -> None:
    """Console script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    run()
