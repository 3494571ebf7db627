"""
CLI entrypoint for the bootstrapper.

Usage:
    python -m axroot
    python -m axroot --root deps/arceos --depth 1
    AX_ROOT=/opt/arceos python -m axroot --no-configure
"""
import argparse
import logging
import sys
from typing import List, Optional

from axroot.bootstrapper import DependencyBootstrapper
from axroot.config import (
    DEFAULT_CONFIG_FILE,
    DEFAULT_CONFIGURE_SCRIPT,
    DEFAULT_REMOTE_URL,
    DEFAULT_ROOT_PATH,
    ENV_CONFIG_FILE,
    ENV_REMOTE_URL,
    ENV_ROOT_PATH,
    resolve_config,
)
from axroot.errors import BootstrapError

# Exit code for bad configuration (matches argparse usage errors)
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="axroot",
        description="Clone the ArceOS sources if missing and configure the build to use them"
    )
    parser.add_argument(
        "--root",
        dest="root_path",
        help=f"Dependency root directory (default: ${ENV_ROOT_PATH} or {DEFAULT_ROOT_PATH})"
    )
    parser.add_argument(
        "--remote-url",
        help=f"Repository to clone from (default: ${ENV_REMOTE_URL} or {DEFAULT_REMOTE_URL})"
    )
    parser.add_argument(
        "--config",
        help=f"YAML config file (default: ${ENV_CONFIG_FILE} or ./{DEFAULT_CONFIG_FILE} if present)"
    )
    parser.add_argument(
        "--configure-script",
        help=f"Path configuration script (default: {DEFAULT_CONFIGURE_SCRIPT})"
    )
    parser.add_argument(
        "--no-configure",
        action="store_true",
        help="Skip the path configuration step"
    )
    parser.add_argument(
        "--depth",
        type=int,
        help="Shallow clone depth (default: full clone)"
    )
    parser.add_argument(
        "--branch",
        help="Branch or tag to clone (default: remote HEAD)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the bootstrapper.

    Returns:
        Exit code (0 = success)
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    cli_overrides = {
        'root_path': args.root_path,
        'remote_url': args.remote_url,
        'configure_script': args.configure_script,
        'clone_depth': args.depth,
        'branch': args.branch,
    }
    if args.no_configure:
        cli_overrides['configure_enabled'] = False

    try:
        config = resolve_config(cli_overrides, config_file=args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ Error loading config: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    bootstrapper = DependencyBootstrapper.from_config(config)

    try:
        bootstrapper.ensure_dependency(config.root_path, config.remote_url)
    except BootstrapError as e:
        print(f"❌ {e}", file=sys.stderr)
        return e.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
