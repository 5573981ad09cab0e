"""Command line entry point: ``python -m cars [demo ...]``."""
import argparse
import sys
from typing import List, Optional

from config import ConfigManager
from utils.exceptions import ConfigurationError
from utils.logging_config import LoggerFactory, get_logger
from validation.schema import KNOWN_DEMOS, LOG_LEVELS
from .demos import run_all

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='creational-demos',
        description='Run the creational design pattern demonstrations.'
    )
    parser.add_argument(
        'demos',
        nargs='*',
        metavar='DEMO',
        help=f"demos to run ({', '.join(KNOWN_DEMOS)}); defaults to demos.enabled from config"
    )
    parser.add_argument('--config', help='YAML or JSON configuration file')
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        help='override logging.log_level'
    )
    parser.add_argument(
        '--structured',
        action='store_true',
        help='emit JSON log lines'
    )
    return parser


def load_settings(args: argparse.Namespace) -> ConfigManager:
    """Merge config file, CREATIONAL_* environment and CLI flags."""
    manager = ConfigManager()
    if args.config:
        manager.load_from_file(args.config, validate=False)
    manager.load_from_env()
    if args.log_level:
        manager.set('logging.log_level', args.log_level)
    if args.structured:
        manager.set('logging.enable_structured', True)
    manager.validate()
    return manager


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    unknown = [name for name in args.demos if name not in KNOWN_DEMOS]
    if unknown:
        parser.error(f"unknown demo(s): {', '.join(unknown)}; choose from {', '.join(KNOWN_DEMOS)}")

    try:
        settings = load_settings(args)
    except ConfigurationError as e:
        print(f"configuration error: {e.message}", file=sys.stderr)
        for detail in e.details.get('errors', []):
            print(f"  {detail}", file=sys.stderr)
        return 1

    LoggerFactory.configure(
        log_level=settings.get('logging.log_level'),
        enable_structured=settings.get('logging.enable_structured'),
        log_dir=settings.get('logging.log_dir'),
        force=True
    )

    names = args.demos or settings.get('demos.enabled')
    results = run_all(names, out=print, versions=settings.get('singleton.versions'))

    failed = [name for name, lines in results.items() if lines is None]
    if failed:
        logger.error(f"Demos failed: {', '.join(failed)}")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
