import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .core.diff_engine import DiffResult, diff_snapshots
from .core.errors import ConfigError, StackDiffError
from .core.loader import load_snapshot
from .core.ranker import rank_result
from .report.json_report import write_json_report
from .report.text_report import write_text
from .utils.config import ConfigManager, DiffOptions
from .utils.logging_utils import get_logger, setup_logging

logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stack-diff",
        description="Compare two stack dumps and report changed, left-only and right-only stacks"
    )
    parser.add_argument("-left", "--left", help="left stacktrace file to parse", default=None)
    parser.add_argument("-right", "--right", help="right stacktrace file to parse", default=None)
    parser.add_argument("-over", "--over", type=int, default=None,
                        help="don't show in output if # of goroutines <= over (default: 10)")
    parser.add_argument("-diff", "--diff", type=int, default=None,
                        help="don't show in output if diff of # of goroutines <= diff (default: 5)")
    parser.add_argument("-omitidentical", "--omitidentical", action=argparse.BooleanOptionalAction,
                        default=None,
                        help="omit stacktraces that are identical between files (default: on)")
    parser.add_argument("--json", metavar="PATH", default=None, help="also write a JSON report")
    parser.add_argument("--gui", action="store_true", help="show the result in a viewer window")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING",
                        help="console log level (default: WARNING)")
    parser.add_argument("--no-log-file", action="store_true", help="disable the rotating log file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_options(args: argparse.Namespace, config: ConfigManager) -> DiffOptions:
    """Merge command line arguments over the configured defaults."""
    return DiffOptions(
        left=args.left,
        right=args.right,
        over=args.over if args.over is not None else config.get_default_over(),
        diff=args.diff if args.diff is not None else config.get_default_diff(),
        omit_identical=(args.omitidentical if args.omitidentical is not None
                        else config.get_default_omit_identical()),
    )


def open_config() -> ConfigManager:
    """
    Load the persisted defaults.

    Raises:
        ConfigError: If the config directory cannot be accessed
    """
    try:
        return ConfigManager()
    except OSError as e:
        raise ConfigError(f"couldn't use config directory: {e}") from e


def compare_files(options: DiffOptions) -> DiffResult:
    """
    Load both dumps, diff them and rank the result.

    Raises:
        ConfigError, DumpReadError, ParseError: On any failure; nothing is
            returned for a partially processed run
    """
    options.validate()
    left = load_snapshot(options.left, options.over)
    right = load_snapshot(options.right, options.over)
    return rank_result(diff_snapshots(left, right, options.diff))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = open_config()
        setup_logging(
            level=getattr(logging, args.log_level),
            log_to_file=not args.no_log_file,
            config_manager=config
        )
        options = resolve_options(args, config)
        result = compare_files(options)
        if args.json:
            write_json_report(result, options, args.json)
    except StackDiffError as e:
        logger.debug(f"Diff failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.gui:
        try:
            from .gui.result_window import launch_viewer
        except ImportError as e:
            logger.debug(f"Result viewer unavailable: {e}")
            print(f"Error: result viewer unavailable: {e}", file=sys.stderr)
            return 1
        return launch_viewer(result, options)

    write_text(result, sys.stdout, options.omit_identical)
    return 0


def gui_main() -> int:
    """Entry point of stack-diff-gui: same options, result shown in the viewer."""
    return main(["--gui"] + sys.argv[1:])


if __name__ == "__main__":
    sys.exit(main())
