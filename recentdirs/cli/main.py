"""
CLI entry point. Usage: recentdirs <command> [options]
Shell integration: record with `recentdirs add "$PWD"` from a cd hook,
jump with `cd "$(recentdirs open-recent)"`.
"""
import argparse
import shlex
import sys

from recentdirs.application.controller import ActionEvaluator, SelectionController, search_view_notice
from recentdirs.application.feature import RecentDirs
from recentdirs.cli.console import ConsoleHost, normalize_dir
from recentdirs.config import load_config
from recentdirs.core.entry import CommandDescriptor, Listing
from recentdirs.core.exceptions import RecentDirsError
from recentdirs.core.logger import get_logger
from recentdirs.core.state import is_enabled, set_enabled
from recentdirs.core.views import View
from recentdirs.utils.logger import configure_logging

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="recentdirs", description="recentdirs — most recently used directories")
    parser.add_argument("--config", "-c", type=str, default=None, help="Path to YAML config (default: recentdirs/config/default.yaml + RECENTDIRS_CONFIG)")
    parser.add_argument("--history-file-path", type=str, default=None, help="History file (default: $XDG_DATA_HOME/recentdirs/history.json)")
    parser.add_argument("--max-entries", type=int, default=None, help="Keep at most this many entries")
    parser.add_argument("--ignore-prefix", action="append", default=None, dest="ignored_prefixes",
                        help="Never record directories starting with this string (repeatable)")
    parser.add_argument("--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level (default: WARNING or RECENTDIRS_LOG_LEVEL)")
    parser.add_argument("--log-dir", type=str, default=None, help="Directory for recentdirs.log (default: RECENTDIRS_LOG_DIR or console only)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("open-recent", help="Pick a recent directory and open it")
    subparsers.add_parser("load-list", help="Reload the history from disk")
    subparsers.add_parser("save-list", help="Write the history to disk")
    subparsers.add_parser("cleanup", help="Drop local entries whose directory no longer exists")
    subparsers.add_parser("enable", help="Start recording visited directories")
    subparsers.add_parser("disable", help="Stop recording visited directories")
    subparsers.add_parser("list", help="Print entries, most recent first")

    add_parser = subparsers.add_parser("add", help="Record a visited directory")
    add_parser.add_argument("directory", type=str, help="Directory (working directory for --command)")
    add_parser.add_argument("--command", type=str, default=None, help="Search command that produced the view (shell-quoted)")
    add_parser.add_argument("--name", type=str, default=None, help="View name for --command (default: *Find*)")
    add_parser.add_argument("--files", nargs="+", default=None, help="Record a listing of these files under directory")

    remove_parser = subparsers.add_parser("remove", help="Forget one entry")
    remove_parser.add_argument("label", type=str, help="Entry label as printed by `list`")
    return parser


def _view_for_add(args) -> View:
    directory = normalize_dir(args.directory)
    if args.command:
        name = args.name or "*Find*"
        command = CommandDescriptor(tuple(shlex.split(args.command)), directory, name)
        return View(name, directory, command=command)
    if args.files:
        return View(directory, directory, listing=Listing(directory, tuple(args.files)))
    return View(directory, directory)


def run(args, host: ConsoleHost) -> int:
    cfg = load_config(
        override_path=args.config,
        overrides={
            "history_file_path": args.history_file_path,
            "max_entries": args.max_entries,
            "ignored_prefixes": args.ignored_prefixes,
        },
    )
    feature = RecentDirs.from_config(host, cfg)
    data_dir = feature.history_file.parent
    command = args.command

    if command == "enable":
        set_enabled(data_dir, True)
        feature.enable()
        host.message(f"recentdirs enabled ({len(feature.recency)} entries)")
        host.shutdown()
        return 0
    if command == "disable":
        feature.enable()
        feature.disable()
        set_enabled(data_dir, False)
        host.message("recentdirs disabled")
        return 0

    if is_enabled(data_dir):
        feature.enable()

    if command == "open-recent":
        evaluator = ActionEvaluator(host, search_view_notice(cfg["search_view_names"]))
        SelectionController(feature, evaluator).open()
    elif command == "load-list":
        feature.load_list()
        host.message(f"Loaded {len(feature.recency)} entries from {feature.history_file}")
    elif command == "save-list":
        feature.save_list()
    elif command == "cleanup":
        dropped = feature.cleanup()
        feature.save_list()
        host.message(f"Removed {dropped} missing entries")
    elif command == "list":
        for label in feature.labels():
            print(label, file=host.stdout)
    elif command == "add":
        host.announce(_view_for_add(args))
    elif command == "remove":
        if not feature.remove(args.label):
            host.message(f"No entry labelled {args.label!r}")
            host.shutdown()
            return 1
        feature.save_list()
    host.shutdown()
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, log_dir=args.log_dir)

    host = ConsoleHost()
    try:
        return run(args, host)
    except RecentDirsError as e:
        print("ERROR:", e, file=sys.stderr)
        return 1
    except OSError as e:
        logger.debug("Open failed", exc_info=True)
        print("ERROR:", e, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
