import curses
import logging
import os
import sys
from types import SimpleNamespace

import config_paths
from csv_source import CsvSource

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")
from orchestrator import Orchestrator

__version__ = "0.1.0"

USAGE = "csvscope - scrollable, searchable CSV viewer\n\nUsage:\n  csvscope [--debug] <path>\n  csvscope -v\n"


def parse_args(args):
    opts = SimpleNamespace(path=None, debug=False, version=False, help=False)
    rest = []
    for arg in args:
        if arg in ("-v", "-V"):
            opts.version = True
        elif arg in ("-h", "--help"):
            opts.help = True
        elif arg in ("-d", "--debug"):
            opts.debug = True
        else:
            rest.append(arg)
    if len(rest) == 1:
        opts.path = rest[0]
    elif len(rest) > 1:
        opts.help = True
    return opts


def configure_logging(level, path=None):
    path = path or config_paths.LOG_PATH
    try:
        logging.basicConfig(
            filename=path,
            level=getattr(logging, level, logging.WARNING),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    except OSError:
        logging.basicConfig(handlers=[logging.NullHandler()])


def main():
    opts = parse_args(sys.argv[1:])

    if opts.version:
        print(__version__)
        return

    if opts.help or not opts.path:
        print(USAGE)
        return

    config_paths.ensure_config_dirs()
    configure_logging("DEBUG" if opts.debug else config_paths.LOG_LEVEL_DEFAULT)
    cfg = config_paths.load_config()
    if not opts.debug:
        logging.getLogger().setLevel(cfg["LOG_LEVEL"])

    try:
        source = CsvSource(opts.path, chunk_size=cfg["CHUNK_SIZE"])
    except FileNotFoundError:
        print(f"File not found: {opts.path}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Load failed: {e}", file=sys.stderr)
        sys.exit(1)
    source.start()

    def curses_main(stdscr):
        Orchestrator(stdscr, source, config=cfg, debug=opts.debug).run()

    curses.wrapper(curses_main)

    if source.error is not None:
        print(f"Load failed: {source.error}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
