"""
Usage examples:
    python3 -m specter_xml -l urls.txt -o results.txt
    python3 -m specter_xml -l urls.txt -o hits.txt -w 24 --silent
"""

import argparse
import logging
import sys
import time

from specter_xml import __version__
from specter_xml.config import DEFAULT_WORKERS, ScanOptions
from specter_xml.dispatcher import Dispatcher
from specter_xml.engine import ProbeEngine
from specter_xml.sink import ResultSink
from specter_xml.targets import iter_targets, open_target_list

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="specter-xml",
        description="Concurrent time-based blind SQLi probe (sitemap.xml SLEEP payload).",
        epilog=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-l", "--list", dest="list_path", help="Path to the text file containing URLs", default=None)
    p.add_argument("-o", "--output", dest="output_path", help="Output file path (appended to)", default=None)
    p.add_argument("-w", "--workers", help=f"Number of concurrent workers (default {DEFAULT_WORKERS})", type=int, default=DEFAULT_WORKERS)
    p.add_argument("--silent", help="Only output URLs where the crafted payload exceeds 8 seconds", action="store_true")
    p.add_argument("-v", "--verbose", help="Debug diagnostics on stderr", action="store_true")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = p.parse_args(argv)

    if not args.list_path or not args.output_path:
        p.print_usage()
        print("[!] Both -l/--list and -o/--output are required.")
        sys.exit(1)
    if args.workers < 1:
        p.error("--workers must be at least 1")

    return ScanOptions(
        list_path=args.list_path,
        output_path=args.output_path,
        workers=args.workers,
        silent=args.silent,
        verbose=args.verbose,
    )


def setup_logging(verbose):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    # urllib3 retries and connection chatter are noise at our debug level
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def scan(opts):
    try:
        f = open_target_list(opts.list_path)
    except OSError as e:
        print("[!] Error opening file:", e)
        sys.exit(1)

    engine = ProbeEngine(silent=opts.silent)
    sink = ResultSink(opts.output_path)
    dispatcher = Dispatcher(engine, sink, workers=opts.workers)

    if not opts.silent:
        print(f"[*] Probing targets from {opts.list_path} with {opts.workers} workers")
    logger.debug("Options: %s", opts)

    start = time.time()
    with f:
        targets = dispatcher.run(iter_targets(f))
    elapsed = time.time() - start

    if not opts.silent:
        print(f"[+] {targets} targets processed, results appended to {opts.output_path}")
        print(f"[*] Done in {elapsed:.1f}s")
    return targets


def main(argv=None):
    opts = parse_args(argv)
    setup_logging(opts.verbose)
    try:
        scan(opts)
    except KeyboardInterrupt:
        print()
        print("[!] Interrupted by user.")
        sys.exit(130)


if __name__ == "__main__":
    main()
