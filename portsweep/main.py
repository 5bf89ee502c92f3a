import argparse
import asyncio
import logging
import sys

from .config import ScanConfig
from .errors import ConfigurationError, ScanAborted
from .log import setup_logging
from .scanner import PortScanner
from .ui import ScannerUI
from .utils import parse_address

logger = logging.getLogger(__name__)


class OptionParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing to stderr and exiting."""

    def error(self, message):
        raise ConfigurationError(message)


def build_parser() -> OptionParser:
    parser = OptionParser(
        prog="portsweep",
        usage="%(prog)s -j THREADS IPADDR",
        description="Concurrent TCP connect scan of every port (1-65535) on one address.",
        add_help=False,
    )
    parser.add_argument("address", nargs="?", metavar="IPADDR", help="IPv4 or IPv6 address to scan")
    parser.add_argument("-h", "--help", action="store_true", help="print this help menu")
    parser.add_argument("-j", dest="threads", type=int, default=4, metavar="THREADS",
                        help="number of threads to use for concurrent scanning (Default: 4)")
    parser.add_argument("-t", "--timeout", type=float, default=1.5,
                        help="seconds to wait for each connection (Default: 1.5)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def main(argv=None, ui: ScannerUI = None) -> int:
    ui = ui or ScannerUI()
    parser = build_parser()

    # 1. CLI Argument Parsing
    try:
        args = parser.parse_args(argv)
    except ConfigurationError as e:
        ui.show_message(f"error parsing options: {e.message}")
        return 0

    # Usage on '-h' or when no address was given
    if args.help or not args.address:
        ui.display_usage(parser.format_help())
        return 0

    setup_logging(args.verbose)

    # 2. Validate everything before a single connection is attempted
    try:
        config = ScanConfig.build(
            target=parse_address(args.address),
            workers=args.threads,
            timeout=args.timeout,
        )
    except ConfigurationError as e:
        ui.show_message(str(e))
        return 0

    # 3. Run
    try:
        asyncio.run(PortScanner(config, ui=ui).scan())
    except KeyboardInterrupt:
        ui.show_message("\nScan interrupted by user.")
        return 130
    except ScanAborted as e:
        logger.debug("scan aborted", exc_info=e)
        ui.show_message(f"\nFatal Error: {e}")
        return 1
    except Exception as e:
        logger.debug("unexpected failure", exc_info=e)
        ui.show_message(f"\nFatal Error: {e}")
        return 1
    return 0


def run():
    sys.exit(main())
