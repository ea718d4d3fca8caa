"""Command line entry point: capture LLDP frames with pktmon and print them."""
import argparse
import sys
from typing import List, Optional

from lldp_capture.common import logger, DEFAULT_CAPTURE_DURATION
from lldp_capture.capture import LLDPCapture
from lldp_capture.exceptions import PktmonNotFoundError
from lldp_capture.parser import format_lldp_data
from lldp_capture.pktmon import PktmonController
from lldp_capture.utils import validate_capture_duration


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lldp-capture",
        description="Capture LLDP frames with pktmon and show the neighbor's discovery data.")
    parser.add_argument(
        "-t", "--time", dest="duration", type=int, default=DEFAULT_CAPTURE_DURATION,
        help="capture duration in seconds (30-60, default: %(default)s)")
    return parser.parse_args(argv)


def print_lldp_data(lldp_data) -> None:
    if not lldp_data:
        print("No LLDP data was captured.")
        return
    for line in format_lldp_data(lldp_data):
        print(line)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    duration = validate_capture_duration(args.duration)

    pktmon = PktmonController()
    try:
        pktmon.check_installed()
        lldp_data = LLDPCapture(pktmon=pktmon).run(duration)
    except PktmonNotFoundError as e:
        logger.error("%s", e)
        return 1
    except Exception as e:
        logger.error("An error occurred: %s", e)
        return 1

    if lldp_data is not None:
        print_lldp_data(lldp_data)
    return 0


if __name__ == "__main__":
    sys.exit(main())
