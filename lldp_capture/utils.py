import os
import sys
from time import time, sleep
from lldp_capture.common import (
    logger, MIN_CAPTURE_DURATION, MAX_CAPTURE_DURATION)


def validate_capture_duration(duration: int) -> int:
    """Return the duration if it is within the allowed range, else the minimum."""
    if duration < MIN_CAPTURE_DURATION or duration > MAX_CAPTURE_DURATION:
        print(f"Invalid capture duration: {duration} seconds. "
              f"Duration must be between {MIN_CAPTURE_DURATION} and {MAX_CAPTURE_DURATION} seconds.")
        print(f"Setting capture duration to default value of {MIN_CAPTURE_DURATION} seconds.")
        return MIN_CAPTURE_DURATION
    return duration


def countdown(duration: int, message: str = "Capturing...") -> None:
    """Block for `duration` seconds, showing the time left on a single line."""
    end_time = time() + duration
    while time() < end_time:
        remaining_seconds = int(end_time - time())
        sys.stdout.write(f"\r{message} {remaining_seconds} seconds remaining ")
        sys.stdout.flush()
        sleep(1)
    # move to the next line after the countdown
    print()


def ensure_directory(path: str) -> None:
    if not os.path.exists(path):
        os.makedirs(path)
        logger.debug("Directory created: %s", path)


def remove_file(path: str) -> None:
    if os.path.exists(path):
        os.remove(path)
        logger.debug("Removed %s", path)
