import os
import logging
import sys
from datetime import datetime

LOGGER_NAME = 'lldp_capture'
LOG_FORMAT = '%(asctime)s:%(levelname)s:%(message)s'


def setup_logging(log_directory="logs", level=logging.INFO, console=True, force=False):
    os.makedirs(log_directory, exist_ok=True)

    log_file = os.path.join(
        log_directory, f'lldp_capture_{datetime.now().strftime("%Y-%m-%d_%H-%M-%S")}.txt')
    # the Windows ANSI code page cannot encode every adapter or switch name
    handlers = [logging.FileHandler(log_file, encoding='utf-8')]
    if console:
        # stderr keeps the printed LLDP summary on stdout clean
        handlers.append(logging.StreamHandler(sys.stderr))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=force)

    # Log uncaught exceptions to the log file as well
    def exception_handler(exc_type, exc_value, exc_traceback):
        logging.getLogger(LOGGER_NAME).error(
            "Uncaught exception", exc_info=(exc_type, exc_value, exc_traceback))
    sys.excepthook = exception_handler


def setup_logger(log_directory="logs", level=logging.INFO, force=False):
    """Configure logging once and return the package logger."""
    setup_logging(log_directory, level, force=force)
    return logging.getLogger(LOGGER_NAME)
