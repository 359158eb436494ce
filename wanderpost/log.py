# ╔════════════════════════════════════════════════════════════════════════════╗
# ║                          WANDERPOST LOGGING SETUP                          ║
# ║ Configures asynchronous, rotating file logging and colored console output. ║
# ║ Includes fallback mechanisms for log directory permissions.                ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# Standard library imports
import atexit
import logging
import os
import platform
import sys
import tempfile
from logging.handlers import QueueHandler, QueueListener, MemoryHandler, TimedRotatingFileHandler
from queue import Queue
from typing import Optional

# Third-party imports
from colorlog import ColoredFormatter

# Local application imports
from wanderpost.environ import DEBUG, LOG_DIR

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ LOGGING CONFIGURATION AND CONSTANTS                                        ║
# ╚════════════════════════════════════════════════════════════════════════════╝

LOGGER_NAME = "wanderpost"
LOG_FILE_NAME = "wanderpost.log"

# Fallback directories if LOG_DIR is unset or not writable
FALLBACK_DIRS = [
    os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "logs"),
    tempfile.gettempdir(),
]

logger = logging.getLogger(LOGGER_NAME)

# Path of the file currently receiving logs (None when console only)
active_log_file: Optional[str] = None

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ LOG DIRECTORY SETUP                                                        ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- find_log_directory ---
# Tries the preferred directory first, then each fallback in order.
# Args:
#     preferred: Optional directory to try before the fallbacks.
# Returns: The first writable directory, or None if none could be used.
def find_log_directory(preferred: Optional[str] = None) -> Optional[str]:
    candidates = ([preferred] if preferred else []) + FALLBACK_DIRS
    for directory in candidates:
        try:
            os.makedirs(directory, exist_ok=True)
            if os.access(directory, os.W_OK):
                return directory
        except OSError as e:
            print(f"Notice: Could not use log directory {directory}: {e}", file=sys.stderr)
    print("WARNING: Could not find a writable log directory. File logging disabled.", file=sys.stderr)
    return None

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ LOGGER INITIALIZATION                                                      ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- setup_logging ---
# Attaches a queue-backed colored console handler and, when possible, a daily
# rotating file handler to the `wanderpost` logger. Safe to call repeatedly;
# only the first call configures handlers.
# Args:
#     debug: Enables DEBUG level output (defaults to the DEBUG env flag).
#     log_dir: Preferred log directory (defaults to the LOG_DIR env value).
#     file_logging: Set False to log to the console only.
# Returns: The configured logger.
def setup_logging(debug: Optional[bool] = None, log_dir: Optional[str] = None,
                  file_logging: bool = True) -> logging.Logger:
    global active_log_file

    if getattr(logger, "_initialized", False):
        return logger

    debug = DEBUG if debug is None else debug
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    # --- Define Formatters ---
    file_formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s in %(name)s [%(filename)s:%(lineno)d]: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_formatter = ColoredFormatter(
        "%(log_color)s[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors={
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        }
    )

    handlers = []

    # --- Setup File Handler ---
    directory = find_log_directory(log_dir or LOG_DIR) if file_logging else None
    if directory:
        log_path = os.path.join(directory, LOG_FILE_NAME)
        try:
            file_handler = TimedRotatingFileHandler(
                log_path,
                when="midnight",
                interval=1,
                backupCount=7,
                encoding="utf-8",
            )
            file_handler.setFormatter(file_formatter)
            file_handler.setLevel(level)

            # Buffer records and flush on ERROR or when full
            memory_handler = MemoryHandler(
                capacity=1000,
                flushLevel=logging.ERROR,
                target=file_handler
            )
            memory_handler.setLevel(logging.DEBUG)
            handlers.append(memory_handler)
            active_log_file = log_path
        except OSError as e:
            print(f"ERROR: Failed to set up file logging handler: {e}", file=sys.stderr)
            active_log_file = None

    # --- Setup Console Handler ---
    # stderr keeps stdout free for the CLI output (e.g. --json)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)
    handlers.append(console_handler)

    # --- Start Queue Listener ---
    log_queue = Queue(-1)
    logger.addHandler(QueueHandler(log_queue))
    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()
    logger._listener = listener
    logger._initialized = True

    # --- Register Cleanup ---
    def cleanup():
        listener.stop()
        for handler in handlers:
            handler.flush()
            if isinstance(handler, MemoryHandler) and handler.target:
                handler.target.close()
            handler.close()

    atexit.register(cleanup)

    logger.info(f"--- Logging Initialized ({platform.system()} {platform.release()}) ---")
    logger.info(f"Log Level: {'DEBUG' if debug else 'INFO'}")
    if active_log_file:
        logger.info(f"Log File: {active_log_file}")
    else:
        logger.warning("File logging is disabled.")
    return logger

# ╔════════════════════════════════════════════════════════════════════════════╗
# ║ UTILITY FUNCTIONS                                                          ║
# ╚════════════════════════════════════════════════════════════════════════════╝

# --- get_log_file_location ---
# Returns: The active log file path, or a message indicating console-only logging.
def get_log_file_location() -> str:
    if active_log_file:
        return active_log_file
    return "Console only (File logging disabled)"
