# logger_utils.py -  for logging messages and performance metrics, timestamps etc

import os
import time
from datetime import datetime

# Directory where log files are stored (created on first write)
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "autocomplete_chatbot.log")

LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "METRIC": "\033[92m",  # green
        "RESET": "\033[0m",
    }

    def __init__(self, path: str = None, use_color: bool = True, echo: bool = False, level: str = "DEBUG"):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        # off by default: the chat transcript owns the console
        self.echo = echo
        level = level.upper()
        if level not in LEVELS:
            raise ValueError(f"unknown log level: {level}")
        self.level = level

    def write(self, level: str, msg: str):
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if LEVELS.get(level, 100) < LEVELS[self.level]:
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        self._emit(level, f"[{ts}] {level:<7} | {msg}")

    def _emit(self, level: str, line: str):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if not self.echo:
            return
        if self.use_color and level in self.COLORS:
            print(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}")
        else:
            print(line)

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (like timing, counts, or performance stats).
        Example: [12:45:02] query latency: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        self._emit("METRIC", f"[{ts}] {tag}: {value}{unit}")

    def time_block(self, label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("bootstrap"):
                do_some_work()
        It automatically logs how long the block took.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log, label):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric. """
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
