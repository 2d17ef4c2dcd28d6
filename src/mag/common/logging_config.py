"""
Logging configuration for the MAG export tools.

Provides a centralized logging setup with human-readable output and structured context fields.
Log records go to stderr so that CSV written to stdout stays importable.
"""
import logging
import sys


class ContextFormatter(logging.Formatter):
    """Custom formatter that adds structured context fields to log messages.

    Supports extra fields passed via logger.info("msg", extra={...})
    Format: timestamp [LEVEL] logger_name: message | key1=value1 key2=value2
    """

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m',
        'GRAY': '\033[90m',
    }

    _STANDARD_ATTRS = frozenset([
        'name', 'msg', 'args', 'created', 'filename', 'funcName',
        'levelname', 'levelno', 'lineno', 'module', 'msecs',
        'message', 'pathname', 'process', 'processName', 'relativeCreated',
        'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
        'asctime', 'getMessage', 'taskName',
    ])

    def __init__(self, *args, use_color: bool = True, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.use_color = use_color

    def _paint(self, key: str, text: str) -> str:
        if not self.use_color:
            return text
        return f"{self.COLORS[key]}{text}{self.COLORS['RESET']}"

    def format(self, record: logging.LogRecord) -> str:
        base_msg = super().format(record)

        levelname = record.levelname
        if levelname in self.COLORS:
            base_msg = base_msg.replace(f"[{levelname}]", self._paint(levelname, f"[{levelname}]"), 1)

        extra_fields = [
            f"{key}={value}"
            for key, value in record.__dict__.items()
            if key not in self._STANDARD_ATTRS and value is not None
        ]
        if extra_fields:
            return f"{base_msg}{self._paint('GRAY', ' | ' + ' '.join(extra_fields))}"
        return base_msg


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for every tool in the ``mag`` namespace.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
               The tools pass DEBUG when run with --verbose.

    Example:
        >>> from mag.common.logging_config import setup_logging
        >>> setup_logging("DEBUG")
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    formatter = ContextFormatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        use_color=sys.stderr.isatty(),
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger('mag')
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates when main() runs twice
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.propagate = False

