import getpass
import json
import logging
import threading
import traceback
import uuid
from datetime import datetime, timezone
from pathlib import Path

from flask import g, has_request_context


def _current_os_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


class SingletonLogger:
    """
    Singleton logger that ensures only one logger instance is created per process.

    The storage handle (database engine) can be bound once; later attempts to
    rebind it are ignored with a warning.
    """
    _instance = None
    _lock = threading.Lock()
    _logger = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(SingletonLogger, cls).__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    self._logger = None
                    self._storage_handler = None
                    self._file_handler = None
                    self._initialized = True

    def get_logger(self, name: str = "freshstock") -> logging.Logger:
        """
        Get the singleton logger, or a child of it.

        Args:
            name (str): Dotted logger name. Names under "freshstock." return a
                child logger that shares the singleton's handlers.

        Returns:
            logging.Logger: The singleton logger or one of its children
        """
        if self._logger is None:
            with self._lock:
                if self._logger is None:
                    self._logger = self._create_logger()
        if name.startswith("freshstock."):
            return logging.getLogger(name)
        return self._logger

    def _create_logger(self) -> logging.Logger:
        """
        Create the singleton logger with a JSON console handler.

        Returns:
            logging.Logger: Configured logger instance
        """
        logger = logging.getLogger("freshstock")
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(JsonFormatter(DEFAULT_FIELDS))
        console_handler.addFilter(ContextFilter())
        logger.addHandler(console_handler)

        return logger

    def configure(self, level: str = "INFO", log_file: str = None, engine=None, table=None) -> None:
        """
        Apply runtime configuration to the singleton logger.

        Args:
            level (str): Console log level name
            log_file (str): Optional path of a JSON log file
            engine: SQLAlchemy engine of the logs table, or None to log to console only
            table: SQLAlchemy Table the database handler appends to
        """
        logger = self.get_logger()
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(getattr(logging, level.upper(), logging.INFO))

        with self._lock:
            if log_file and self._file_handler is None:
                log_path = Path(log_file)
                log_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_handler = logging.FileHandler(log_path, encoding="utf-8")
                self._file_handler.setLevel(logging.DEBUG)
                self._file_handler.setFormatter(JsonFormatter(DEFAULT_FIELDS))
                self._file_handler.addFilter(ContextFilter())
                logger.addHandler(self._file_handler)

            if engine is None:
                return
            if self._storage_handler is not None:
                if self._storage_handler.engine is not engine:
                    logger.warning("Log storage is already bound; ignoring new storage handle")
                return
            self._storage_handler = DatabaseLogHandler(engine, table)
            self._storage_handler.addFilter(ContextFilter())
            logger.addHandler(self._storage_handler)


DEFAULT_FIELDS = {
    "timestamp": "asctime",
    "level": "levelname",
    "logger": "name",
    "module": "module",
    "function": "funcName",
    "line": "lineno",
    "user": "user",
    "request_id": "request_id",
    "message": "message"
}


def format_rfc3339(created: float) -> str:
    return datetime.fromtimestamp(created, tz=timezone.utc).isoformat(timespec="milliseconds")


class ContextFilter(logging.Filter):
    """Stamps every record with the OS user and the current request id."""

    _user = None

    def filter(self, record) -> bool:
        if ContextFilter._user is None:
            ContextFilter._user = _current_os_user()
        record.user = ContextFilter._user
        record.request_id = current_request_id()
        return True


def current_request_id() -> str:
    if has_request_context():
        return g.get("request_id", "-")
    return "-"


def new_request_id() -> str:
    return uuid.uuid4().hex


class JsonFormatter(logging.Formatter):
    """
    Formatter that outputs JSON strings after parsing the LogRecord.

    @param dict fmt_dict: Key: logging format attribute pairs. Defaults to {"message": "message"}.
    """
    def __init__(self, fmt_dict: dict = None):
        super().__init__()
        self.fmt_dict = fmt_dict if fmt_dict is not None else {"message": "message"}

    def usesTime(self) -> bool:
        """
        Overwritten to look for the attribute in the format dict values instead of the fmt string.
        """
        return "asctime" in self.fmt_dict.values()

    def formatTime(self, record, datefmt=None) -> str:
        return format_rfc3339(record.created)

    def formatMessage(self, record) -> dict:
        """
        Overwritten to return a dictionary of the relevant LogRecord attributes instead of a string.
        Attributes missing from the record render as None.
        """
        return {fmt_key: record.__dict__.get(fmt_val) for fmt_key, fmt_val in self.fmt_dict.items()}

    def format(self, record) -> str:
        """
        Mostly the same as the parent's class method, the difference being that a dict is manipulated and dumped as JSON
        instead of a string.
        """
        record.message = record.getMessage()

        if self.usesTime():
            record.asctime = self.formatTime(record)

        message_dict = self.formatMessage(record)

        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)

        if record.exc_text:
            message_dict["exc_info"] = record.exc_text

        if record.stack_info:
            message_dict["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(message_dict, default=str)


class DatabaseLogHandler(logging.Handler):
    """
    Appends WARNING-and-above records to the logs table.

    Each record is written in its own transaction on a fresh connection, so a
    failed request transaction never swallows its log line. A failed append is
    reported on stderr by Handler.handleError and the process keeps running.
    """

    def __init__(self, engine, table, level=logging.WARNING):
        super().__init__(level)
        self.engine = engine
        self.table = table

    def emit(self, record):
        try:
            row = {
                "time_stamp": format_rfc3339(record.created),
                "user": getattr(record, "user", None) or _current_os_user(),
                "file_path": record.pathname,
                "function_line": str(record.lineno),
                "caller_function": record.funcName,
                "msg": f"Error: {record.getMessage()}",
            }
            with self.engine.begin() as connection:
                connection.execute(self.table.insert().values(**row))
        except Exception:
            self.handleError(record)


def configure_logging(level: str = "INFO", log_file: str = None, engine=None, table=None) -> None:
    """
    Configure the singleton logger once the application knows its settings.

    Args:
        level (str): Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file (str): Optional JSON log file path
        engine: SQLAlchemy engine the logs table lives in; None keeps logging on the console only
        table: The logs Table
    """
    SingletonLogger().configure(level=level, log_file=log_file, engine=engine, table=table)


def log_event(message: str, origin: BaseException = None, level: int = logging.ERROR,
              include_traceback: bool = False) -> None:
    """
    Record a surfaced error with the source location it came from.

    When origin is an exception carrying a traceback, the record points at the
    frame that raised it; otherwise at the caller of log_event.

    Args:
        message (str): Full, unredacted message
        origin (BaseException): Exception being reported, if any
        level (int): Logging level. Defaults to ERROR.
        include_traceback (bool): Attach the origin's traceback to the record
    """
    logger = get_logger("freshstock.events")
    exc_info = (type(origin), origin, origin.__traceback__) if include_traceback and origin is not None else None
    if origin is not None and origin.__traceback__ is not None:
        frame = traceback.extract_tb(origin.__traceback__)[-1]
        record = logger.makeRecord(
            logger.name, level, frame.filename, frame.lineno, message, (), exc_info,
            func=frame.name
        )
        logger.handle(record)
        return
    logger.log(level, message, stacklevel=2)


def get_logger(name: str = "freshstock") -> logging.Logger:
    """
    Get the singleton logger instance.

    Args:
        name (str): Logger name; "freshstock.<part>" yields a child logger

    Returns:
        logging.Logger: The logger
    """
    return SingletonLogger().get_logger(name)
