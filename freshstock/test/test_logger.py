"""
Tests for the JSON formatter, the database log handler and log_event
"""
import json
import logging

from sqlalchemy import create_engine, select

from freshstock.data.log_entry import LogEntry
from freshstock.utils.logger import DEFAULT_FIELDS, DatabaseLogHandler, JsonFormatter, get_logger, log_event


def make_record(message='boom', level=logging.ERROR):
    return logging.LogRecord('freshstock.test', level, '/srv/app/module.py', 42, message, (), None, func='handler')


def test_json_formatter_renders_configured_fields():
    formatter = JsonFormatter({'level': 'levelname', 'message': 'message', 'line': 'lineno'})

    payload = json.loads(formatter.format(make_record('hello there')))

    assert payload == {'level': 'ERROR', 'message': 'hello there', 'line': 42}


def test_json_formatter_missing_attributes_render_as_null():
    payload = json.loads(JsonFormatter(DEFAULT_FIELDS).format(make_record()))

    assert payload['user'] is None
    assert payload['request_id'] is None
    assert payload['timestamp'].endswith('+00:00')


def test_json_formatter_includes_exception_text():
    try:
        raise ValueError('bad value')
    except ValueError as error:
        record = logging.LogRecord('x', logging.ERROR, __file__, 1, 'failed', (), (ValueError, error, error.__traceback__))

    payload = json.loads(JsonFormatter().format(record))

    assert 'ValueError: bad value' in payload['exc_info']


def test_database_handler_appends_row():
    engine = create_engine('sqlite://')
    LogEntry.__table__.create(engine)
    handler = DatabaseLogHandler(engine, LogEntry.__table__)

    handler.handle(make_record('storage exploded'))

    with engine.connect() as connection:
        rows = connection.execute(select(LogEntry.__table__)).mappings().all()
    assert len(rows) == 1
    assert rows[0]['msg'] == 'Error: storage exploded'
    assert rows[0]['file_path'] == '/srv/app/module.py'
    assert rows[0]['function_line'] == '42'
    assert rows[0]['caller_function'] == 'handler'


def test_database_handler_skips_records_below_warning():
    engine = create_engine('sqlite://')
    LogEntry.__table__.create(engine)
    logger = logging.getLogger('database-sink-test')
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    handler = DatabaseLogHandler(engine, LogEntry.__table__)
    logger.addHandler(handler)
    try:
        logger.info('just info')
        logger.warning('worth keeping')
    finally:
        logger.removeHandler(handler)

    with engine.connect() as connection:
        messages = connection.execute(select(LogEntry.__table__.c.msg)).scalars().all()
    assert messages == ['Error: worth keeping']


def test_database_handler_failure_does_not_raise(monkeypatch):
    """A missing logs table is reported on stderr, never to the caller"""
    engine = create_engine('sqlite://')
    handler = DatabaseLogHandler(engine, LogEntry.__table__)
    reported = []
    monkeypatch.setattr(handler, 'handleError', reported.append)

    record = make_record()
    handler.handle(record)

    assert reported == [record]


def test_log_event_points_at_raising_frame():
    captured = []

    class Capture(logging.Handler):
        def emit(self, record):
            captured.append(record)

    handler = Capture()
    logger = get_logger('freshstock.events')
    logger.addHandler(handler)
    try:
        try:
            raise RuntimeError('kaboom')
        except RuntimeError as error:
            log_event('surfaced', origin=error, level=logging.WARNING)
        log_event('plain', level=logging.ERROR)
    finally:
        logger.removeHandler(handler)

    assert [record.getMessage() for record in captured] == ['surfaced', 'plain']
    assert captured[0].funcName == 'test_log_event_points_at_raising_frame'
    assert captured[0].levelno == logging.WARNING
    assert captured[1].funcName == 'test_log_event_points_at_raising_frame'
