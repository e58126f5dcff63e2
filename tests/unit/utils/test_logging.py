"""Unit tests for logging.py

Test coverage includes:
    1. JsonFormatter renders standard fields, `extra` fields and exceptions.
    2. initialize_logging() installs the JSON handler with the requested level.
"""

import sys
import json
import logging

import pytest

from kvshortener.utils.logging import JsonFormatter, initialize_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def _record(msg='Short key not found.', exc_info=None, **extra):
    record = logging.LogRecord('kvshortener.test', logging.INFO, __file__, 1, msg, (), exc_info)
    record.created = 0.0
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_standard_fields():
    log = json.loads(JsonFormatter().format(_record()))

    assert log == {
        'timestamp': '1970-01-01T00:00:00.000Z',
        'level': 'INFO',
        'logger': 'kvshortener.test',
        'message': 'Short key not found.',
    }


def test_json_formatter_includes_extra_fields():
    log = json.loads(JsonFormatter().format(_record(shortcode='kPpCoVygmnp', ttl=60)))

    assert log['shortcode'] == 'kPpCoVygmnp'
    assert log['ttl'] == 60


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = _record(exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert 'RuntimeError: boom' in log['exception']
    assert 'exc_info' not in log


def test_initialize_logging_uses_log_level(monkeypatch, restore_root_logger, capsys):
    monkeypatch.setenv('LOG_LEVEL', 'warning')

    initialize_logging()
    logging.getLogger('kvshortener.test').info('hidden')
    logging.getLogger('kvshortener.test').warning('shown', extra={'shortcode': 'kPpCoVygmnp'})

    lines = capsys.readouterr().out.strip().splitlines()
    assert restore_root_logger.level == logging.WARNING
    assert len(lines) == 1
    assert json.loads(lines[0])['shortcode'] == 'kPpCoVygmnp'


def test_initialize_logging_explicit_level(restore_root_logger):
    initialize_logging('debug')
    assert restore_root_logger.level == logging.DEBUG
