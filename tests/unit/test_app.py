"""Unit tests for the create_service() composition root."""

import logging
from unittest.mock import MagicMock

import pytest

from kvshortener import app
from kvshortener.dao.memory import ShortURLMemoryDAO
from kvshortener.exceptions import ShortKeyNotFoundError


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    """Keep pytest's log capture handlers in place."""
    monkeypatch.setattr(app, 'initialize_logging', MagicMock())


@pytest.fixture
def _local_memory_env(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'local')
    monkeypatch.setenv('APP_NAME', 'kvshortener')
    monkeypatch.setenv('KVSHORTENER_BACKEND', 'memory')
    monkeypatch.setenv('BASE_URL', 'https://sho.rt')


@pytest.mark.usefixtures('_local_memory_env')
def test_create_service_from_local_environment(caplog):
    with caplog.at_level(logging.INFO, logger='kvshortener.app'):
        service = app.create_service()

    app.initialize_logging.assert_called_once_with()
    assert isinstance(service.dao, ShortURLMemoryDAO)
    assert service.base_url == 'https://sho.rt'
    assert 'Shortener service ready.' in caplog.text


@pytest.mark.usefixtures('_local_memory_env')
def test_created_service_round_trip():
    service = app.create_service()

    shortcode = service.shorten('https://example.com')

    assert service.short_url(shortcode) == 'https://sho.rt/kPpCoVygmnp'
    assert service.resolve(shortcode) == 'https://example.com'
    with pytest.raises(ShortKeyNotFoundError):
        service.resolve('neverSeen')
