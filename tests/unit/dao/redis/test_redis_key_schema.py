"""Unit tests for RedisKeySchema."""

import pytest

from kvshortener.dao.redis import RedisKeySchema


def test_url_key_with_prefix():
    assert RedisKeySchema(prefix='kvshortener:prod').url_key('kPpCoVygmnp') == 'kvshortener:prod:urls:kPpCoVygmnp'


def test_url_key_without_prefix():
    assert RedisKeySchema().url_key('kPpCoVygmnp') == 'urls:kPpCoVygmnp'


@pytest.mark.parametrize('prefix', [1, ['app'], b'app'])
def test_invalid_prefix_type_raises_error(prefix):
    with pytest.raises(TypeError):
        RedisKeySchema(prefix=prefix)
