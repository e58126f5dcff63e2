"""Unit tests for the short key derivation in keygen.py.

Test coverage includes:

1. Base62 encoding
   - Golden values for 0, 10, 123456789 and the largest 64-bit integer.
   - Out-of-range and non-integer inputs are rejected.

2. Determinism
   - Same URL always produces the same key.

3. Output format
   - Keys are non-empty, at most 11 characters, Base62 only.

4. Edge cases
   - Empty string, non-ASCII URLs, lone surrogates, a hash of exactly 0.

5. Regression testing
   - Known URLs produce stable, expected keys.

6. Distinctness
   - A corpus of distinct URLs produces distinct keys.
"""

import json
import string

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from kvshortener.utils import keygen
from kvshortener.utils.keygen import derive_shortkey, encode_base62, MAX_SHORTKEY_LENGTH


BASE62 = set(string.ascii_letters + string.digits)


# -------------------------------
# 1. Base62 encoding
# -------------------------------


@pytest.mark.parametrize(
    'number, expected',
    [
        (0, 'a'),
        (1, 'b'),
        (10, 'k'),
        (61, '9'),
        (62, 'ab'),
        (123456789, 'HUawi'),
        (2**64 - 1, 'pIrkgbKrQ8v'),
    ],
)
def test_encode_base62_golden_values(number, expected):
    """Ensure base62 encoding emits the least significant digit first."""
    assert encode_base62(number) == expected


@pytest.mark.parametrize('number', [-1, 2**64])
def test_encode_base62_rejects_out_of_range_numbers(number):
    """Only 64-bit unsigned integers can be encoded."""
    with pytest.raises(ValueError):
        encode_base62(number)


@pytest.mark.parametrize('number', [None, '10', 1.5])
def test_encode_base62_rejects_non_integers(number):
    with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
        encode_base62(number)


# -------------------------------
# 2. Determinism
# -------------------------------


def test_derive_shortkey_is_deterministic():
    """Same URL should always produce the same key."""
    url = 'https://example.com/very/long/path/with/many/segments?param1=value1&param2=value2'
    assert derive_shortkey(url) == derive_shortkey(url)
    assert derive_shortkey(url) == 'XsYPymtTlPg'


# -------------------------------
# 3. Output format
# -------------------------------


@pytest.mark.parametrize(
    'url',
    [
        'https://example.com',
        'https://github.com/user/repo',
        'http://localhost:8080/?q=a+b',
        'not a url at all',
        'x' * 10_000,
    ],
)
def test_derive_shortkey_is_base62_safe(url):
    """Ensure keys are non-empty and only contain Base62 characters."""
    shortcode = derive_shortkey(url)
    assert 0 < len(shortcode) <= MAX_SHORTKEY_LENGTH
    assert set(shortcode) <= BASE62


# -------------------------------
# 4. Edge cases
# -------------------------------


def test_derive_shortkey_accepts_empty_string():
    assert derive_shortkey('') == 'TSxL3pgnPHu'


def test_derive_shortkey_hashes_utf8_bytes():
    assert derive_shortkey('https://例え.jp/パス') == 'tNrG6IM2Hou'


def test_derive_shortkey_accepts_lone_surrogates():
    """Strings decoded from JSON may hold lone surrogates; hashing must not fail on them."""
    assert derive_shortkey('\ud800') == 'QdOMXiicK7l'
    assert derive_shortkey(json.loads('{"url": "https://x.test/\\ud800"}')['url']) == 'IcuWjjdQok'


def test_derive_shortkey_zero_hash_encodes_to_first_letter(monkeypatch):
    """An input hashing to exactly 0 encodes to 'a', never to an empty string."""
    monkeypatch.setattr(keygen.xxhash, 'xxh64_intdigest', lambda data: 0)
    assert derive_shortkey('https://example.com') == 'a'


# -------------------------------
# 5. Regression test
# -------------------------------


@pytest.mark.parametrize(
    'url, expected',
    [
        ('https://example.com', 'kPpCoVygmnp'),
        ('https://example.org', '3O83Ew0ysJt'),
        ('https://github.com/user/repo', '1vB40mDFEBc'),
        ('https://pypi.org/project/xxhash/', '8Zj3CMbPo8o'),
    ],
)
def test_known_output_regression(url, expected):
    """Ensure stable output for known inputs (detect hash or encoding drift)."""
    assert derive_shortkey(url) == expected


# -------------------------------
# 6. Distinctness
# -------------------------------


def test_distinct_urls_produce_distinct_keys():
    urls = [f'https://example.com/articles/{i}?ref=newsletter' for i in range(5000)]
    assert len({derive_shortkey(url) for url in urls}) == len(urls)
