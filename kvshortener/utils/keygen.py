"""Short key derivation utility

This module derives short, deterministic keys from URLs: the UTF-8 bytes of
the URL are hashed with 64-bit xxHash (XXH64, seed 0) and the hash is
encoded in base62.

Functions:
    derive_shortkey(url):
        Derive the short key for a URL.
    encode_base62(number):
        Encode a 64-bit unsigned integer in base62, least significant digit first.

Example:
    >>> from kvshortener.utils import derive_shortkey
    >>> derive_shortkey('https://example.com')
    'kPpCoVygmnp'
"""

import string

import xxhash
from beartype import beartype


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits

# Largest value produced by a 64-bit hash
MAX_HASH = 2**64 - 1

# base62 digits needed for MAX_HASH
MAX_SHORTKEY_LENGTH = 11


@beartype
def encode_base62(number: int) -> str:
    """Encode a 64-bit unsigned integer in base62.

    Digits are emitted by repeated division, starting from the least
    significant residue. Digit 0 maps to 'a', so encode_base62(0) == 'a'.

    Args:
        number (int):
            Integer in the range [0, 2**64 - 1].

    Returns:
        str: 1 to 11 characters from [a-zA-Z0-9].

    Raises:
        ValueError:
            If number is negative or wider than 64 bits.

    Example:
        >>> encode_base62(10)
        'k'
        >>> encode_base62(123456789)
        'HUawi'
    """
    if not 0 <= number <= MAX_HASH:
        raise ValueError(f'Number must be a 64-bit unsigned integer (given value: {number}).')
    if number == 0:
        return ALPHABET[0]

    digits = []
    while number > 0:
        number, remainder = divmod(number, BASE)
        digits.append(ALPHABET[remainder])
    return ''.join(digits)


def derive_shortkey(url: str) -> str:
    """Derive the short key of a URL.

    Pure function of its input: no seed, no clock, no random state. The same
    URL maps to the same key across calls and process restarts. No URL
    validation happens here, any string (including '') is accepted.

    NOTE: Distinct URLs can collide on the same key. Collisions are not
          detected; the store keeps whichever URL was saved last.

    Args:
        url (str):
            URL to shorten.

    Returns:
        str: non-empty base62 short key, at most 11 characters.

    Example:
        >>> derive_shortkey('https://example.com')
        'kPpCoVygmnp'
        >>> derive_shortkey('https://example.com') == derive_shortkey('https://example.com')
        True
    """
    # surrogatepass keeps lone surrogates (e.g. from json.loads) hashable
    return encode_base62(xxhash.xxh64_intdigest(url.encode('utf-8', 'surrogatepass')))
