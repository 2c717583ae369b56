from ctrt4py.config import InvalidFormat
import base58


def b58encode(b):
    assert isinstance(b, bytes), 'base58 input is bytes'
    return base58.b58encode(b).decode('ascii')


def b58decode(s):
    """decode base58 string, raise InvalidFormat if not base58"""
    if not isinstance(s, str):
        raise InvalidFormat('base58 text is str but {}'.format(type(s)))
    # base58 lib strips whitespace before decoding
    if s != s.strip():
        raise InvalidFormat('Not base58 string {!r}: surrounding whitespace'.format(s))
    try:
        return base58.b58decode(s)
    except ValueError as e:
        raise InvalidFormat('Not base58 string {!r}: {}'.format(s, e))


__all__ = [
    "b58encode",
    "b58decode",
]
