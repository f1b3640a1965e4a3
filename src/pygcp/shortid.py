import os

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_SIZE = 6


def shortid() -> str:
    """Returns a short random token written in base 62.

    Tokens are not counted: they can be generated independently anywhere and
    collisions are only astronomically unlikely.
    """
    value = int.from_bytes(os.urandom(_SIZE), byteorder="big")
    digits = []
    while True:
        value, digit = divmod(value, len(_ALPHABET))
        digits.append(_ALPHABET[digit])
        if value == 0:
            break
    return "".join(reversed(digits))
