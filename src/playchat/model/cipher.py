"""
Rotation Cipher
===============
Keyless obfuscation of the message files kept on disk.

This is NOT encryption. Printable ASCII characters (code points 32..126) are
rotated by 13 positions inside that 95 symbol ring, every other character is
copied verbatim. Both functions are total and preserve the string length.
"""
FIRST_PRINTABLE: int = 32
LAST_PRINTABLE: int = 126
RING_SIZE: int = LAST_PRINTABLE - FIRST_PRINTABLE + 1  # 95
SHIFT: int = 13


def _rotate(text: str, shift: int) -> str:
    chars = []
    for ch in text:
        code = ord(ch)
        if FIRST_PRINTABLE <= code <= LAST_PRINTABLE:
            position = (code - FIRST_PRINTABLE + shift) % RING_SIZE
            chars.append(chr(position + FIRST_PRINTABLE))
        else:
            chars.append(ch)
    return "".join(chars)


def encode(text: str) -> str:
    """Rotate printable ASCII forward by 13 positions."""
    return _rotate(text, SHIFT)


def decode(text: str) -> str:
    """Inverse of :func:`encode`."""
    return _rotate(text, -SHIFT)
