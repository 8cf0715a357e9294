"""
Short, deterministic identifiers for breeds and images.

Ids are produced the same way the ``shorthash`` package's ``unique()`` does it:
a 32-bit string hash rendered in base 61. They are opaque handles, not
digests; collisions are possible and not handled.
"""

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_BASE = 61


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def bitwise_hash(text: str) -> int:
    """Signed 32-bit ``h * 31 + c`` hash over the UTF-16 code units of ``text``."""
    data = text.encode("utf-16-le", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = _to_int32((h << 5) - h + code_unit)
    return h


def to_base(value: int, base: int = _BASE) -> str:
    """Render ``value`` in ``base`` (max 62). Zero renders as an empty string."""
    if not 2 <= base <= len(_ALPHABET):
        raise ValueError(f"base must be between 2 and {len(_ALPHABET)}, got {base}")

    sign = "-" if value < 0 else ""
    value = abs(value)

    digits: list[str] = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(_ALPHABET[remainder])

    return sign + "".join(reversed(digits))


def unique(text: str) -> str:
    """Return the short hash id for ``text``."""
    return to_base(bitwise_hash(text)).replace("-", "Z", 1)
