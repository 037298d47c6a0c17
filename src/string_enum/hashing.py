"""Utilities for producing stable hashes of closed-set values."""

import hashlib


def gen_int_hash(data: str) -> int:
    """Generate a hash of ``data`` which stays the same across interpreter runs.

    Unlike the builtin :py:func:`hash` for strings, the result does not depend
    on ``PYTHONHASHSEED``.
    """
    data = f"{type(data)}:{data}"
    m = hashlib.md5(usedforsecurity=False)
    # Lone surrogates are legal in str and must not make hashing fail.
    m.update(bytes(data, "utf-8", "surrogatepass"))
    return int.from_bytes(m.digest())
