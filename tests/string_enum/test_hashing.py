"""Test hashing module."""

import hashlib

from string_enum.hashing import gen_int_hash


def test_gen_int_hash():
    """Test gen_int_hash."""
    assert gen_int_hash("created") == gen_int_hash("created")
    assert gen_int_hash("created") != gen_int_hash("Created")
    assert gen_int_hash("") != gen_int_hash(" ")

    # Same digest in every interpreter run.
    digest = hashlib.md5(b"<class 'str'>:created").digest()
    assert gen_int_hash("created") == int.from_bytes(digest)


def test_gen_int_hash_surrogates():
    """Test gen_int_hash on strings that are not valid UTF-8."""
    assert isinstance(gen_int_hash("\ud800"), int)
    assert gen_int_hash("\ud800") != gen_int_hash("\ud801")
