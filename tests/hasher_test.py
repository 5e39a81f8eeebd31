# -*- coding: utf-8 -*-
"""
Created on Wed Oct 14 18:33:02 2026
"""

import hashlib
import io
import os
import sys

import pytest
from cryptography.hazmat.primitives import hashes

local_path = os.path.split(os.path.abspath(__file__))[0]
sys.path.append(os.path.join(local_path, ".."))

from md5engine import MD5Hash, StreamHasher, file_digest, md5, new


def cryptography_md5(data: bytes) -> bytes:
    hasher = hashes.Hash(hashes.MD5())
    hasher.update(data)
    return hasher.finalize()


def test_hashlib_attributes():
    hasher = md5()
    assert isinstance(hasher, MD5Hash)
    assert hasher.name == hashlib.md5().name == 'md5'
    assert hasher.digest_size == hashlib.md5().digest_size
    assert hasher.block_size == hashlib.md5().block_size
    assert new is md5


@pytest.mark.parametrize("data", [b"", b"foo", b"\x00" * 56, bytes(range(256)) * 9])
def test_matches_independent_implementations(data):
    assert md5(data).digest() == hashlib.md5(data).digest()
    assert md5(data).digest() == cryptography_md5(data)
    assert md5(data).hexdigest() == hashlib.md5(data).hexdigest()


def test_foo_vector():
    assert md5(b"foo").hexdigest() == "acbd18db4cc2f85cedef654fccc4a4d8"


def test_digest_is_not_destructive():
    hasher = md5(b"message ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"digest")
    assert hasher.hexdigest() == "f96b697d7cb7938d525a2f31aaf161d0"
    assert hasher.hexdigest() == "f96b697d7cb7938d525a2f31aaf161d0"


def test_copy_is_independent():
    hasher = md5(b"abc")
    other = hasher.copy()
    hasher.update(b"def")
    assert other.hexdigest() == "900150983cd24fb0d6963f7d28e17f72"
    assert hasher.digest() == hashlib.md5(b"abcdef").digest()


def test_stream_hasher():
    hasher = StreamHasher()
    assert hasher.write(b"message") == 7
    assert hasher.write(b" ") == 8
    assert hasher.sum(b"digest").hex() == "f96b697d7cb7938d525a2f31aaf161d0"
    # sum does not end the transcript
    assert hasher.sum().hex() == "f96b697d7cb7938d525a2f31aaf161d0"
    assert hasher.write(b"!") == 15
    assert hasher.sum() == hashlib.md5(b"message digest!").digest()
    hasher.reset()
    assert hasher.sum().hex() == "d41d8cd98f00b204e9800998ecf8427e"


def test_stream_hasher_with_other_hash():
    hasher = StreamHasher(hashlib.sha256)
    hasher.write(b"abc")
    assert hasher.sum() == hashlib.sha256(b"abc").digest()


@pytest.mark.parametrize("chunk_size", [1, 7, 64, 1000])
def test_file_digest(chunk_size):
    data = b"0123456789abcdef" * 100 + b"tail"
    hasher = file_digest(io.BytesIO(data), chunk_size)
    assert hasher.digest() == hashlib.md5(data).digest()


def test_file_digest_empty():
    assert file_digest(io.BytesIO(b"")).hexdigest() == "d41d8cd98f00b204e9800998ecf8427e"


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))
