# -*- coding: utf-8 -*-
"""
Created on Wed Oct 14 16:12:08 2026
"""

from typing import Callable
from .const import BLOCK_SIZE, DIGEST_LENGTH, READ_CHUNK_SIZE
from .context import DigestContext


class MD5Hash:
    """
    ``hashlib``-style view of a :class:`DigestContext`.

    Unlike the context, ``digest`` and ``hexdigest`` leave the running
    computation untouched, so the object can be handed to ``hmac``,
    ``hkdf`` or ``ecdsa`` wherever a hash constructor is expected.
    """

    name = 'md5'
    digest_size = DIGEST_LENGTH
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b''):
        self._context = DigestContext()
        if data:
            self._context.update(data)

    def update(self, data: bytes):
        self._context.update(data)

    def digest(self) -> bytes:
        return self._context.clone().digest()

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> 'MD5Hash':
        instance = self.__class__.__new__(self.__class__)
        instance._context = self._context.clone()
        return instance


def new(data: bytes = b'') -> 'MD5Hash':
    return MD5Hash(data)


md5 = new


class StreamHasher:
    def __init__(self, _hash: Callable[..., 'MD5Hash'] = md5):
        self._hash = _hash
        self._hasher = self._hash()
        self._clen = 0

    def write(self, content: bytes) -> int:
        self._hasher.update(content)
        self._clen += len(content)
        return self._clen

    def reset(self):
        self._hasher = self._hash()
        self._clen = 0

    def sum(self, extra_content: bytes = b'') -> bytes:
        self.write(extra_content)
        return self._hasher.digest()


def file_digest(fileobj, chunk_size: int = READ_CHUNK_SIZE) -> 'MD5Hash':
    hasher = md5()
    while True:
        chunk = fileobj.read(chunk_size)
        if not chunk:
            break
        hasher.update(chunk)
    return hasher
