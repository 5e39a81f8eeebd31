# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 09:31:26 2026
"""

from typing import Union
from .const import (
    BLOCK_SIZE,
    COUNTER_MASK,
    DIGEST_LENGTH,
    INITIAL_STATE
    )
from .compressor import State, compress
from .errors import (
    BufferBoundsError,
    InsufficientOutputSpaceError,
    PartialDigestUnsupportedError
    )
from .finalizer import finalize, serialize
from .utility import byte_view, get_logger


class DigestContext:
    """
    Incremental MD5 computation.

    Input of any length is absorbed through ``update``; complete blocks are
    compressed straight from the caller's buffer and only the trailing
    partial block is copied into ``buffer``. ``digest`` finalizes and
    resets the context, so it is immediately reusable.

    A context is meant to be driven by one caller at a time; use ``clone``
    to branch a computation.
    """

    digest_size = DIGEST_LENGTH
    block_size = BLOCK_SIZE

    def __init__(self):
        self.state: State = INITIAL_STATE
        self.buffer = bytearray(BLOCK_SIZE)
        self.buffer_length: int = 0
        self.total_bytes: int = 0
        self.logger = get_logger()

    def update(self, data, offset: int = 0, length: Union[int, None] = None):
        view = byte_view(data)
        extent = view.nbytes
        if length is None:
            length = extent - offset
        if offset < 0 or length < 0 or offset + length > extent:
            self.logger.debug("rejecting update: offset=%d length=%d extent=%d", offset, length, extent)
            raise BufferBoundsError(offset, length, extent)

        self.total_bytes = (self.total_bytes + length) & COUNTER_MASK
        state = self.state
        buffered = self.buffer_length
        if buffered:
            fill = BLOCK_SIZE - buffered
            if length < fill:
                self.buffer[buffered:buffered + length] = view[offset:offset + length]
                self.buffer_length = buffered + length
                return
            # terminate the pending block
            self.buffer[buffered:] = view[offset:offset + fill]
            state = compress(state, self.buffer)
            offset += fill
            length -= fill

        end = offset + length - length % BLOCK_SIZE
        for position in range(offset, end, BLOCK_SIZE):
            state = compress(state, view, position)
        self.state = state

        remaining = offset + length - end
        if remaining:
            self.buffer[:remaining] = view[end:end + remaining]
        self.buffer_length = remaining

    def update_byte(self, value: int):
        if not 0 <= value <= 0xff:
            raise ValueError("byte must be in range(0, 256), got %r" % (value,))
        self.total_bytes = (self.total_bytes + 1) & COUNTER_MASK
        self.buffer[self.buffer_length] = value
        self.buffer_length += 1
        if self.buffer_length == BLOCK_SIZE:
            self.state = compress(self.state, self.buffer)
            self.buffer_length = 0

    def digest(self) -> bytes:
        hash_value = bytearray(DIGEST_LENGTH)
        self.digest_into(hash_value, 0, DIGEST_LENGTH)
        return bytes(hash_value)

    def digest_into(self, out, offset: int = 0, length: int = DIGEST_LENGTH) -> int:
        if length < DIGEST_LENGTH:
            self.logger.debug("rejecting digest: requested %d bytes", length)
            raise PartialDigestUnsupportedError(length)
        target = byte_view(out)
        if target.readonly:
            raise TypeError("digest output buffer must be writable")
        if offset < 0:
            raise BufferBoundsError(offset, length, target.nbytes)
        if target.nbytes - offset < DIGEST_LENGTH:
            self.logger.debug("rejecting digest: %d bytes available at offset %d",
                              target.nbytes - offset, offset)
            raise InsufficientOutputSpaceError(max(target.nbytes - offset, 0))

        state = finalize(self.state, self.buffer, self.buffer_length, self.total_bytes)
        serialize(state, target, offset)
        self.reset()
        return DIGEST_LENGTH

    def reset(self):
        self.state = INITIAL_STATE
        self.buffer[:] = bytes(BLOCK_SIZE)
        self.buffer_length = 0
        self.total_bytes = 0

    def clone(self) -> 'DigestContext':
        instance = self.__class__.__new__(self.__class__)
        instance.state = self.state
        instance.buffer = bytearray(self.buffer)
        instance.buffer_length = self.buffer_length
        instance.total_bytes = self.total_bytes
        instance.logger = self.logger
        return instance

    __copy__ = clone

    def __deepcopy__(self, memo) -> 'DigestContext':
        return self.clone()
