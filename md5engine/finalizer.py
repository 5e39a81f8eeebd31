# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 14:48:12 2026
"""

import struct
from .const import BLOCK_SIZE, COUNTER_MASK, LENGTH_OFFSET
from .compressor import State, compress

_BIT_LENGTH = struct.Struct('<Q')
_DIGEST_WORDS = struct.Struct('<4I')


def padding(total_bytes: int) -> bytes:
    zeros = (LENGTH_OFFSET - 1 - total_bytes) % BLOCK_SIZE
    return b'\x80' + bytes(zeros) + _BIT_LENGTH.pack((total_bytes << 3) & COUNTER_MASK)


def finalize(state: State,
             buffer: bytearray,
             buffer_length: int,
             total_bytes: int) -> State:
    """
    Pad the pending partial block held in ``buffer`` and run the last one
    or two compressions. ``buffer`` is overwritten in place.
    """
    buffer[buffer_length] = 0x80
    index = buffer_length + 1
    if index > LENGTH_OFFSET:
        # no room left for the bit length, flush a block of padding first
        buffer[index:] = bytes(BLOCK_SIZE - index)
        state = compress(state, buffer)
        index = 0
    buffer[index:LENGTH_OFFSET] = bytes(LENGTH_OFFSET - index)
    _BIT_LENGTH.pack_into(buffer, LENGTH_OFFSET, (total_bytes << 3) & COUNTER_MASK)
    return compress(state, buffer)


def serialize(state: State, out, offset: int = 0):
    _DIGEST_WORDS.pack_into(out, offset, *state)
