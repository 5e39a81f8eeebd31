# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 11:24:50 2026

MD5 compression function (RFC 1321, section 3.4).
"""

import struct
from typing import Tuple
from .const import ROUND_SHIFTS, SINE_TABLE, WORD_MASK

State = Tuple[int, int, int, int]

# sixteen little-endian words per block
_BLOCK_WORDS = struct.Struct('<16I')


def rotate_left(x: int, amount: int) -> int:
    x &= WORD_MASK
    return ((x << amount) | (x >> (32 - amount))) & WORD_MASK


def F(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z)


def G(x: int, y: int, z: int) -> int:
    return (x & z) | (y & ~z)


def H(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def I(x: int, y: int, z: int) -> int:
    return (y ^ (x | ~z)) & WORD_MASK


def message_index(step: int) -> int:
    if step < 16:
        return step
    if step < 32:
        return (5 * step + 1) % 16
    if step < 48:
        return (3 * step + 5) % 16
    return (7 * step) % 16


MESSAGE_SCHEDULE = tuple(message_index(step) for step in range(64))
ROTATIONS = tuple(ROUND_SHIFTS[step >> 4][step & 3] for step in range(64))

_ROUNDS = ((F, 0), (G, 16), (H, 32), (I, 48))


def compress(state: State, block, offset: int = 0) -> State:
    """
    Absorb the 64 bytes of ``block`` starting at ``offset`` into ``state``
    and return the new state. ``block`` may be any bytes-like object.
    """
    m = _BLOCK_WORDS.unpack_from(block, offset)
    a, b, c, d = state
    for mix, first in _ROUNDS:
        for step in range(first, first + 16):
            temp = (a + mix(b, c, d) + m[MESSAGE_SCHEDULE[step]] + SINE_TABLE[step]) & WORD_MASK
            a, b, c, d = d, (b + rotate_left(temp, ROTATIONS[step])) & WORD_MASK, b, c
    return ((state[0] + a) & WORD_MASK,
            (state[1] + b) & WORD_MASK,
            (state[2] + c) & WORD_MASK,
            (state[3] + d) & WORD_MASK)
