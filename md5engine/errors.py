# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 10:05:41 2026
"""


class DigestError(Exception):
    pass


class BufferBoundsError(DigestError, IndexError):
    def __init__(self, offset: int, length: int, extent: int):
        super().__init__("region offset=%d length=%d is outside a buffer of %d bytes"
                         % (offset, length, extent))
        self.offset = offset
        self.length = length
        self.extent = extent


class InsufficientOutputSpaceError(DigestError):
    def __init__(self, available: int):
        super().__init__("insufficient space in output buffer to store the digest "
                         "(%d bytes available)" % available)
        self.available = available


class PartialDigestUnsupportedError(DigestError):
    def __init__(self, length: int):
        super().__init__("partial digests not returned (requested %d bytes)" % length)
        self.length = length
