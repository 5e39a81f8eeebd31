from .context import DigestContext
from .errors import (
    DigestError,
    BufferBoundsError,
    InsufficientOutputSpaceError,
    PartialDigestUnsupportedError
    )
from .hasher import MD5Hash, StreamHasher, file_digest, md5, new
from .kdf import hmac_md5, hkdf_extract, hkdf_expand

__all__ = [
    'DigestContext',
    'DigestError',
    'BufferBoundsError',
    'InsufficientOutputSpaceError',
    'PartialDigestUnsupportedError',
    'MD5Hash',
    'StreamHasher',
    'file_digest',
    'md5',
    'new',
    'hmac_md5',
    'hkdf_extract',
    'hkdf_expand'
]
