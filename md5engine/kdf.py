# -*- coding: utf-8 -*-
"""
Created on Thu Oct 15 10:47:33 2026

HMAC (RFC 2104) and HKDF (RFC 5869) keyed on the MD5 engine.
"""

import hkdf
import hmac
from typing import Union
from .const import DIGEST_LENGTH
from .hasher import md5

MAX_EXPAND_LENGTH = 255 * DIGEST_LENGTH


def hmac_md5(key: bytes, data: bytes) -> bytes:
    hmac_md5_ = hmac.new(key, data, digestmod=md5)
    result = hmac_md5_.digest()
    return result


def hkdf_extract(salt: Union[bytes, None],
                 input_key_material: bytes) -> bytes:
    return hkdf.hkdf_extract(salt, input_key_material, md5)


def hkdf_expand(pseudo_random_key: bytes,
                info: bytes,
                length: int) -> bytes:
    if length < 0 or length > MAX_EXPAND_LENGTH:
        raise ValueError("cannot expand to %d bytes, the limit is %d" % (length, MAX_EXPAND_LENGTH))
    return hkdf.hkdf_expand(pseudo_random_key, info, length, md5)
