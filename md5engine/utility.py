# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 10:11:03 2026
"""

import logging

LOGGER_NAME = "MD5ENGINE"
LOGGER = None
LOG_LEVEL = logging.INFO


def byte_view(data) -> memoryview:
    # flat unsigned byte view over any contiguous bytes-like object
    return memoryview(data).cast('B')


def get_logger():
    global LOGGER
    if LOGGER is None:
        LOGGER = logging.getLogger(LOGGER_NAME)
        LOGGER.setLevel(LOG_LEVEL)
        ch = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s|%(levelname)s|%(thread)d|%(filename)s[line:%(lineno)d] - %(funcName)s : %(message)s')
        ch.setFormatter(formatter)
        LOGGER.addHandler(ch)
    return LOGGER
