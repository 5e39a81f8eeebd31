# -*- coding: utf-8 -*-
"""
Created on Fri Oct 16 15:20:54 2026

Command line front end, md5sum style:

    pymd5 FILE...          print "<hexdigest>  <name>" per file
    pymd5 -s TEXT          digest a UTF-8 string
    pymd5 -c SUMS...       verify a previous listing
"""

import argparse
import logging
import re
import sys
from typing import List, Union
from .hasher import file_digest, md5
from .utility import get_logger

_CHECK_LINE = re.compile(r'^([0-9a-fA-F]{32}) [ *](.+)$')


def _open(name: str):
    if name == '-':
        return sys.stdin.buffer
    return open(name, 'rb')


def hash_file(name: str) -> str:
    f = _open(name)
    try:
        return file_digest(f).hexdigest()
    finally:
        if f is not sys.stdin.buffer:
            f.close()


def print_digests(names: List[str]) -> int:
    logger = get_logger()
    rc = 0
    for name in names:
        try:
            hex_digest = hash_file(name)
        except OSError as e:
            logger.error("%s: %s", name, e.strerror or e)
            rc = 1
            continue
        sys.stdout.write("%s  %s\n" % (hex_digest, name))
    return rc


def check_digests(names: List[str]) -> int:
    logger = get_logger()
    rc = 0
    for name in names:
        try:
            f = _open(name)
            try:
                lines = f.read().decode('utf-8', 'replace').splitlines()
            finally:
                if f is not sys.stdin.buffer:
                    f.close()
        except OSError as e:
            logger.error("%s: %s", name, e.strerror or e)
            rc = 1
            continue
        for line_number, line in enumerate(lines, 1):
            match = _CHECK_LINE.match(line)
            if match is None:
                if line.strip():
                    logger.warning("%s:%d: improperly formatted line", name, line_number)
                continue
            expected, target = match.group(1).lower(), match.group(2)
            try:
                actual = hash_file(target)
            except OSError as e:
                logger.error("%s: %s", target, e.strerror or e)
                sys.stdout.write("%s: FAILED open or read\n" % target)
                rc = 1
                continue
            if actual == expected:
                sys.stdout.write("%s: OK\n" % target)
            else:
                sys.stdout.write("%s: FAILED\n" % target)
                rc = 1
    return rc


def main(argv: Union[List[str], None] = None) -> int:
    parser = argparse.ArgumentParser(prog='pymd5',
                                     description='Compute and check MD5 (RFC 1321) message digests.')
    parser.add_argument('files', nargs='*', metavar='FILE',
                        help="files to read, '-' or nothing for standard input")
    parser.add_argument('-s', '--string', action='append', default=[], metavar='TEXT',
                        help='digest TEXT encoded as UTF-8 (repeatable)')
    parser.add_argument('-c', '--check', action='store_true',
                        help='read digests from the FILEs and check them')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    args = parser.parse_args(argv)
    if args.verbose:
        get_logger().setLevel(logging.DEBUG)

    for text in args.string:
        sys.stdout.write('%s  "%s"\n' % (md5(text.encode('utf-8')).hexdigest(), text))
    files = args.files
    if not files and not args.string:
        files = ['-']
    if args.check:
        return check_digests(files)
    return print_digests(files)


if __name__ == "__main__":
    sys.exit(main())
