from __future__ import annotations
from asyncio import gather
from io import BytesIO
from pykeccak import aio, digest

import argparse
import asyncio
import logging
import sys


MAX_OPEN_FILES = 32


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='python -m pykeccak',
        description='Print Keccak (pre-FIPS 202) checksums.'
    )
    parser.add_argument(
        '-a', '--algorithm', type=int, default=256,
        choices=sorted(d * 8 for d in digest.VARIANTS),
        help='digest size in bits (default: 256)'
    )
    parser.add_argument(
        '-l', '--length', type=int, default=None,
        help='truncate the digest to LENGTH bytes'
    )
    parser.add_argument(
        '-j', '--jobs', type=int, default=MAX_OPEN_FILES,
        help=f'files open at once (default: {MAX_OPEN_FILES})'
    )
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('files', nargs='*', default=['-'], metavar='FILE')
    args = parser.parse_args(argv)
    if args.length is not None and not 0 <= args.length <= args.algorithm // 8:
        parser.error(f'length must be between 0 and {args.algorithm // 8}')
    if args.jobs < 1:
        parser.error('jobs must be at least 1')
    return args


async def run(args: argparse.Namespace) -> int:
    limit = asyncio.Semaphore(args.jobs)

    async def hash_path(path: str) -> bytes:
        async with limit:
            return await aio.hash_file(path, args.algorithm, args.length)

    jobs = []
    stdin_read = False
    for path in args.files:
        if path != '-':
            jobs.append(hash_path(path))
        elif stdin_read:
            # stdin is exhausted by the first '-'
            jobs.append(aio.hash_stream(BytesIO(), args.algorithm, args.length))
        else:
            stdin_read = True
            jobs.append(aio.hash_stream(sys.stdin.buffer, args.algorithm, args.length))
    status = 0
    results = await gather(*jobs, return_exceptions=True)
    for path, result in zip(args.files, results):
        match result:
            case bytes():
                print(f'{result.hex()}  {path}')
            case OSError():
                logging.error(f'{path}: {result.strerror or result}')
                status = 1
            case _:
                raise result
    return status


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    return asyncio.run(run(args))


if __name__ == '__main__':
    sys.exit(main())
