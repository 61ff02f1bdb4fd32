from __future__ import annotations
from typing import BinaryIO
from pykeccak import digest

import asyncio
import concurrent.futures
import logging


log = logging.getLogger(__name__)

CHUNK_SIZE = 1 << 16


async def keccak_224(
    msg: bytes | bytearray,
    loop: asyncio.AbstractEventLoop | None = None
) -> bytes:
    loop = loop or asyncio.get_running_loop()
    return await loop.run_in_executor(None, digest.keccak_224, msg)


async def keccak_256(
    msg: bytes | bytearray,
    loop: asyncio.AbstractEventLoop | None = None
) -> bytes:
    loop = loop or asyncio.get_running_loop()
    return await loop.run_in_executor(None, digest.keccak_256, msg)


async def keccak_384(
    msg: bytes | bytearray,
    loop: asyncio.AbstractEventLoop | None = None
) -> bytes:
    loop = loop or asyncio.get_running_loop()
    return await loop.run_in_executor(None, digest.keccak_384, msg)


async def keccak_512(
    msg: bytes | bytearray,
    loop: asyncio.AbstractEventLoop | None = None
) -> bytes:
    loop = loop or asyncio.get_running_loop()
    return await loop.run_in_executor(None, digest.keccak_512, msg)


async def hash_stream(
    stream: BinaryIO,
    digest_bits: int = 256,
    outlen: int | None = None,
    chunk_size: int = CHUNK_SIZE,
    loop: asyncio.AbstractEventLoop | None = None,
    executor: concurrent.futures.Executor | None = None
) -> bytes:
    """Hash a binary stream, reading and absorbing each chunk off the loop."""
    if chunk_size <= 0:
        raise ValueError('Invalid chunk size.')
    loop = loop or asyncio.get_running_loop()
    h = digest.new(digest_bits)
    if outlen is None:
        outlen = h.digest_size
    elif not 0 <= outlen <= h.digest_size:
        raise digest.InvalidOutputSize('Invalid output size.')
    nbytes = 0
    while True:
        chunk = await loop.run_in_executor(executor, stream.read, chunk_size)
        if not chunk:
            break
        nbytes += len(chunk)
        await loop.run_in_executor(executor, h.update, chunk)
    log.debug('%s absorbed %d bytes', h.algorithm_name, nbytes)
    return await loop.run_in_executor(executor, h.truncated_final, outlen)


async def hash_file(
    path: str,
    digest_bits: int = 256,
    outlen: int | None = None,
    chunk_size: int = CHUNK_SIZE,
    loop: asyncio.AbstractEventLoop | None = None,
    executor: concurrent.futures.Executor | None = None
) -> bytes:
    loop = loop or asyncio.get_running_loop()
    f = await loop.run_in_executor(executor, open, path, 'rb')
    try:
        return await hash_stream(
            f, digest_bits, outlen, chunk_size, loop, executor
        )
    finally:
        await loop.run_in_executor(executor, f.close)
