"""
Keccak message digests (original multi-rate padding, domain byte 0x01).

``` python
from pykeccak.digest import Keccak256, keccak_256

h = Keccak256()
h.update(b'a').update(b'bc')
assert h.final() == keccak_256(b'abc')
```
"""

from __future__ import annotations
from pykeccak.sponge import (
    Sponge, ConfigurationError, InvalidOutputSize, STATE_BYTES
)

import logging


log = logging.getLogger(__name__)


def validate(digest_size: int) -> int:
    """Return the rate for ``digest_size`` bytes, or raise ConfigurationError."""
    if not isinstance(digest_size, int) or isinstance(digest_size, bool):
        raise ConfigurationError('Invalid digest size.')
    if digest_size <= 0:
        raise ConfigurationError('Invalid digest size.')
    rate = STATE_BYTES - 2 * digest_size
    if not 0 < rate < STATE_BYTES:
        log.debug('rejecting digest size %d: rate %d out of range', digest_size, rate)
        raise ConfigurationError('Invalid rate for digest size.')
    if rate <= digest_size:
        log.debug('rejecting digest size %d: rate %d too small', digest_size, rate)
        raise ConfigurationError('Rate must exceed digest size.')
    return rate


# digest size (bytes) -> rate (bytes)
VARIANTS: dict[int, int] = {d: validate(d) for d in (28, 32, 48, 64)}


class Keccak(object):

    DIGEST_SIZE: int | None = None
    ALGORITHM_NAME: str | None = None

    def __init__(self, digest_size: int | None = None):
        if digest_size is None:
            digest_size = self.DIGEST_SIZE
        elif self.DIGEST_SIZE is not None and digest_size != self.DIGEST_SIZE:
            raise ConfigurationError('Invalid digest size.')
        self._digest_size = digest_size
        self._sponge = Sponge(validate(digest_size))

    def __repr__(self) -> str:
        return f'<{self.algorithm_name} at {id(self):#x}>'

    @property
    def digest_size(self) -> int:
        return self._digest_size

    @property
    def block_size(self) -> int:
        return self._sponge.rate

    @property
    def algorithm_name(self) -> str:
        return f'Keccak-{self._digest_size * 8}'

    name = algorithm_name

    def update(self, data: bytes | bytearray | memoryview) -> Keccak:
        self._sponge.absorb(data)
        return self

    def restart(self):
        self._sponge.reset()

    def truncated_final(self, size: int) -> bytes:
        """Return the first ``size`` digest bytes and restart.

        An out-of-range ``size`` raises InvalidOutputSize and leaves the
        absorbed message intact.
        """
        if (
            not isinstance(size, int) or isinstance(size, bool)
            or not 0 <= size <= self._digest_size
        ):
            raise InvalidOutputSize('Invalid output size.')
        return self._sponge.finalize(size)

    def final(self) -> bytes:
        return self.truncated_final(self._digest_size)

    def copy(self) -> Keccak:
        other = object.__new__(type(self))
        other._digest_size = self._digest_size
        other._sponge = self._sponge.copy()
        return other

    def digest(self) -> bytes:
        return self.copy().final()

    def hexdigest(self) -> str:
        return self.digest().hex()


class Keccak224(Keccak):

    DIGEST_SIZE = 28
    ALGORITHM_NAME = 'Keccak-224'


class Keccak256(Keccak):

    DIGEST_SIZE = 32
    ALGORITHM_NAME = 'Keccak-256'


class Keccak384(Keccak):

    DIGEST_SIZE = 48
    ALGORITHM_NAME = 'Keccak-384'


class Keccak512(Keccak):

    DIGEST_SIZE = 64
    ALGORITHM_NAME = 'Keccak-512'


_BY_BITS: dict[int, type[Keccak]] = {
    cls.DIGEST_SIZE * 8: cls
    for cls in (Keccak224, Keccak256, Keccak384, Keccak512)
}


def new(
    digest_bits: int = 256, data: bytes | bytearray | memoryview = b''
) -> Keccak:
    try:
        cls = _BY_BITS[digest_bits]
    except (KeyError, TypeError):
        raise ConfigurationError('Invalid digest bits.')
    return cls().update(data)


def keccak_224(msg: bytes | bytearray | memoryview) -> bytes:
    return Keccak224().update(msg).final()


def keccak_256(msg: bytes | bytearray | memoryview) -> bytes:
    return Keccak256().update(msg).final()


def keccak_384(msg: bytes | bytearray | memoryview) -> bytes:
    return Keccak384().update(msg).final()


def keccak_512(msg: bytes | bytearray | memoryview) -> bytes:
    return Keccak512().update(msg).final()
