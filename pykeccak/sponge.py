from __future__ import annotations
from pykeccak.constants import LANES
from pykeccak.permutation import keccak_f1600


STATE_BYTES = 200

PAD_DOMAIN = 0x01
PAD_LAST = 0x80


class KeccakError(ValueError):
    pass


class ConfigurationError(KeccakError):
    pass


class InvalidOutputSize(KeccakError):
    pass


class Sponge(object):
    """Absorb/squeeze state machine over Keccak-f[1600].

    ``counter`` counts the bytes of the current rate block held in ``buffer``
    and drops back to 0 whenever a full block is absorbed into ``state``.
    ``finalize`` resets the sponge, so absorbing after it starts a new message.
    """

    def __init__(self, rate: int):
        if (
            not isinstance(rate, int) or isinstance(rate, bool)
            or not 0 < rate < STATE_BYTES
        ):
            raise ConfigurationError('Invalid rate.')
        self.rate = rate
        self.state: list[int] = [0] * LANES
        self.buffer = bytearray(rate)
        self.counter = 0

    def reset(self):
        self.state[:] = [0] * LANES
        self.buffer[:] = bytes(self.rate)
        self.counter = 0

    def copy(self) -> Sponge:
        other = Sponge(self.rate)
        other.state[:] = self.state
        other.buffer[:] = self.buffer
        other.counter = self.counter
        return other

    def _xor_block(self, block: bytes | bytearray | memoryview):
        for i in range(0, self.rate, 8):
            self.state[i >> 3] ^= int.from_bytes(block[i:i + 8], 'little')

    def _squeeze_block(self) -> bytes:
        out = b''.join(lane.to_bytes(8, 'little') for lane in self.state)
        return out[:self.rate]

    def absorb(self, data: bytes | bytearray | memoryview):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError('data must be bytes-like.')
        view = memoryview(data).cast('B')
        pos, size = 0, len(view)
        while pos < size:
            n = min(self.rate - self.counter, size - pos)
            self.buffer[self.counter:self.counter + n] = view[pos:pos + n]
            self.counter += n
            pos += n
            if self.counter == self.rate:
                self._xor_block(self.buffer)
                keccak_f1600(self.state)
                self.counter = 0

    def finalize(self, output_size: int) -> bytes:
        if (
            not isinstance(output_size, int) or isinstance(output_size, bool)
            or output_size < 0
        ):
            raise InvalidOutputSize('Invalid output size.')
        # counter < rate here, so the domain byte always fits
        block = self.buffer
        block[self.counter] = PAD_DOMAIN
        block[self.counter + 1:] = bytes(self.rate - self.counter - 1)
        block[-1] |= PAD_LAST
        self._xor_block(block)
        keccak_f1600(self.state)
        out = self._squeeze_block()
        while len(out) < output_size:
            keccak_f1600(self.state)
            out += self._squeeze_block()
        self.reset()
        return out[:output_size]
