from pykeccak.sponge import (
    Sponge, KeccakError, ConfigurationError, InvalidOutputSize
)
from pykeccak.digest import (
    Keccak, Keccak224, Keccak256, Keccak384, Keccak512, VARIANTS, new,
    keccak_224, keccak_256, keccak_384, keccak_512
)
