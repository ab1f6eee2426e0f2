"""Paillier additively homomorphic cryptosystem."""
from .errors import (
    CiphertextOutOfRangeError,
    KeyEncodingError,
    MessageTooLargeError,
    PaillierError,
    PlaintextOutOfRangeError,
    RandomSourceError,
)
from .keys import (
    PrivateKey,
    PublicKey,
    decode_private_key,
    decode_public_key,
    encode_private_key,
    encode_public_key,
)
from .key_generation import (
    DEFAULT_KEY_SIZE,
    RandomSource,
    generate_keypair,
    keypair_from_primes,
    random_prime,
)
from .paillier_encryption import (
    add,
    add_constant,
    bytes_to_int,
    decrypt,
    encrypt,
    int_to_bytes,
    multiply_constant,
)

__version__ = "0.1.0"
