from typing import Optional, Union
import logging
import secrets

from .errors import CiphertextOutOfRangeError, PlaintextOutOfRangeError
from .key_generation import RandomSource, random_prime
from .keys import PrivateKey, PublicKey

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

def int_to_bytes(value: int) -> bytes:
    """Minimal big-endian encoding; zero becomes b''."""
    return value.to_bytes((value.bit_length() + 7) // 8, byteorder='big')

def bytes_to_int(data: BytesLike) -> int:
    return int.from_bytes(data, byteorder='big')

def _L(x: int, n: int) -> int:
    return (x - 1) // n

def encrypt(public_key: PublicKey, plaintext: BytesLike, random_source: Optional[RandomSource] = None) -> bytes:
    """Encrypt a big-endian plaintext: c = g^m * r^n mod n^2.

    A fresh prime blinding value r, sized to the key's modulus, is drawn on
    every call, so encrypting the same plaintext twice gives different ciphertexts.
    """
    m = bytes_to_int(plaintext)
    if m >= public_key.n:
        logger.debug("Rejected %d-bit plaintext for %d-bit key", m.bit_length(), public_key.bit_length)
        raise PlaintextOutOfRangeError(m, public_key.n)

    if random_source is None:
        random_source = secrets.SystemRandom()
    # r has as many bits as n, so it is larger than either prime factor and coprime to n
    r = random_prime(max(public_key.n.bit_length(), 2), random_source)

    n_sq = public_key.n_squared
    g_m = pow(public_key.g, m, n_sq)
    r_n = pow(r, public_key.n, n_sq)
    return int_to_bytes((g_m * r_n) % n_sq)

def decrypt(private_key: PrivateKey, ciphertext: BytesLike) -> bytes:
    """Decrypt: m = L(c^lambda mod n^2) * mu mod n.

    There is no integrity check; a ciphertext from another key decrypts to garbage.
    """
    c = bytes_to_int(ciphertext)
    if c >= private_key.n_squared:
        logger.debug("Rejected %d-bit ciphertext for %d-bit key", c.bit_length(), private_key.bit_length)
        raise CiphertextOutOfRangeError(c, private_key.n_squared)

    a = pow(c, private_key.lambda_n, private_key.n_squared)
    m = (_L(a, private_key.n) * private_key.mu) % private_key.n
    return int_to_bytes(m)

# Homomorphic operators. None of them validate ranges or need the private key.

def add(public_key: PublicKey, c1: BytesLike, c2: BytesLike) -> bytes:
    """Product of two ciphertexts, decrypting to the sum of their plaintexts mod n."""
    return int_to_bytes((bytes_to_int(c1) * bytes_to_int(c2)) % public_key.n_squared)

def add_constant(public_key: PublicKey, ciphertext: BytesLike, constant: BytesLike) -> bytes:
    """c * g^k mod n^2, decrypting to plaintext + k."""
    n_sq = public_key.n_squared
    g_k = pow(public_key.g, bytes_to_int(constant), n_sq)
    return int_to_bytes((bytes_to_int(ciphertext) * g_k) % n_sq)

def multiply_constant(public_key: PublicKey, ciphertext: BytesLike, constant: BytesLike) -> bytes:
    """c^k mod n^2, decrypting to plaintext * k."""
    return int_to_bytes(pow(bytes_to_int(ciphertext), bytes_to_int(constant), public_key.n_squared))
