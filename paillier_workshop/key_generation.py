from typing import Optional, Protocol, Tuple
import logging
import math
import secrets
import sympy

from .errors import RandomSourceError
from .keys import PrivateKey, PublicKey

logger = logging.getLogger(__name__)

DEFAULT_KEY_SIZE = 2048
MIN_KEY_SIZE = 8

class RandomSource(Protocol):
    """Anything shaped like random.Random, e.g. secrets.SystemRandom()."""
    def getrandbits(self, k: int) -> int: ...

def _draw_bits(random_source: RandomSource, bits: int) -> int:
    try:
        value = random_source.getrandbits(bits)
    except Exception as e:
        raise RandomSourceError(f"Random source failed: {e!r}") from e
    if not isinstance(value, int) or not 0 <= value < (1 << bits):
        raise RandomSourceError(f"Random source returned an invalid {bits}-bit value: {value!r}")
    return value

def random_prime(bits: int, random_source: Optional[RandomSource] = None) -> int:
    """Draw a random prime of exactly `bits` bits from `random_source`.

    The source only has to expose `getrandbits(k)`; primality is decided by sympy.
    """
    if bits < 2:
        raise ValueError(f"Cannot draw a prime of {bits} bit(s)")
    if random_source is None:
        random_source = secrets.SystemRandom()

    top_bit = 1 << (bits - 1)
    attempts = 0
    while True:
        attempts += 1
        candidate = _draw_bits(random_source, bits) | top_bit | 1
        if sympy.isprime(candidate):
            logger.debug("Found %d-bit prime after %d candidate(s)", bits, attempts)
            return candidate

def keypair_from_primes(p: int, q: int, bit_length: Optional[int] = None) -> Tuple[PublicKey, PrivateKey]:
    """Build a key pair from two known, distinct primes.

    lambda is the plain product (p-1)(q-1); it is a multiple of lcm(p-1, q-1),
    so decryption stays correct as long as it is invertible mod n.
    """
    if p == q:
        raise ValueError(f"p and q must be distinct primes, got p = q = {p}")
    n = p * q
    if bit_length is None:
        bit_length = n.bit_length()
    n_squared = n * n
    g = n + 1
    lambda_n = (p - 1) * (q - 1)
    try:
        mu = pow(lambda_n, -1, n)
    except ValueError:
        raise ValueError(f"lambda is not invertible modulo n for p={p}, q={q}") from None

    public_key = PublicKey(bit_length=bit_length, n=n, g=g, n_squared=n_squared)
    return public_key, PrivateKey(bit_length=bit_length, public_key=public_key, lambda_n=lambda_n, mu=mu)

def generate_keypair(bit_length: int = DEFAULT_KEY_SIZE,
                     random_source: Optional[RandomSource] = None) -> Tuple[PublicKey, PrivateKey]:
    """Generate a Paillier key pair whose modulus n targets `bit_length` bits.

    Two independent primes of bit_length/2 bits are drawn from `random_source`
    (an object with `getrandbits`, defaulting to the OS CSPRNG). Failures of the
    source surface as RandomSourceError and are not retried.
    """
    if not isinstance(bit_length, int) or bit_length < MIN_KEY_SIZE or bit_length % 2:
        raise ValueError(f"bit_length must be an even integer >= {MIN_KEY_SIZE}, got {bit_length!r}")
    if random_source is None:
        random_source = secrets.SystemRandom()

    prime_bits = bit_length // 2
    p = random_prime(prime_bits, random_source)
    q = random_prime(prime_bits, random_source)
    # Only reachable with toy sizes: n = p^2, or p | q-1 leaving lambda without an inverse
    while q == p or math.gcd((p - 1) * (q - 1), p * q) != 1:
        q = random_prime(prime_bits, random_source)

    logger.debug("Generated %d-bit Paillier key pair", bit_length)
    return keypair_from_primes(p, q, bit_length)
