from typing import List, Tuple
from dataclasses import dataclass
import struct

from .errors import KeyEncodingError

# Every field is stored as a 4-byte big-endian length followed by its magnitude
_LENGTH = struct.Struct(">I")

@dataclass(frozen=True)
class PublicKey:
    """Public parameters of a Paillier key pair"""
    bit_length: int  # Target size of n in bits
    n: int           # Modulus p*q
    g: int           # Generator, always n + 1 here
    n_squared: int   # n^2, the ciphertext modulus

    def to_tuple(self) -> Tuple[int, int, int, int]:
        return (self.bit_length, self.n, self.g, self.n_squared)

@dataclass(frozen=True)
class PrivateKey:
    """Secret parameters, carrying its own copy of the public key"""
    bit_length: int
    public_key: PublicKey
    lambda_n: int    # (p-1)(q-1)
    mu: int          # lambda^-1 mod n

    @property
    def n(self) -> int:
        return self.public_key.n

    @property
    def g(self) -> int:
        return self.public_key.g

    @property
    def n_squared(self) -> int:
        return self.public_key.n_squared

    def to_tuple(self) -> Tuple[int, int, int, int, int, int]:
        return (self.bit_length, self.n, self.g, self.n_squared, self.lambda_n, self.mu)

    def __repr__(self) -> str:
        # Keep lambda and mu out of tracebacks and logs
        return f"PrivateKey(bit_length={self.bit_length}, public_key={self.public_key!r})"

def _pack_fields(fields: Tuple[int, ...]) -> bytes:
    chunks = []
    for value in fields:
        if value < 0:
            raise KeyEncodingError(f"Cannot encode negative key field: {value}")
        raw = value.to_bytes((value.bit_length() + 7) // 8, byteorder='big')
        chunks.append(_LENGTH.pack(len(raw)))
        chunks.append(raw)
    return b"".join(chunks)

def _unpack_fields(data: bytes, count: int) -> List[int]:
    fields = []
    offset = 0
    for index in range(count):
        if len(data) - offset < _LENGTH.size:
            raise KeyEncodingError(f"Truncated key: missing length of field {index}")
        (size,) = _LENGTH.unpack_from(data, offset)
        offset += _LENGTH.size
        if len(data) - offset < size:
            raise KeyEncodingError(f"Truncated key: field {index} needs {size} bytes")
        fields.append(int.from_bytes(data[offset:offset + size], byteorder='big'))
        offset += size
    if offset != len(data):
        raise KeyEncodingError(f"Unexpected {len(data) - offset} trailing byte(s) after key")
    return fields

def encode_public_key(key: PublicKey) -> bytes:
    """Serialize (bit_length, n, g, n_squared) in that order."""
    return _pack_fields(key.to_tuple())

def decode_public_key(data: bytes) -> PublicKey:
    bit_length, n, g, n_squared = _unpack_fields(bytes(data), 4)
    return PublicKey(bit_length=bit_length, n=n, g=g, n_squared=n_squared)

def encode_private_key(key: PrivateKey) -> bytes:
    """Serialize (bit_length, n, g, n_squared, lambda, mu) in that order."""
    return _pack_fields(key.to_tuple())

def decode_private_key(data: bytes) -> PrivateKey:
    bit_length, n, g, n_squared, lambda_n, mu = _unpack_fields(bytes(data), 6)
    public_key = PublicKey(bit_length=bit_length, n=n, g=g, n_squared=n_squared)
    return PrivateKey(bit_length=bit_length, public_key=public_key, lambda_n=lambda_n, mu=mu)
