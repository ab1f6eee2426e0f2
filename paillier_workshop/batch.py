"""Element-wise Paillier operations over numpy object arrays.

Ciphertexts are kept as `bytes` objects inside arrays of dtype=object, so
numpy handles the shape while every element keeps arbitrary precision.
"""
from typing import Optional, Sequence
from functools import reduce
import numpy as np

from .keys import PrivateKey, PublicKey
from .key_generation import RandomSource
from .paillier_encryption import add, bytes_to_int, decrypt, encrypt, int_to_bytes, multiply_constant

# Encryption of zero with r = 1; neutral element for homomorphic addition
ENCRYPTED_ZERO = b"\x01"

def _as_object_array(values: Sequence) -> np.ndarray:
    array = np.empty(len(values), dtype=object)
    array[:] = list(values)
    return array

def encrypt_array(public_key: PublicKey, values: Sequence[int],
                  random_source: Optional[RandomSource] = None) -> np.ndarray:
    """Encrypt each non-negative integer of `values` independently."""
    return _as_object_array([
        encrypt(public_key, int_to_bytes(int(v)), random_source) for v in values
    ])

def decrypt_array(private_key: PrivateKey, ciphertexts: Sequence[bytes]) -> np.ndarray:
    return _as_object_array([
        bytes_to_int(decrypt(private_key, c)) for c in ciphertexts
    ])

def sum_encrypted(public_key: PublicKey, ciphertexts: Sequence[bytes]) -> bytes:
    """Homomorphic sum of every ciphertext."""
    return reduce(lambda acc, c: add(public_key, acc, c), ciphertexts, ENCRYPTED_ZERO)

def scale_encrypted(public_key: PublicKey, ciphertexts: Sequence[bytes], weights: Sequence[int]) -> np.ndarray:
    """Multiply each encrypted value by the matching plaintext weight."""
    if len(ciphertexts) != len(weights):
        raise ValueError(f"Shape mismatch: {len(ciphertexts)} ciphertexts, {len(weights)} weights")
    return _as_object_array([
        multiply_constant(public_key, c, int_to_bytes(int(w))) for c, w in zip(ciphertexts, weights)
    ])

def dot_encrypted(public_key: PublicKey, ciphertexts: Sequence[bytes], weights: Sequence[int]) -> bytes:
    """Encrypted dot product: sum of ciphertexts[i] * weights[i]."""
    return sum_encrypted(public_key, scale_encrypted(public_key, ciphertexts, weights))
