import numpy as np
import pytest

from paillier_workshop import decrypt, bytes_to_int
from paillier_workshop.batch import (
    ENCRYPTED_ZERO,
    decrypt_array,
    dot_encrypted,
    encrypt_array,
    scale_encrypted,
    sum_encrypted,
)


def test_encrypt_decrypt_array(keys):
    pub, priv = keys
    values = [3, 0, 17, 2**40]
    encrypted = encrypt_array(pub, values)
    assert encrypted.dtype == object
    assert encrypted.shape == (4,)
    assert list(decrypt_array(priv, encrypted)) == values


def test_encrypt_array_accepts_numpy_ints(small_keys):
    pub, priv = small_keys
    encrypted = encrypt_array(pub, np.arange(5))
    assert list(decrypt_array(priv, encrypted)) == [0, 1, 2, 3, 4]


def test_sum_encrypted(small_keys):
    pub, priv = small_keys
    encrypted = encrypt_array(pub, [10, 20, 30, 40])
    assert bytes_to_int(decrypt(priv, sum_encrypted(pub, encrypted))) == 100


def test_sum_of_nothing_is_zero(small_keys):
    pub, priv = small_keys
    assert sum_encrypted(pub, []) == ENCRYPTED_ZERO
    assert decrypt(priv, ENCRYPTED_ZERO) == b""


def test_scale_encrypted(small_keys):
    pub, priv = small_keys
    encrypted = encrypt_array(pub, [2, 3, 4])
    scaled = scale_encrypted(pub, encrypted, [5, 0, 7])
    assert list(decrypt_array(priv, scaled)) == [10, 0, 28]


def test_dot_encrypted(keys):
    pub, priv = keys
    values = [4, 8, 15, 16, 23, 42]
    weights = np.array([1, 2, 3, 4, 5, 6])
    result = dot_encrypted(pub, encrypt_array(pub, values), weights)
    assert bytes_to_int(decrypt(priv, result)) == int(np.dot(values, weights))


def test_shape_mismatch(small_keys):
    pub, _ = small_keys
    with pytest.raises(ValueError):
        scale_encrypted(pub, encrypt_array(pub, [1, 2]), [1])
