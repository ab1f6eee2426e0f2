"""Exceptions raised by the Paillier cryptosystem."""

class PaillierError(Exception):
    """Base exception for Paillier-related errors."""

class MessageTooLargeError(PaillierError, ValueError):
    """Raised when a value does not fit the ring of the key."""

    def __init__(self, value: int, modulus: int, message: str):
        super().__init__(message)
        self.value = value
        self.modulus = modulus

class PlaintextOutOfRangeError(MessageTooLargeError):
    """Plaintext is not in [0, n)."""

    def __init__(self, value: int, modulus: int):
        super().__init__(
            value, modulus,
            f"Message too large for current key size ({modulus.bit_length()} bit modulus)",
        )

class CiphertextOutOfRangeError(MessageTooLargeError):
    """Ciphertext is not in [0, n^2)."""

    def __init__(self, value: int, modulus: int):
        super().__init__(
            value, modulus,
            f"Ciphertext too large for current key size ({modulus.bit_length()} bit modulus)",
        )

class RandomSourceError(PaillierError):
    """The randomness source failed to deliver usable bits."""

class KeyEncodingError(PaillierError, ValueError):
    """A serialized key could not be decoded."""
