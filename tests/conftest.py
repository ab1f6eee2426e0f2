"""Shared pytest fixtures for the Paillier test suite."""

import random

import pytest

from paillier_workshop import generate_keypair, keypair_from_primes


class BrokenRandomSource:
    """Randomness source whose device has gone away."""

    def getrandbits(self, k):
        raise OSError("entropy device unavailable")


@pytest.fixture()
def small_keys():
    """Toy key with p=23, q=31 (n=713)."""
    return keypair_from_primes(23, 31)


@pytest.fixture(scope="session")
def keys():
    """A real generated key pair, shared across the session."""
    return generate_keypair(bit_length=256)


@pytest.fixture()
def seeded_source():
    return random.Random(1234)


@pytest.fixture()
def broken_source():
    return BrokenRandomSource()
