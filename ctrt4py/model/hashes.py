from Cryptodome.Hash import keccak
import hashlib


def keccak256_hash(b):
    return keccak.new(data=b, digest_bits=256).digest()


def blake2b32_hash(b):
    return hashlib.blake2b(b, digest_size=32).digest()


def secure_hash(b):
    """keccak256(blake2b256(b)), used by address & checksum"""
    return keccak256_hash(blake2b32_hash(b))


__all__ = [
    "keccak256_hash",
    "blake2b32_hash",
    "secure_hash",
]
