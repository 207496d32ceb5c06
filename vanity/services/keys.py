"""
Seed -> master key -> secp256k1 keypair -> address
"""

import hashlib
import hmac
from typing import NamedTuple, Optional

from ecdsa import SECP256k1, SigningKey
from eth_utils import keccak, to_checksum_address

from vanity.errors import KeyDerivationError
from vanity.limits import ADDRESS_BYTES
from vanity.schemas.result import Candidate
from vanity.services.entropy import EntropySource, generate_entropy, system_entropy
from vanity.services.phrase import derive_mnemonic, derive_seed

MASTER_KEY_HMAC_KEY = b"Bitcoin seed"
CURVE_ORDER = SECP256k1.order
PUBLIC_KEY_BYTES = 64
UNCOMPRESSED_MARKER = b"\x04"


class MasterKey(NamedTuple):
    private_key: bytes
    chain_code: bytes


def _check_scalar(private_key: bytes) -> None:
    if len(private_key) != 32:
        raise KeyDerivationError("private key must be 32 bytes")
    scalar = int.from_bytes(private_key, "big")
    if scalar == 0 or scalar >= CURVE_ORDER:
        raise KeyDerivationError("private scalar outside the curve order")


def derive_master_key(seed: bytes) -> MasterKey:
    """
    HMAC-SHA512 over the seed keyed with "Bitcoin seed"
    The root key is used as is, no child path is applied
    """
    digest = hmac.new(MASTER_KEY_HMAC_KEY, seed, hashlib.sha512).digest()
    master = MasterKey(private_key=digest[:32], chain_code=digest[32:])
    _check_scalar(master.private_key)
    return master


def derive_public_key(private_key: bytes) -> bytes:
    """Return the uncompressed public point as x || y (64 bytes, no format byte)"""
    _check_scalar(private_key)
    signing_key = SigningKey.from_string(private_key, curve=SECP256k1)
    return signing_key.get_verifying_key().to_string()


def derive_address(public_key: bytes) -> str:
    """Keccak-256 of the point coordinates, low 20 bytes, EIP-55 checksum case"""
    if len(public_key) == PUBLIC_KEY_BYTES + 1 and public_key[:1] == UNCOMPRESSED_MARKER:
        public_key = public_key[1:]
    if len(public_key) != PUBLIC_KEY_BYTES:
        raise ValueError(f"public key must be {PUBLIC_KEY_BYTES} coordinate bytes")
    return to_checksum_address(keccak(public_key)[-ADDRESS_BYTES:])


def derive_candidate(
    entropy: bytes,
    passphrase: str = "",
    language: str = "english",
) -> Candidate:
    """Run the whole pipeline for one iteration"""
    words = derive_mnemonic(entropy, language)
    master = derive_master_key(derive_seed(words, passphrase))
    address = derive_address(derive_public_key(master.private_key))
    return Candidate(mnemonic=tuple(words), address=address)


def draw_candidate(
    bits: int = 256,
    passphrase: str = "",
    source: Optional[EntropySource] = None,
    language: str = "english",
) -> Candidate:
    """Draw fresh entropy and derive its candidate"""
    entropy = generate_entropy(bits, source or system_entropy)
    return derive_candidate(entropy, passphrase, language)
