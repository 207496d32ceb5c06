"""
BIP39 mnemonic encoding and seed stretching
Uses the official mnemonic package for the wordlist and the algorithm
"""

from functools import lru_cache
from typing import List, Sequence

from mnemonic import Mnemonic

from vanity.errors import MnemonicEncodingError

WORDLIST_SIZE = 2048
SEED_BYTES = 64


@lru_cache()
def get_mnemo(language: str = "english") -> Mnemonic:
    """Cached Mnemonic instance; the wordlist is checked once per language"""
    mnemo = Mnemonic(language)
    assert len(mnemo.wordlist) == WORDLIST_SIZE, "Wordlist must contain exactly 2048 words"
    assert len(set(mnemo.wordlist)) == WORDLIST_SIZE, "Wordlist must contain unique words"
    return mnemo


def _join(words: Sequence[str]) -> str:
    return " ".join(words)


def derive_mnemonic(entropy: bytes, language: str = "english") -> List[str]:
    """
    Encode entropy plus its checksum as wordlist words
    16/20/24/28/32 bytes give 12/15/18/21/24 words
    """
    mnemo = get_mnemo(language)
    phrase = mnemo.to_mnemonic(entropy)
    if not mnemo.check(phrase):
        raise MnemonicEncodingError("generated phrase failed its checksum")
    return phrase.split()


def mnemonic_to_entropy(words: Sequence[str], language: str = "english") -> bytes:
    """Decode a phrase back into the entropy it encodes"""
    try:
        return bytes(get_mnemo(language).to_entropy(list(words)))
    except (ValueError, LookupError) as exc:
        raise MnemonicEncodingError(f"phrase cannot be decoded: {exc}") from exc


def validate_mnemonic(words: Sequence[str], language: str = "english") -> bool:
    return get_mnemo(language).check(_join(words))


def derive_seed(words: Sequence[str], passphrase: str = "") -> bytes:
    """
    PBKDF2-HMAC-SHA512 (2048 rounds) over the phrase, salt "mnemonic" + passphrase
    Same inputs always give the same 64 bytes
    """
    return Mnemonic.to_seed(_join(words), passphrase)
