"""
vigenere_crypto
===============
Vigenère polyalphabetic cipher over A-Z, table-driven (tabula recta).

    encrypt(plaintext, password)   -> ciphertext
    decrypt(ciphertext, password)  -> plaintext

Passwords are reduced to their letters ("k3e-y!" -> "KEY"); a password
with no letters raises InvalidKeyword. Non-letters in the text pass
through unchanged and do not consume keyword positions.

Not secure. Historical and educational use only.

License: Apache 2.0
"""

__version__  = "1.0.0"
__author__   = "Vigenère Crypto Contributors"
__project__  = "vigenere_crypto"

from .vigenere import (
    ALPHABET,
    SHIFT_TABLE,
    InvalidKeyword,
    VigenereCipher,
    VigenereResult,
    build_table,
    decrypt,
    decrypt_with_details,
    encrypt,
    encrypt_with_details,
    keystream,
    normalize_keyword,
)

__all__ = [
    "ALPHABET",
    "SHIFT_TABLE",
    "InvalidKeyword",
    "VigenereCipher",
    "VigenereResult",
    "build_table",
    "decrypt",
    "decrypt_with_details",
    "encrypt",
    "encrypt_with_details",
    "keystream",
    "normalize_keyword",
]
