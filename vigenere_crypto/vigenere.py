"""
Vigenère Polyalphabetic Cipher — Tabula Recta
=============================================
Classic Vigenère over the 26-letter Latin alphabet, driven by a
precomputed 26×26 shift table (the tabula recta). Row r of the table
is the alphabet rotated left by r places, so

    SHIFT_TABLE[r][c] == ALPHABET[(r + c) % 26]

Encrypt walks the plaintext with a keyword cursor: each letter picks a
row from the current keyword letter and a column from its own position
in the base alphabet. Decrypt reverses the lookup — it finds the
ciphertext letter *inside* the shifted row and reads the column back
off the base alphabet.

Anything that is not an ASCII letter (spaces, digits, punctuation,
accented letters) is copied through in place and does not move the
keyword cursor.

Historical note: Blaise de Vigenère, 1553. Broken by Kasiski (1863).
Educational only — this is not a secure cipher.

Dependencies: none (standard library only)
"""

import logging
import string
from dataclasses import dataclass
from typing import List, Tuple

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase

# ASCII-only upper-casing: str.upper() would turn "ß" into "SS" and break
# the one-in, one-out character mapping.
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LETTERS = frozenset(string.ascii_letters)


class InvalidKeyword(ValueError):
    """The password holds no A-Z letters, so no keyword can be built."""


@dataclass(frozen=True)
class VigenereResult:
    """Outcome of one encrypt/decrypt call, for inspection."""
    plaintext: str
    ciphertext: str
    keyword: str


def build_table() -> Tuple[str, ...]:
    """Build the 26-row tabula recta: row r is ALPHABET rotated left by r."""
    table = tuple(ALPHABET[r:] + ALPHABET[:r] for r in range(len(ALPHABET)))
    logger.debug(f"Shift table built: {len(table)} rows")
    return table


SHIFT_TABLE = build_table()


def normalize_keyword(password: str) -> str:
    """
    Reduce a user password to its ASCII letters, upper-cased, in order.

    "k3e-y!" -> "KEY", "Lemon Tree" -> "LEMONTREE".
    Raises InvalidKeyword if no letters are left.
    """
    if not isinstance(password, str):
        raise TypeError(f"password must be str, not {type(password).__name__}")
    keyword = "".join(c for c in password if c in _LETTERS).translate(_ASCII_UPPER)
    if not keyword:
        raise InvalidKeyword("Vigenère password must contain at least one letter A-Z.")
    return keyword


def _prepare(text: str, password: str) -> Tuple[str, str]:
    if not isinstance(text, str):
        raise TypeError(f"text must be str, not {type(text).__name__}")
    keyword = normalize_keyword(password)
    return text.translate(_ASCII_UPPER), keyword


def keystream(text: str, password: str) -> List[int]:
    """
    Row index (shift 0-25) applied to each letter of `text`, in order.
    Non-letters contribute nothing and do not advance the keyword.
    """
    text, keyword = _prepare(text, password)
    count = sum(1 for ch in text if ch in ALPHABET)
    return [ALPHABET.index(keyword[i % len(keyword)]) for i in range(count)]


def _encrypt(text: str, keyword: str) -> str:
    out = []
    cursor = 0
    for ch in text:
        col = ALPHABET.find(ch)
        if col == -1:
            out.append(ch)
            continue
        row = ALPHABET.index(keyword[cursor])
        out.append(SHIFT_TABLE[row][col])
        cursor += 1
        if cursor >= len(keyword):
            cursor = 0
    logger.debug(f"Encrypt: {len(text)} chars, keyword={len(keyword)} letters")
    return "".join(out)


def _decrypt(text: str, keyword: str) -> str:
    out = []
    cursor = 0
    for ch in text:
        row = ALPHABET.index(keyword[cursor])
        # search the shifted row, then read the column off the base alphabet
        col = SHIFT_TABLE[row].find(ch)
        if col == -1:
            out.append(ch)
            continue
        out.append(ALPHABET[col])
        cursor += 1
        if cursor >= len(keyword):
            cursor = 0
    logger.debug(f"Decrypt: {len(text)} chars, keyword={len(keyword)} letters")
    return "".join(out)


def encrypt_with_details(plaintext: str, password: str) -> VigenereResult:
    """Encrypt and return plaintext, ciphertext and keyword together."""
    text, keyword = _prepare(plaintext, password)
    return VigenereResult(plaintext=text, ciphertext=_encrypt(text, keyword), keyword=keyword)


def decrypt_with_details(ciphertext: str, password: str) -> VigenereResult:
    """Decrypt and return plaintext, ciphertext and keyword together."""
    text, keyword = _prepare(ciphertext, password)
    return VigenereResult(plaintext=_decrypt(text, keyword), ciphertext=text, keyword=keyword)


def encrypt(plaintext: str, password: str) -> str:
    """Encrypt plaintext. Output is upper-case; non-letters pass through."""
    return encrypt_with_details(plaintext, password).ciphertext


def decrypt(ciphertext: str, password: str) -> str:
    """Decrypt ciphertext produced by encrypt() with the same password."""
    return decrypt_with_details(ciphertext, password).plaintext


class VigenereCipher:
    """
    Vigenère cipher bound to one password.

    The password is normalized once here, so a bad password fails at
    construction instead of on first use. The object carries no state
    between calls; encrypt/decrypt are safe to share across threads.
    """

    def __init__(self, password: str):
        self._keyword = normalize_keyword(password)

    @property
    def keyword(self) -> str:
        return self._keyword

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Non-alpha characters pass through."""
        return encrypt(plaintext, self._keyword)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext string."""
        return decrypt(ciphertext, self._keyword)

    def __repr__(self):
        return f"VigenereCipher(keyword_length={len(self._keyword)})"


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')

    print(f"\n{'═'*60}")
    print("Vigenère self-test")
    print(f"{'═'*60}")

    ct = encrypt("ATTACKATDAWN", "LEMON")
    print(f"ATTACKATDAWN / LEMON -> {ct}")
    assert ct == "LXFOPVEFRNHR"
    assert decrypt(ct, "LEMON") == "ATTACKATDAWN"

    ct = encrypt("Hello, World!", "k3e-y!")
    print(f"Hello, World! / k3e-y! -> {ct}")
    assert ct == "RIJVS, UYVJN!"
    assert decrypt(ct, "KEY") == "HELLO, WORLD!"

    try:
        encrypt("HELLO", "123")
    except InvalidKeyword as e:
        print(f"Rejected password '123': {e}")

    print(f"{'═'*60}")
    print("All checks: PASSED")
    print(f"{'═'*60}\n")
