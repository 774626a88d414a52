"""
vigenere_crypto — Live Demo
===========================
Run:  python examples/demo_vigenere.py

Walks through the tabula recta, the reference vectors, keyword
normalization and the per-letter keystream, with timing.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_crypto import (
    SHIFT_TABLE, InvalidKeyword, VigenereCipher,
    decrypt, encrypt, encrypt_with_details, keystream, normalize_keyword,
)

LINE = "═" * 70
MSG  = "Attack at dawn! Hold the bridge until noon."

def header(step, name):
    print(f"\n{LINE}")
    print(f"  {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=' %(message)s')

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  vigenere_crypto — Demo")
print(LINE)
print(f"  Message: {MSG}\n")

# ── TABLE ────────────────────────────────────────────────────────────────────
header(1, "TABULA RECTA")
for r in (0, 1, 2, 25):
    print(f"  row {r:>2}  {SHIFT_TABLE[r]}")
ok("Rows", str(len(SHIFT_TABLE)))

# ── REFERENCE VECTOR ─────────────────────────────────────────────────────────
header(2, "REFERENCE VECTOR — ATTACKATDAWN / LEMON")
ct = encrypt("ATTACKATDAWN", "LEMON")
pt = decrypt(ct, "LEMON")
ok("Encrypted", ct)
ok("Decrypted", pt)
ok("Matches LXFOPVEFRNHR", str(ct == "LXFOPVEFRNHR"))

# ── KEYWORD NORMALIZATION ────────────────────────────────────────────────────
header(3, "KEYWORD NORMALIZATION")
for pw in ("Key", "k e y", "k3e-y!", "Lemon Tree 42"):
    ok(f"{pw!r:<18} ->", normalize_keyword(pw))
try:
    normalize_keyword("123")
except InvalidKeyword as e:
    ok("'123' rejected", str(e))

# ── FULL MESSAGE ─────────────────────────────────────────────────────────────
header(4, "FULL MESSAGE — punctuation passes through")
t0  = time.perf_counter()
res = encrypt_with_details(MSG, "Lemon Tree 42")
pt  = decrypt(res.ciphertext, "Lemon Tree 42")
elapsed = time.perf_counter() - t0
ok("Keyword",    res.keyword)
ok("Plaintext",  res.plaintext)
ok("Ciphertext", res.ciphertext)
ok("Decrypted",  pt)
ok("Round-trip", f"{elapsed*1000:.3f} ms")

# ── KEYSTREAM ────────────────────────────────────────────────────────────────
header(5, "KEYSTREAM — cursor only advances on letters")
text = "HI, YOU"
ok(f"{text!r} / 'AB'", str(keystream(text, "AB")))

# ── KEYED OBJECT ─────────────────────────────────────────────────────────────
header(6, "KEYED CIPHER OBJECT")
v  = VigenereCipher("CIPHER")
ct = v.encrypt(MSG)
ok("Cipher",    repr(v))
ok("Encrypted", ct)
ok("Decrypted", v.decrypt(ct))

# ── LARGE INPUT ──────────────────────────────────────────────────────────────
header(7, "THROUGHPUT")
big = MSG * 2000
t0  = time.perf_counter()
ct  = v.encrypt(big)
assert v.decrypt(ct) == big.upper()
elapsed = time.perf_counter() - t0
ok("Input",      f"{len(big):,} chars")
ok("Round-trip", f"{elapsed*1000:.0f} ms")

print(f"\n{LINE}")
print("  DEMO COMPLETE — Vigenère is historical, not secure.")
print(LINE + "\n")
