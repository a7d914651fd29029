"""
cipherkit — Live Demo: Pad + Playfair
=====================================
Run:  python examples/demo_all_ciphers.py [-v]

Walks through all six operations, including the failure results a
front end would show to the user.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cipherkit import (PadCipher, pad_encrypt, pad_decrypt, build_key_square,
                       playfair_encrypt, playfair_decrypt, locate_in_matrix)
from cipherkit.digraphs import prepare

LINE = "═" * 70
MSG  = "Attack at dawn"

def header(tier, name):
    print(f"\n{LINE}")
    print(f"  Tier {tier} — {name}")
    print(LINE)

def show(label, result):
    if result:
        print(f"  ✓  {label}: {result.value}")
    else:
        print(f"  ✗  {label}: [{result.error.name}] {result.message}")

if "-v" in sys.argv:
    logging.basicConfig(level=logging.DEBUG, format=' %(name)s: %(message)s')

# ─────────────────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  cipherkit — Pad + Playfair Demo")
print(LINE)
print(f"  Message: {MSG}")

# ── TIER 1 ───────────────────────────────────────────────────────────────────
header(1, "STREAM — Vernam pad cipher")
key = PadCipher.generate_key(len(MSG))
t0  = time.perf_counter()
ct  = pad_encrypt(MSG, key)
pt  = pad_decrypt(ct.text, key)
elapsed = time.perf_counter() - t0
print(f"  ✓  Pad (fresh): {key}")
show("Encrypted",   ct)
show("Decrypted",   pt)
print(f"  ✓  Round-trip: {elapsed*1000:.3f} ms")
show("Short key",   pad_encrypt(MSG, "HI"))
show("Bad base64",  pad_decrypt("not base64!", key))

# ── TIER 2 ───────────────────────────────────────────────────────────────────
header(2, "POLYGRAPHIC — Playfair")
square = build_key_square("MONARCHY")
print("  ✓  Keyword: MONARCHY")
for row in str(square.value).splitlines():
    print(f"       {row}")
text = "INSTRUMENTS"
print(f"  ✓  Digraphs: {' '.join(''.join(d) for d in prepare(text))}")
ct = playfair_encrypt(text, square.value)
show("Encrypted", ct)
show("Decrypted", playfair_decrypt(ct.text, square.value))
show("Locate 'H'", locate_in_matrix("H", square.value))
show("Odd length", playfair_decrypt("ABC", square.value))
show("No square",  playfair_encrypt(text, None))

# ── Summary ───────────────────────────────────────────────────────────────────
print(f"\n{LINE}")
print("  Tier 1  Vernam pad (XOR + base64)   — key at least as long as message")
print("  Tier 2  Playfair (5x5 key square)   — digraph substitution")
print(LINE + "\n")
