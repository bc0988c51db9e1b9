"""
playfair_crypto — Live Demo: Key Square + Digraph Cipher
========================================================
Run:  python examples/demo_playfair.py

Walks the textbook example: builds the square, shows the digested
pairs, then encodes and decodes, with timing printed for each step.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playfair_crypto import CipherEngine, KeySquare, ConfigError

LINE   = "═" * 70
PHRASE = "PLAYFAIREXAMPLE"
MSG    = "Hide the gold in the tree stump"

def header(step, name):
    print(f"\n{LINE}")
    print(f"  Step {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=" %(message)s")

print(f"\n{LINE}")
print("  playfair_crypto — Playfair Cipher Demo")
print(LINE)
print(f"  Phrase:  {PHRASE}")
print(f"  Message: {MSG}\n")

# ── KEY SQUARE ───────────────────────────────────────────────────────────────
header(1, "KEY SQUARE")
t0     = time.perf_counter()
square = KeySquare(PHRASE)
elapsed = time.perf_counter() - t0
for row in str(square).splitlines():
    print(f"     {row}")
ok("Fingerprint", square.fingerprint()[:32] + "...")
ok("Built",       f"{elapsed*1000:.3f} ms")

# ── DIGEST ───────────────────────────────────────────────────────────────────
header(2, "DIGEST — normalize, split doubles, pad")
engine = CipherEngine(square)
pairs  = engine.digest(MSG)
ok("Pairs", " ".join(a + b for a, b in pairs))

# ── ENCODE / DECODE ──────────────────────────────────────────────────────────
header(3, "ENCODE / DECODE")
t0 = time.perf_counter()
ct = engine.encode()
pt = engine.decrypt(ct)
elapsed = time.perf_counter() - t0
ok("Encoded",    ct)
ok("Decoded",    pt)
ok("Round-trip", f"{elapsed*1000:.3f} ms")

# ── BAD PHRASE ───────────────────────────────────────────────────────────────
header(4, "INVALID PHRASE")
try:
    KeySquare("PLAY-FAIR 2024")
except ConfigError as e:
    ok("Rejected", str(e))

print(f"\n{LINE}")
print("  Playfair is a classical cipher: fine for puzzles, not for secrets.")
print(LINE + "\n")
