"""
classical_ciphers — Live Demo: All Seven Tiers
==============================================
Run:  python examples/demo_all_ciphers.py [-v]

Shows every tier encrypting and decrypting the same message, with the
most common letters before and after so you can see which ciphers hide
the plaintext's frequency profile and which ones don't.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from classical_ciphers          import get_cipher
from classical_ciphers.analysis import compare_frequencies
from classical_ciphers.errors   import CipherError

LINE = "═" * 70
MSG  = "Defend the east wall of the castle at dawn."

TIERS = [
    (1, "SHIFT — Caesar",               "caesar",   "3"),
    (2, "SUBSTITUTION — Monoalphabetic", "mono",     "QWERTYUIOPASDFGHJKLZXCVBNM"),
    (3, "POLYALPHABETIC — Vigenère",     "vigenere", "FORTIFICATION"),
    (4, "DIGRAPH — Playfair",            "playfair", "PLAYFAIR EXAMPLE"),
    (5, "LINEAR ALGEBRA — Hill 2×2",     "hill",     "3,3,2,5"),
    (6, "PERFECT SECRECY — One-Time Pad", "otp",     "XMCKLQWPZNVBTRUEHSYDGAOIFJKMXLCEPR"),
    (7, "TRANSPOSITION — Rail Fence",    "rail",     "3"),
]

def header(tier, name):
    print(f"\n{LINE}")
    print(f"  Tier {tier} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def top_letters(counts):
    return " ".join(f"{c.letter}={c.count}" for c in counts)


if __name__ == "__main__":
    level = logging.DEBUG if "-v" in sys.argv[1:] else logging.INFO
    logging.basicConfig(level=level, format=' %(name)s: %(message)s')

    print(f"\n{LINE}")
    print("  classical_ciphers — Seven-Tier Demo")
    print(LINE)
    print(f"  Message: {MSG}\n")

    failed = 0
    for tier, title, name, key in TIERS:
        header(tier, title)
        try:
            cipher = get_cipher(name, key)
            ct = cipher.encode(MSG)
            pt = cipher.decode(ct)
        except CipherError as e:
            print(f"  ✗  {e}")
            failed += 1
            continue
        freq = compare_frequencies(MSG, ct, top=4)
        ok("Key",       key)
        ok("Encrypted", ct)
        ok("Decrypted", pt)
        ok("Top letters in ", top_letters(freq.input))
        ok("Top letters out", top_letters(freq.output))

    print(f"\n{LINE}")
    print(f"  {len(TIERS) - failed} tiers OK  |  {failed} failed")
    print(LINE + "\n")
    sys.exit(0 if failed == 0 else 1)
