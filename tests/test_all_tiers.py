"""
classical_ciphers — Seven-Tier Test Suite
=========================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_tiers.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import tracemalloc

import pytest
from classical_ciphers.alphabet                import normalize
from classical_ciphers.errors                  import (
    CipherError, EmptyKey, InvalidKeyAlphabet, InvalidKeyLength,
    InvalidNumericKey, InvalidRailCount, KeyTooShort, MalformedKey,
    NonInvertibleKey, NonNumericKey,
)
from classical_ciphers.tiers.tier1_caesar         import CaesarCipher
from classical_ciphers.tiers.tier2_monoalphabetic import MonoalphabeticCipher
from classical_ciphers.tiers.tier3_vigenere       import VigenereCipher
from classical_ciphers.tiers.tier4_playfair       import PlayfairCipher, prepare_plaintext
from classical_ciphers.tiers.tier5_hill           import HillCipher, parse_key
from classical_ciphers.tiers.tier6_onetimepad     import OneTimePad
from classical_ciphers.tiers.tier7_railfence      import RailFenceCipher, zigzag
from classical_ciphers.tiers                      import (
    tier1_caesar, tier2_monoalphabetic, tier7_railfence,
)

MSG   = "Meet me at the Old Mill, 9pm -- bring the map!"
ALPHA = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
QWERTY = "QWERTYUIOPASDFGHJKLZXCVBNM"

# ── Tier 1 ────────────────────────────────────────────────────────────────────
def test_tier1_caesar_known_vector():
    assert CaesarCipher(3).encode("HELLO") == "KHOOR"

def test_tier1_caesar_preserves_case_and_punctuation():
    assert CaesarCipher(3).encode("Hello, World!") == "Khoor, Zruog!"

@pytest.mark.parametrize("shift", [0, 26, -26, 52])
def test_tier1_caesar_identity_shifts(shift):
    assert CaesarCipher(shift).encode(MSG) == MSG

def test_tier1_caesar_negative_shift_normalized():
    c = CaesarCipher(-1)
    assert c.shift == 25
    assert c.encode("abc") == "zab"

def test_tier1_caesar_decode_is_negated_encode():
    assert CaesarCipher(5).decode("Mjqqt") == CaesarCipher(-5).encode("Mjqqt") == "Hello"

def test_tier1_caesar_numeric_text_key():
    assert tier1_caesar.encode("xyz", " 3 ") == "abc"

def test_tier1_caesar_non_numeric_key():
    with pytest.raises(InvalidNumericKey):
        CaesarCipher("three")

# ── Tier 2 ────────────────────────────────────────────────────────────────────
def test_tier2_mono_known_vector():
    assert MonoalphabeticCipher(QWERTY).encode("Hello!") == "Itssg!"

def test_tier2_mono_identity_key():
    assert MonoalphabeticCipher(ALPHA).encode(MSG) == MSG
    assert MonoalphabeticCipher(ALPHA.lower()).encode(MSG) == MSG

def test_tier2_mono_short_key():
    with pytest.raises(InvalidKeyLength):
        MonoalphabeticCipher(ALPHA[:25])

def test_tier2_mono_duplicate_letters():
    with pytest.raises(InvalidKeyAlphabet):
        MonoalphabeticCipher("A" + ALPHA[:25]).encode("HELLO")

def test_tier2_mono_non_letter_in_key():
    with pytest.raises(InvalidKeyAlphabet):
        tier2_monoalphabetic.encode("HELLO", ALPHA[:25] + "1")

def test_tier2_mono_key_letter_that_uppercases_to_two():
    # "ß".upper() == "SS": 26 characters, but S appears twice and T never
    key = ALPHA.replace("S", "ß")
    with pytest.raises(InvalidKeyAlphabet):
        MonoalphabeticCipher(key).encode("ST")

def test_tier2_mono_decode_passes_unknown_letters_through():
    key = ALPHA[:25] + "1"           # no Z in the key
    assert tier2_monoalphabetic.decode("Z", key) == "Z"
    assert tier2_monoalphabetic.decode("Lazy", key) == "Lazy"

def test_tier2_mono_decode_first_occurrence_wins():
    # A appears at positions 0 and 1; ciphertext A decodes to plaintext A
    assert MonoalphabeticCipher("A" + ALPHA[:25]).decode("ab") == "ac"

def test_tier2_mono_missing_key():
    with pytest.raises(InvalidKeyLength):
        MonoalphabeticCipher(None)

def test_tier2_mono_case_insensitive_key():
    assert MonoalphabeticCipher(QWERTY.lower()).encode("Hello") == "Itssg"

# ── Tier 3 ────────────────────────────────────────────────────────────────────
def test_tier3_vigenere_known_vector():
    assert VigenereCipher("LEMON").encode("ATTACKATDAWN") == "LXFOPVEFRNHR"

def test_tier3_vigenere_non_letters_do_not_consume_key():
    v = VigenereCipher("LEMON")
    assert v.encode("Attack at dawn!") == "Lxfopv ef rnhr!"
    assert v.decode("Lxfopv ef rnhr!") == "Attack at dawn!"

def test_tier3_vigenere_key_letters_only():
    assert VigenereCipher("le-mon 42").encode("ATTACKATDAWN") == "LXFOPVEFRNHR"

@pytest.mark.parametrize("key", ["", "   ", "1234", None])
def test_tier3_vigenere_empty_key(key):
    with pytest.raises(EmptyKey):
        VigenereCipher(key)

def test_tier3_vigenere_single_letter_key_is_caesar():
    assert VigenereCipher("D").encode(MSG) == CaesarCipher(3).encode(MSG)

# ── Tier 4 ────────────────────────────────────────────────────────────────────
def test_tier4_playfair_grid():
    p = PlayfairCipher("MONARCHY")
    assert p.grid == ("MONAR", "CHYBD", "EFGIK", "LPQST", "UVWXZ")

def test_tier4_playfair_doubled_letter_filler():
    pairs = prepare_plaintext("HELLO")
    assert pairs == ["HE", "LX", "LO"]
    assert PlayfairCipher("MONARCHY").encode("HELLO") == "CFSUPM"

def test_tier4_playfair_odd_tail_padded():
    assert prepare_plaintext("ABC") == ["AB", "CX"]

def test_tier4_playfair_j_folds_into_i():
    assert prepare_plaintext("jam") == ["IA", "MX"]
    assert "J" not in "".join(PlayfairCipher("JUMP").grid)

@pytest.mark.parametrize("pair,expected", [
    ("MO", "ON"),   # same row
    ("AR", "RM"),   # same row, wraps
    ("MC", "CE"),   # same column
    ("LU", "UM"),   # same column, wraps
    ("HE", "CF"),   # rectangle
])
def test_tier4_playfair_pair_rules(pair, expected):
    p = PlayfairCipher("MONARCHY")
    assert p.encode(pair) == expected
    assert p.decode(expected) == pair

def test_tier4_playfair_decode_keeps_filler():
    assert PlayfairCipher("MONARCHY").decode("CFSUPM") == "HELXLO"

def test_tier4_playfair_decode_drops_trailing_letter():
    p = PlayfairCipher("MONARCHY")
    assert p.decode("CFSUPMA") == "HELXLO"

@pytest.mark.parametrize("key", ["", "   ", "123"])
def test_tier4_playfair_empty_key(key):
    with pytest.raises(EmptyKey):
        PlayfairCipher(key)

# ── Tier 5 ────────────────────────────────────────────────────────────────────
def test_tier5_hill_known_vector():
    assert HillCipher("3,3,2,5").encode("HELP") == "HIAT"
    assert HillCipher("3,3,2,5").decode("HIAT") == "HELP"

def test_tier5_hill_inverse_matrix():
    assert HillCipher("3, 3, 2, 5").inverse == ((15, 17), (20, 9))

def test_tier5_hill_odd_tail_padded_with_x():
    h = HillCipher("3,3,2,5")
    assert h.encode("HEL") == "HIYH"
    assert h.decode("HIYH") == "HELX"

def test_tier5_hill_decode_drops_trailing_letter():
    assert HillCipher("3,3,2,5").decode("HIATQ") == "HELP"

def test_tier5_hill_negative_entries():
    h = HillCipher([-3, 3, 2, 5])
    assert h.decode(h.encode("SHORTMESSAGE")) == "SHORTMESSAGE"

@pytest.mark.parametrize("key", ["2,4,6,8", "1,0,0,13", "13,0,0,1"])
def test_tier5_hill_non_invertible(key):
    with pytest.raises(NonInvertibleKey):
        HillCipher(key).encode("HELP")
    with pytest.raises(NonInvertibleKey):
        HillCipher(key).decode("HELP")

def test_tier5_hill_malformed_key():
    with pytest.raises(MalformedKey):
        parse_key("1,2,3")
    with pytest.raises(MalformedKey):
        parse_key("1,2,3,4,5")

def test_tier5_hill_non_numeric_key():
    with pytest.raises(NonNumericKey):
        parse_key("1,2,x,4")

# ── Tier 6 ────────────────────────────────────────────────────────────────────
def test_tier6_otp_roundtrip():
    pad = OneTimePad("XMCKL")
    ct = pad.encode("HELLO")
    assert ct == "EQNVZ"
    assert pad.decode(ct) == "HELLO"

def test_tier6_otp_normalizes_text_and_key():
    pad = OneTimePad("xm-ck l")
    assert pad.encode("He llo!") == "EQNVZ"

def test_tier6_otp_longer_key_allowed():
    assert OneTimePad("XMCKLABCDEF").encode("HELLO") == "EQNVZ"

def test_tier6_otp_key_too_short():
    with pytest.raises(KeyTooShort):
        OneTimePad("XMCK").encode("HELLO")
    with pytest.raises(KeyTooShort):
        OneTimePad("XMCK").decode("EQNVZ")

def test_tier6_otp_empty_key():
    with pytest.raises(EmptyKey):
        OneTimePad("")

# ── Tier 7 ────────────────────────────────────────────────────────────────────
def test_tier7_rail_known_vector():
    r = RailFenceCipher(3)
    assert r.encode("WEAREDISCOVEREDFLEEATONCE") == "WECRLTEERDSOEEFEAOCAIVDEN"
    assert r.decode("WECRLTEERDSOEEFEAOCAIVDEN") == "WEAREDISCOVEREDFLEEATONCE"

def test_tier7_rail_zigzag_pattern():
    assert zigzag(7, 3) == [0, 1, 2, 1, 0, 1, 2]
    assert zigzag(5, 2) == [0, 1, 0, 1, 0]

def test_tier7_rail_strips_whitespace_keeps_punctuation():
    r = RailFenceCipher(2)
    ct = r.encode("Hi, Bob!")
    assert " " not in ct
    assert r.decode(ct) == "Hi,Bob!"

@pytest.mark.parametrize("rails", [1, 0, -4])
def test_tier7_rail_invalid_rail_count(rails):
    with pytest.raises(InvalidRailCount):
        RailFenceCipher(rails)

def test_tier7_rail_more_rails_than_text():
    r = RailFenceCipher(10)
    assert r.encode("ABC") == "ABC"
    assert r.decode("ABC") == "ABC"

def test_tier7_rail_huge_rail_count_stays_small():
    r = RailFenceCipher(5_000_000)
    tracemalloc.start()
    try:
        assert r.encode("") == ""
        assert r.decode("") == ""
        assert r.encode("HELLO") == "HELLO"
        assert r.decode("HELLO") == "HELLO"
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    assert peak < 1_000_000

def test_tier7_rail_text_key():
    assert tier7_railfence.decode(tier7_railfence.encode(MSG, "4"), "4") == "".join(MSG.split())
    with pytest.raises(InvalidNumericKey):
        RailFenceCipher("four")

# ── Cross-tier properties ────────────────────────────────────────────────────
PRESERVING = [
    (CaesarCipher,         7),
    (MonoalphabeticCipher, QWERTY),
    (VigenereCipher,       "LEMON"),
]
LETTERS_ONLY = [
    (OneTimePad,  "QWERTYUIOPASDFGHJKLZXCVBNMQWERTYUIOPASDFGHJKLZXCVBNM"),
    (HillCipher,  "3,3,2,5"),
]

@pytest.mark.parametrize("cls,key", PRESERVING)
def test_roundtrip_preserving(cls, key):
    c = cls(key)
    assert c.decode(c.encode(MSG)) == MSG

@pytest.mark.parametrize("cls,key", LETTERS_ONLY)
def test_roundtrip_letters_only(cls, key):
    c = cls(key)
    text = "Meet me at the old mill"   # even letter count, no J
    assert c.decode(c.encode(text)) == normalize(text)

def test_roundtrip_playfair_without_doubles():
    p = PlayfairCipher("PLAYFAIR EXAMPLE")
    text = "hide the gold in the tree stump"
    assert p.decode(p.encode("The quick brown fox")) == "THEQUICKBROWNFOX"
    # "ee" in "tree" gets split by the filler
    assert p.decode(p.encode(text)) == "HIDETHEGOLDINTHETREXESTUMP"

@pytest.mark.parametrize("cls,key", PRESERVING + LETTERS_ONLY + [
    (PlayfairCipher,  "MONARCHY"),
    (RailFenceCipher, 3),
])
def test_empty_text(cls, key):
    c = cls(key)
    assert c.encode("") == ""
    assert c.decode("") == ""

def test_errors_are_value_errors():
    assert issubclass(CipherError, ValueError)
    with pytest.raises(ValueError):
        RailFenceCipher(1)

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
