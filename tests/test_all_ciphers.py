"""
old_crypto — Helpers, Checkerboard, Transpositions, Nihilist
============================================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_ciphers.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from old_crypto.helpers                   import rank, to_numeric, condense, shuffle, by_n, output_as_block, fix_double
from old_crypto.ciphers.straddling        import StraddlingCheckerboard, ALPHABET_TXT
from old_crypto.ciphers.transposition     import Transposition, IrregularTransposition
from old_crypto.nihilist                  import Nihilist
from old_crypto.exceptions                import KeyValidationError, UnmappableCharacter, TruncatedCode

LONG_PT = "ATTACKATDAWNATPOINT42X23XSENDMOREMUNITIONSBYNIGHTX123"

# ── Helpers ──────────────────────────────────────────────────────────────────
def test_rank_ties_keep_position():
    assert rank("AAAAA") == [0, 1, 2, 3, 4]

def test_rank_distinct_is_inverse_permutation():
    assert rank("DACB") == [3, 0, 2, 1]

def test_rank_empty():
    assert rank("") == []

@pytest.mark.parametrize("key,expected", [
    ("ARABESQUE",       [0, 6, 1, 2, 3, 7, 5, 8, 4]),
    ("PJRJJJJJJS",      [7, 0, 8, 1, 2, 3, 4, 5, 6, 9]),
    ("AAABRAACADAABRA", [0, 1, 2, 9, 13, 3, 4, 11, 5, 12, 6, 7, 10, 14, 8]),
])
def test_to_numeric(key, expected):
    assert to_numeric(key) == expected
    assert rank(key.encode()) == expected

@pytest.mark.parametrize("text,expected", [
    ("ABCDE", "ABCDE"),
    ("AAAAA", "A"),
    ("ARABESQUE", "ARBESQU"),
    ("ARABESQUEABCDEFGHIKLMNOPQRSTUVWXYZ", "ARBESQUCDFGHIKLMNOPTVWXYZ"),
    ("PLAYFAIREXMABCDEFGHIKLMNOPQRSTUVWXYZ", "PLAYFIREXMBCDGHKNOQSTUVWZ"),
])
def test_condense(text, expected):
    assert condense(text) == expected

def test_shuffle_regular_rectangle():
    assert shuffle("ARABESQUE", ALPHABET_TXT) == "ACKVRDLWBFMXEGNYSHOZQIP/UJT-"

def test_shuffle_irregular_rectangle():
    assert shuffle("SUBWAY", ALPHABET_TXT) == "SCIOXUDJPZBEKQ/WFLR-AGMTYHNV"

def test_by_n_and_blocks():
    assert by_n("PJRJJJJJJS", 4) == "PJRJ JJJJ JS"
    assert output_as_block("AAABRAACADAABRA") == "AAABR AACAD AABRA"
    assert output_as_block("ABCDEF") == "ABCDE F"

def test_fix_double():
    assert fix_double("ABCDEF", "Q") == "ABCDEF"
    assert fix_double("AAAAA", "Q") == "AQAQAQAQA"

# ── Straddling checkerboard ─────────────────────────────────────────────────
SC_VECTORS = [
    ("ARABESQUE", "89", "ATTACKAT2AM",      "0770808107972297088"),
    ("ARABESQUE", "36", "ATTACKAT2AM",      "0990303109672267038"),
    ("ARABESQUE", "37", "IFYOUCANREADTHIS", "6377173830041203397265"),
    ("ARABESQUE", "89", "ATTACK",           "07708081"),
    ("SUBWAY",    "89", "TOLKIEN",          "6819388137"),
    ("PORTABLE",  "89", "RETRIBUTION",      "1721693526840"),
]

def test_straddling_table():
    c = StraddlingCheckerboard("ARABESQUE", "89")
    assert c.full == "ACKVRDLWBFMXEGNYSHOZQIP/UJT-"
    assert c.prefix == "89"
    codes = c.codes
    assert codes["V"] == "82"
    assert codes["K"] == "81"
    assert codes["A"] == "0"
    assert codes["E"] == "2"
    assert len(codes) == len(ALPHABET_TXT)
    assert len(set(codes.values())) == len(codes)

@pytest.mark.parametrize("key,prefix", [
    ("ARABESQUE", ""),
    ("", "89"),
    ("ARABESQUE", "8"),
    ("ARABESQUE", "88"),
    ("ARABESQUE", "8A"),
])
def test_straddling_bad_keys(key, prefix):
    with pytest.raises(KeyValidationError):
        StraddlingCheckerboard(key, prefix)

@pytest.mark.parametrize("key,prefix,pt,ct", SC_VECTORS)
def test_straddling_encrypt(key, prefix, pt, ct):
    assert StraddlingCheckerboard(key, prefix).encrypt(pt) == ct.encode()

@pytest.mark.parametrize("key,prefix,pt,ct", SC_VECTORS)
def test_straddling_decrypt(key, prefix, pt, ct):
    assert StraddlingCheckerboard(key, prefix).decrypt(ct) == pt.encode()

def test_straddling_block_size():
    assert StraddlingCheckerboard("ARABESQUE", "89").block_size() == 9

def test_straddling_drops_unmapped():
    c = StraddlingCheckerboard("ARABESQUE", "89")
    assert c.encrypt("ATTACK AT") == c.encrypt("ATTACKAT")

def test_straddling_strict_unmapped():
    c = StraddlingCheckerboard("ARABESQUE", "89", strict=True)
    with pytest.raises(UnmappableCharacter) as exc:
        c.encrypt("ATTACK AT")
    assert exc.value.position == 6
    assert exc.value.char == ord(" ")

def test_straddling_truncated_code():
    assert StraddlingCheckerboard("ARABESQUE", "89").decrypt("0770808") == b"ATTAC"
    strict = StraddlingCheckerboard("ARABESQUE", "89", strict=True)
    with pytest.raises(TruncatedCode) as exc:
        strict.decrypt("0770808")
    assert exc.value.position == 6

def test_straddling_digit_escape_roundtrip():
    c = StraddlingCheckerboard("SUBWAY", "26")
    pt = b"RV0AT1800AND9PM"
    assert c.decrypt(c.encrypt(pt)) == pt

def test_straddling_ignores_separators():
    c = StraddlingCheckerboard("ARABESQUE", "89")
    assert c.decrypt("0770 8081") == b"ATTACK"

# ── Regular transposition ───────────────────────────────────────────────────
TP_VECTORS = [
    ("ARABESQUE", "AATNIITN2MIHAAXOOTCT2RNXDNENNAOXMB2TW4DTGKP3ES1TISUY3", LONG_PT),
    ("SUBWAY",    "CWI2DUNG3TDP2EEIN1AAATXOIBTTTT4SRTYXAAOXNMOI2KNN3MNSH", LONG_PT),
    ("PORTABLE",  "CA2DIN3KTXMTITO3ROHAP2OIGTANSMSXADIXENTTWTEUB1AN4NNY2", LONG_PT),
    ("SUBWAY",    "AFDFADAGAAAAVVVVGFGVGGGX", "AVAGAGAVDFFGAVAGDGAVGVFX"),
    ("ZEBRAS",    "EVLNACDTESEAROFODEECWIREE", "WEAREDISCOVEREDFLEEATONCE"),
]

def test_transposition_new():
    c = Transposition("ABCDE")
    assert c.key == "ABCDE"
    assert c.tkey == [0, 1, 2, 3, 4]
    assert c.block_size() == 5

def test_transposition_empty_key():
    with pytest.raises(KeyValidationError):
        Transposition("")

@pytest.mark.parametrize("key,ct,pt", TP_VECTORS)
def test_transposition_encrypt(key, ct, pt):
    assert Transposition(key).encrypt(pt) == ct.encode()

@pytest.mark.parametrize("key,ct,pt", TP_VECTORS)
def test_transposition_decrypt(key, ct, pt):
    assert Transposition(key).decrypt(ct) == pt.encode()

def test_transposition_empty_input():
    assert Transposition("SUBWAY").encrypt(b"") == b""
    assert Transposition("SUBWAY").decrypt(b"") == b""

# ── Irregular transposition ─────────────────────────────────────────────────
def test_irregular_triangular_mask():
    c = IrregularTransposition("94735236270398134")
    assert c.anchors == (10, 14)
    for col in range(10, 17):
        assert c.is_triangular(0, col), f"row 0 col {col}"
    for col in range(10):
        assert not c.is_triangular(0, col), f"row 0 col {col}"
    for col in range(11, 17):
        assert c.is_triangular(1, col), f"row 1 col {col}"
    assert not c.is_triangular(1, 10)
    assert not c.is_triangular(0, 17)

def test_irregular_encrypt_two_rows():
    # plain cells: AB / CDE, triangles: FGHI / JKL
    c = IrregularTransposition("SUBWAY")
    assert c.encrypt("ABCDEFGHIJKL") == b"HKFEACBDGJIL"
    assert c.decrypt("HKFEACBDGJIL") == b"ABCDEFGHIJKL"

def test_irregular_short_message_spills_into_triangle():
    c = IrregularTransposition("SUBWAY")
    assert c.encrypt("ABCD") == b"CABD"
    assert c.decrypt("CABD") == b"ABCD"

@pytest.mark.parametrize("key", ["SUBWAY", "94735236270398134", "1204339669"])
@pytest.mark.parametrize("length", [1, 7, 17, 30, len(LONG_PT)])
def test_irregular_roundtrip(key, length):
    c = IrregularTransposition(key)
    pt = LONG_PT[:length].encode()
    ct = c.encrypt(pt)
    assert len(ct) == len(pt)
    assert sorted(ct) == sorted(pt)
    assert c.decrypt(ct) == pt

def test_irregular_bad_keys():
    with pytest.raises(KeyValidationError):
        IrregularTransposition("")
    with pytest.raises(KeyValidationError):
        IrregularTransposition("A")

# ── Nihilist ────────────────────────────────────────────────────────────────
def test_nihilist_new():
    assert Nihilist("ARABESQUE", "SUBWAY", "37").block_size() == 6

def test_nihilist_bad_keys():
    with pytest.raises(ValueError):
        Nihilist("PORTABLE", "", "89")
    with pytest.raises(ValueError):
        Nihilist("", "SUBWAY", "62")

def test_nihilist_encrypt_decrypt():
    c = Nihilist("ARABESQUE", "SUBWAY", "37")
    assert c.encrypt("IFYOUCANREADTHIS") == b"1037306631738227035749"
    assert c.decrypt("1037306631738227035749") == b"IFYOUCANREADTHIS"

# ── Buffer contract ─────────────────────────────────────────────────────────
def test_encrypt_into_buffer():
    c = Nihilist("ARABESQUE", "SUBWAY", "37")
    pt = b"IFYOUCANREADTHIS"
    buf = bytearray(c.max_output_size(len(pt)))
    n = c.encrypt_into(buf, pt)
    assert bytes(buf[:n]) == b"1037306631738227035749"
    out = bytearray(n)
    assert c.decrypt_into(out, bytes(buf[:n])) == len(pt)
    assert bytes(out[:len(pt)]) == pt

def test_encrypt_into_too_small():
    c = Transposition("SUBWAY")
    with pytest.raises(ValueError):
        c.encrypt_into(bytearray(3), b"ABCDEF")

# ── run directly ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
