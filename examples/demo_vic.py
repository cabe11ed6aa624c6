"""
old_crypto — Live Demo: the VIC cipher, stage by stage
======================================================
Run:  python examples/demo_vic.py

Uses the key material from Häyhänen's reference example and prints
the derived keys, every intermediate digit stream and the final
5-figure groups.
"""

import sys, os, time, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from old_crypto         import VicCipher, Nihilist
from old_crypto.helpers import output_as_block
from old_crypto.vic     import render

LINE = "═" * 70
MSG  = ("WEAREPLEASEDTOHEAROFYOURSUCCESSINESTABLISHINGYOURFALSEIDENTITY"
        "YOUWILLBESENTSOMEMONEYTOCOVEREXPENSESWITHINAMONTH")


def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)


def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")


def main():
    print(f"\n{LINE}")
    print("  old_crypto — VIC Cipher Demo")
    print(LINE)
    print(f"  Message: {MSG[:48]}...\n")

    # ── key schedule ─────────────────────────────────────────────────────────
    header("KEY SCHEDULE")
    t0 = time.perf_counter()
    vic = VicCipher("89", "741776", "IDREAMOFJEANNIEWITHT", "77651")
    elapsed = time.perf_counter() - t0
    ok("Transposition key A", render(vic.keys.transposition_key_a))
    ok("Transposition key B", render(vic.keys.transposition_key_b))
    ok("Checkerboard key",    render(vic.keys.checkerboard_key))
    ok("Derived in",          f"{elapsed*1000:.2f} ms")

    # ── stages ───────────────────────────────────────────────────────────────
    header("ENCIPHERMENT")
    sc = vic.checkerboard
    ok("Checkerboard", " ".join(f"{ch}={code}" for ch, code in sc.codes.items()))
    digits = sc.encrypt(MSG)
    ok("After checkerboard", f"{len(digits)} digits")
    print(f"     {output_as_block(digits.decode())}")
    first = vic.first_transposition.encrypt(digits)
    ok("After transposition A")
    print(f"     {output_as_block(first.decode())}")
    ct = vic.second_transposition.encrypt(first)
    ok("After transposition B (ciphertext)")
    print(f"     {output_as_block(ct.decode())}")

    # ── round trip ───────────────────────────────────────────────────────────
    header("DECIPHERMENT")
    pt = vic.decrypt(ct)
    ok("Decrypted", pt.decode()[:48] + "...")
    ok("Round-trip", "match" if pt == MSG.encode() else "MISMATCH")

    # ── Nihilist, the ancestor ───────────────────────────────────────────────
    header("NIHILIST (checkerboard + one transposition)")
    nh = Nihilist("ARABESQUE", "SUBWAY", "37")
    ct = nh.encrypt("IFYOUCANREADTHIS")
    ok("Encrypted", output_as_block(ct.decode()))
    ok("Decrypted", nh.decrypt(ct).decode())

    print(f"\n{LINE}\n")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')
    main()
