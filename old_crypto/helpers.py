"""
Helpers — key preparation shared by the ciphers
================================================
Numeric keys (rank sequences), alphabet condensing and the keyword
columnar shuffle used to mix checkerboard alphabets, plus the
traditional 5-figure group formatting of ciphertext.
"""

from typing import List, Union


def rank(key: Union[str, bytes]) -> List[int]:
    """
    Rank every character of `key` by its position in a stable sort.

    Equal characters keep their left-to-right order, so
    rank("AAAAA") == [0, 1, 2, 3, 4] and
    rank("ARABESQUE") == [0, 6, 1, 2, 3, 7, 5, 8, 4].
    """
    order = sorted(range(len(key)), key=lambda pos: (key[pos], pos))
    ranks = [0] * len(key)
    for r, pos in enumerate(order):
        ranks[pos] = r
    return ranks


# Historical name for the same thing.
to_numeric = rank


def condense(text: str) -> str:
    """Drop repeated characters, keeping the first occurrence of each."""
    seen = set()
    out = []
    for ch in text:
        if ch not in seen:
            seen.add(ch)
            out.append(ch)
    return "".join(out)


def shuffle(key: str, alphabet: str) -> str:
    """
    Keyword columnar shuffle of `alphabet`.

    The condensed key is prepended to the alphabet, then characters are
    pulled out at strides of i*j for each column i (right to left) and
    row j, which spreads neighbouring letters apart:

        shuffle("ARABESQUE", "ABCDEFGHIJKLMNOPQRSTUVWXYZ/-")
            -> "ACKVRDLWBFMXEGNYSHOZQIP/UJT-"

    Characters of `key` that are not in `alphabet` stay in the result;
    callers filter them if needed.
    """
    word = list(condense(key + alphabet))
    length = len(condense(key))
    if length == 0:
        return "".join(word)

    height = -(-len(alphabet) // length)

    res = []
    for i in range(length - 1, -1, -1):
        for j in range(height + 1):
            if len(word) <= height - 1:
                res.extend(word)
                return "".join(res)
            if i * j < len(word):
                res.append(word.pop(i * j))
    return "".join(res)


def by_n(text: str, n: int) -> str:
    """Insert a space every `n` characters."""
    return " ".join(text[i:i + n] for i in range(0, len(text), n))


def output_as_block(text: str) -> str:
    return by_n(text, 5)


def fix_double(text: str, fill: str) -> str:
    """Break doubled letters with `fill`: AAB -> AQAB."""
    out = []
    prev = None
    for ch in text:
        if ch == prev:
            out.append(fill)
        out.append(ch)
        prev = ch
    return "".join(out)
