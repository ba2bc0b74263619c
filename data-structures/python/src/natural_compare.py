"""Natural order string comparison.

Runs of digits compare by numeric value, so "item2" sorts before "item10".
Runs that start with a zero are treated as fractional parts and compared
left-aligned, so "1.010" sorts before "1.02". Whitespace is skipped.
"""

_SPACES = " \t\n\v\f\r"


def _char_at(s: str, index: int) -> str:
    # "" plays the part of the terminator and is smaller than any character
    return s[index] if index < len(s) else ""


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_space(c: str) -> bool:
    return c != "" and c in _SPACES


def _compare_right(a: str, ai: int, b: str, bi: int) -> int:
    """Compare two right-aligned numbers.

    The longest run of digits wins. Equal lengths are decided by the first
    differing digit, remembered in bias until both runs end.
    """
    bias = 0
    while True:
        ca = _char_at(a, ai)
        cb = _char_at(b, bi)
        a_digit = _is_digit(ca)
        b_digit = _is_digit(cb)
        if not a_digit and not b_digit:
            return bias
        if not a_digit:
            return -1
        if not b_digit:
            return 1
        if ca < cb:
            if not bias:
                bias = -1
        elif ca > cb:
            if not bias:
                bias = 1
        ai += 1
        bi += 1


def _compare_left(a: str, ai: int, b: str, bi: int) -> int:
    """Compare two left-aligned numbers: the first differing digit wins."""
    while True:
        ca = _char_at(a, ai)
        cb = _char_at(b, bi)
        a_digit = _is_digit(ca)
        b_digit = _is_digit(cb)
        if not a_digit and not b_digit:
            return 0
        if not a_digit:
            return -1
        if not b_digit:
            return 1
        if ca < cb:
            return -1
        if ca > cb:
            return 1
        ai += 1
        bi += 1


def _natural_compare(a: str, b: str, fold_case: bool) -> int:
    ai = 0
    bi = 0
    while True:
        ca = _char_at(a, ai)
        cb = _char_at(b, bi)

        while _is_space(ca):
            ai += 1
            ca = _char_at(a, ai)
        while _is_space(cb):
            bi += 1
            cb = _char_at(b, bi)

        if _is_digit(ca) and _is_digit(cb):
            if ca == "0" or cb == "0":
                result = _compare_left(a, ai, b, bi)
            else:
                result = _compare_right(a, ai, b, bi)
            if result:
                return result

        if not ca and not cb:
            return 0

        if fold_case:
            ca = ca.upper()
            cb = cb.upper()
        if ca < cb:
            return -1
        if ca > cb:
            return 1
        ai += 1
        bi += 1


def strnatcmp(a: str, b: str) -> int:
    """Return -1, 0 or 1 as a sorts before, equal to, or after b."""
    return _natural_compare(a, b, fold_case=False)


def strnatcasecmp(a: str, b: str) -> int:
    """Case-insensitive variant of strnatcmp."""
    return _natural_compare(a, b, fold_case=True)
