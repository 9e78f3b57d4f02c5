"""Small text helpers used to display the score."""


def nbr_to_str(nb: int) -> str:
    """Return the decimal text of an integer, with a leading '-' when negative."""
    if isinstance(nb, bool) or not isinstance(nb, int):
        raise TypeError(f"expected an int, got {type(nb).__name__}")
    if nb == 0:
        return "0"
    sign = "-" if nb < 0 else ""
    value = abs(nb)
    digits = []
    while value > 0:
        value, digit = divmod(value, 10)
        digits.append(chr(ord("0") + digit))
    return sign + revstr("".join(digits))


def revstr(s: str) -> str:
    """Return the string reversed."""
    return s[::-1]