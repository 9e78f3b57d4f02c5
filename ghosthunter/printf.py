"""A minimal printf supporting %d, %i, %c, %s and %%."""

import sys
from typing import Any, Callable, Dict, Optional, TextIO


def _format_int(value: Any) -> str:
    return str(int(value))


def _format_char(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return chr(value)
    text = str(value)
    if len(text) != 1:
        raise ValueError(f"%c expects a single character, got {text!r}")
    return text


def _format_str(value: Any) -> str:
    return str(value)


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "d": _format_int,
    "c": _format_char,
    "s": _format_str,
    "i": _format_int,
}


def mini_printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write ``fmt`` with its conversions filled from ``args`` to ``stream``.

    Unknown conversions are dropped silently. The return value counts only the
    literal characters written (including those produced by ``%%``).
    """
    out = sys.stdout if stream is None else stream
    values = iter(args)
    chars = iter(fmt)
    count = 0
    for ch in chars:
        if ch != "%":
            out.write(ch)
            count += 1
            continue
        spec = next(chars, None)
        if spec == "%":
            out.write("%")
            count += 1
            continue
        handler = _CONVERSIONS.get(spec) if spec is not None else None
        if handler is None:
            continue
        try:
            value = next(values)
        except StopIteration:
            raise ValueError(f"not enough arguments for format {fmt!r}") from None
        out.write(handler(value))
    return count