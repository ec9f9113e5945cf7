"""Request token (``tk``) the Google Translate web endpoints require.

A keyed hash over the UTF-8 bytes of the text. The arithmetic follows the
web client's JavaScript, so intermediate values wrap to 32-bit integers.
"""

DEFAULT_TKK = "406398.2087938574"

_MIX_ROUND = "+-a^+6"
_MIX_FINAL = "+-3^+b+-f"


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _mix(value: int, ops: str) -> int:
    for i in range(0, len(ops) - 2, 3):
        digit = ops[i + 2]
        shift = ord(digit) - 87 if digit >= "a" else int(digit)
        if ops[i + 1] == "+":
            mixed = (value & 0xFFFFFFFF) >> shift
        else:
            mixed = _int32(value << shift)
        value = _int32(value + mixed) if ops[i] == "+" else _int32(value ^ mixed)
    return value


def parse_tkk(tkk: str) -> tuple[int, int]:
    """Split a ``"<high>.<low>"`` key into its two integers."""
    high, _, low = tkk.partition(".")
    if not high.isdigit() or not low.isdigit():
        raise ValueError(f"Malformed TKK value: {tkk!r}")
    return int(high), int(low)


def tk(text: str, tkk: str = DEFAULT_TKK) -> str:
    """Compute the ``tk`` query parameter for ``text``."""
    high, low = parse_tkk(tkk)

    # Lone surrogates are hashed the way the browser encodes them
    value = high
    for byte in text.encode("utf-8", "surrogatepass"):
        value = _mix(value + byte, _MIX_ROUND)
    value = _mix(value, _MIX_FINAL)
    value = _int32(value ^ low)
    if value < 0:
        value = (value & 0x7FFFFFFF) + 0x80000000
    value %= 1_000_000
    return f"{value}.{value ^ high}"
