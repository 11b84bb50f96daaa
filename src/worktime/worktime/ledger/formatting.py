from __future__ import annotations

from ..core.enums import AccountKind


def format_number(value: float) -> str:
    """Up to two decimals, trailing zeros dropped (2.0 -> '2', 0.5 -> '0.5')."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def unit_for(kind: str) -> str:
    k = AccountKind.lookup(kind)
    return k.unit if k else ""


def format_amount(kind: str, value: float) -> str:
    """Kind-specific display used on screen and in exports."""
    return format_number(value) + unit_for(kind)


def parse_amount(text: str) -> float:
    v = (text or "").strip()
    if v[-1:] in ("h", "d"):
        v = v[:-1]
    return float(v)
