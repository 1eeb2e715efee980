"""Amount parsing and formatting utilities."""

from decimal import Decimal, InvalidOperation
import re

_CURRENCY = re.compile(r"^(rp\.?|idr|[$€£¥])", re.IGNORECASE)


def _finite(value: Decimal, raw) -> Decimal:
    if not value.is_finite():
        raise ValueError(f"Amount must be a finite number, got '{raw}'")
    return value


def parse_amount(amount: str | int | float | Decimal) -> Decimal:
    """Parse an amount into a Decimal.

    Handles various formats:
    - 15000, "15000", "15000.50"
    - "Rp 15.000", "Rp. 15.000,00" (Indonesian grouping)
    - "$1,234.56"
    - "-250"

    A single separator followed by exactly three digits is read as
    thousands grouping ("15.000" and "15,000" are both 15000).

    Args:
        amount: Amount as a number or string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount cannot be parsed
    """
    if isinstance(amount, bool):
        raise ValueError(f"Could not parse amount '{amount}'")
    if isinstance(amount, (int, float, Decimal)):
        return _finite(Decimal(str(amount)), amount)

    if not amount or not amount.strip():
        raise ValueError("Empty amount string")

    text = amount.strip()
    is_negative = text.startswith("-")
    if is_negative:
        text = text[1:].strip()

    text = _CURRENCY.sub("", text).strip().replace(" ", "")

    # Both separators present: the last one is the decimal mark
    if "." in text and "," in text:
        if text.rfind(",") > text.rfind("."):
            text = text.replace(".", "").replace(",", ".")
        else:
            text = text.replace(",", "")
    elif "," in text or "." in text:
        sep = "," if "," in text else "."
        head, _, tail = text.rpartition(sep)
        if len(tail) == 3 or text.count(sep) > 1:
            text = text.replace(sep, "")
        else:
            text = f"{head.replace(sep, '')}.{tail}"

    try:
        value = _finite(Decimal(text), amount)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount}'")
    return -value if is_negative else value


def format_rupiah(amount: Decimal | int) -> str:
    """Format an amount the way the dashboard shows it, e.g. 'Rp 15.000'."""
    value = Decimal(amount)
    sign = "-" if value < 0 else ""
    whole = abs(value).quantize(Decimal("1"))
    grouped = f"{whole:,}".replace(",", ".")
    return f"{sign}Rp {grouped}"
