LAKH = 100_000


def format_lakh(amount: float) -> str:
    """150000 -> "₹1.5L"."""
    return f"₹{amount / LAKH:.1f}L"


def group_indian(digits: str) -> str:
    """Group an integer digit string the en-IN way: 1234567 -> 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount: float) -> str:
    """Magnitude of amount with en-IN grouping and at most 3 decimals."""
    text = f"{abs(amount):.3f}".rstrip("0").rstrip(".")
    whole, _, frac = text.partition(".")
    grouped = group_indian(whole)
    return f"{grouped}.{frac}" if frac else grouped


def balance_tone(amount: float) -> str:
    return "positive" if amount >= 0 else "negative"
