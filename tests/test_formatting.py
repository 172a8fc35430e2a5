import pytest

from ledger.formatting import balance_tone, format_inr, format_lakh, group_indian


@pytest.mark.parametrize(
    "amount, expected",
    [(150000, "₹1.5L"), (0, "₹0.0L"), (12345678, "₹123.5L"), (-250000, "₹-2.5L")],
)
def test_format_lakh(amount, expected):
    assert format_lakh(amount) == expected


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "0"),
        (100, "100"),
        (1234.56, "1,234.56"),
        (1234567.5, "12,34,567.5"),
        (-98765432.1, "9,87,65,432.1"),
        (0.1234, "0.123"),
    ],
)
def test_format_inr(amount, expected):
    assert format_inr(amount) == expected


def test_group_indian():
    assert group_indian("999") == "999"
    assert group_indian("1000") == "1,000"
    assert group_indian("100000") == "1,00,000"


def test_balance_tone():
    assert balance_tone(0) == "positive"
    assert balance_tone(5) == "positive"
    assert balance_tone(-0.01) == "negative"
