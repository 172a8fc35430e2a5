import pytest

from ledger.domain import LedgerEntry
from ledger.parser import parse_amount, parse_csv, split_csv_line

HEADER = "Date,Party,Type,No,Debit,Credit,Balance"


def test_parse_basic_rows_in_order():
    text = (
        HEADER + "\n"
        "2024-01-01,Acme,Sales,V1,100,0,100\n"
        "2024-01-02,Acme,Sales,V2,0,50,50"
    )
    entries = parse_csv(text)

    assert entries == (
        LedgerEntry("2024-01-01", "Acme", "Sales", "V1", 100.0, 0.0, 100.0),
        LedgerEntry("2024-01-02", "Acme", "Sales", "V2", 0.0, 50.0, 50.0),
    )


def test_short_row_is_dropped():
    assert parse_csv(HEADER + "\n2024-01-01,Bob,Sales") == ()


def test_header_is_first_non_blank_line():
    text = "\n   \n" + HEADER + "\n\n2024-01-01,Acme,Sales,V1,1,2,3\n  \n"
    entries = parse_csv(text)
    assert len(entries) == 1
    assert entries[0].party_name == "Acme"


def test_header_only_and_empty_input():
    assert parse_csv("") == ()
    assert parse_csv("   \n\n") == ()
    assert parse_csv(HEADER) == ()


@pytest.mark.parametrize("bad", [None, 42, b"bytes"])
def test_non_text_input_gives_empty_result(bad):
    assert parse_csv(bad) == ()


def test_quoted_party_name_keeps_commas_and_drops_quotes():
    text = HEADER + '\n2024-01-01,"Sharma, Gupta & Co",Sales,V9,"1,234.56",0,"1,234.56"'
    (entry,) = parse_csv(text)

    assert entry.party_name == "Sharma, Gupta & Co"
    assert entry.debit == 1234.56
    assert entry.balance == 1234.56


def test_balance_column_is_optional():
    (entry,) = parse_csv(HEADER + "\n2024-01-01,Acme,Sales,V1,10,5")
    assert entry.balance == 0.0
    assert entry.debit == 10.0
    assert entry.credit == 5.0


def test_missing_values_use_defaults():
    (entry,) = parse_csv(HEADER + "\n,,,,,,")
    assert entry == LedgerEntry(
        date="", party_name="Unknown", voucher_type="", voucher_no="",
        debit=0.0, credit=0.0, balance=0.0,
    )


def test_windows_line_endings_are_trimmed():
    text = HEADER + "\r\n2024-01-01,Acme,Sales,V1,10,5,5\r\n"
    (entry,) = parse_csv(text)
    assert entry.balance == 5.0


def test_extra_columns_are_ignored():
    (entry,) = parse_csv(HEADER + "\n2024-01-01,Acme,Sales,V1,1,2,3,note,more")
    assert (entry.debit, entry.credit, entry.balance) == (1.0, 2.0, 3.0)


def test_split_csv_line():
    assert split_csv_line('a, "b,c" ,d') == ["a", "b,c", "d"]
    assert split_csv_line('say ""hi""') == ["say hi"]
    assert split_csv_line("") == [""]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1234.56", 1234.56),
        ("(500)", 500.0),
        ("₹1,234.56", 1234.56),
        ("-75.5", -75.5),
        ("1.2.3", 1.2),
        ("12-5", 12.0),
        (".5", 0.5),
        ("-", 0.0),
        ("--5", 0.0),
        ("abc", 0.0),
        ("", 0.0),
        (None, 0.0),
        ("-0", 0.0),
    ],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected


def test_never_raises_on_garbage():
    garbage = '"unterminated,quote\n,,,\n\x00\x01,"",,,,,\n' + "x" * 1000
    result = parse_csv(garbage)
    assert isinstance(result, tuple)
