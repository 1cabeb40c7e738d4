import pytest

from src.guests.phone import mask_phone_for_display, normalize_phone


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("11987654321", "11987654321"),
        ("(11) 98765-4321", "11987654321"),
        ("+55 11 98765 4321", "5511987654321"),
        ("  555.010.0199  ", "5550100199"),
        ("  no digits  ", "no digits"),
    ],
)
def test_normalize_phone(raw, expected):
    assert normalize_phone(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("(11) 98765-4321", "(11) ****-4321"),
        ("1133334444", "(11) ****-4444"),
        ("+55 11 98765 4321", "****-4321"),
        (None, None),
        ("", None),
    ],
)
def test_mask_phone_for_display(raw, expected):
    assert mask_phone_for_display(raw) == expected
