import json
from decimal import Decimal

import pytest

from src.gifts.catalog import CatalogError, load_catalog, parse_catalog


def test_load_catalog(tmp_path):
    path = tmp_path / "gifts.json"
    path.write_text(
        json.dumps(
            [
                {
                    "name": "Cookware Set",
                    "event": "wedding-ceremony",
                    "price": "349.90",
                    "external_link": "https://shop.example/cookware",
                },
                {"name": "Bath Towels", "event": "bridal-shower", "price": 89.5, "position": 7},
            ]
        )
    )

    gifts = load_catalog(path)

    assert [gift.name for gift in gifts] == ["Cookware Set", "Bath Towels"]
    assert gifts[0].price == Decimal("349.90")
    assert gifts[0].external_link == "https://shop.example/cookware"
    assert gifts[0].position == 0
    assert gifts[1].price == Decimal("89.5")
    assert gifts[1].position == 7


def test_load_malformed_catalog_file(tmp_path):
    path = tmp_path / "gifts.json"
    path.write_text('[{"name": "Cookware", "event": "wedding-ceremony",]')

    with pytest.raises(CatalogError):
        load_catalog(path)


@pytest.mark.parametrize(
    "entries",
    [
        {"name": "Cookware Set", "event": "wedding-ceremony"},
        ["Cookware Set"],
        [{"event": "wedding-ceremony"}],
        [{"name": "Cookware Set", "event": "rehearsal-dinner"}],
        [{"name": "Cookware Set", "event": "wedding-ceremony", "price": "-10"}],
        [{"name": "Cookware Set", "event": "wedding-ceremony", "price": "lots"}],
    ],
)
def test_parse_catalog_rejects_bad_entries(entries):
    with pytest.raises(CatalogError, match="Invalid gift catalog"):
        parse_catalog(json.dumps(entries))


def test_parse_catalog_rejects_whole_catalog_on_one_bad_entry():
    entries = [
        {"name": "Cookware Set", "event": "wedding-ceremony"},
        {"name": "Bath Towels", "event": "wedding-ceremony", "price": "-1"},
    ]

    with pytest.raises(CatalogError, match="price"):
        parse_catalog(json.dumps(entries))
