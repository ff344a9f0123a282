import pytest

from courier_dispatch import config
from courier_dispatch.pricing import OfferCatalog
from courier_dispatch.utils import format_hours, round_half_up

OFFERS_YAML = """
offers:
  - code: SUMMER
    discount: 15
    min_distance: 0
    max_distance: 100
    min_weight: 1
    max_weight: 50
  - code: OFR001
    discount: 10
    min_distance: 0
    max_distance: 200
    min_weight: 70
    max_weight: 200
"""


def test_load_offer_table(tmp_path):
    path = tmp_path / "offers.yaml"
    path.write_text(OFFERS_YAML)

    catalog = OfferCatalog.from_yaml(str(path))

    assert len(catalog) == 2
    assert "SUMMER" in catalog
    assert catalog.get_offer("SUMMER").discount_percent == 15
    assert [o.code for o in catalog.list_offers()] == ["OFR001", "SUMMER"]


def test_offer_table_requires_offers_list(tmp_path):
    path = tmp_path / "offers.yaml"
    path.write_text("- code: X\n")

    with pytest.raises(ValueError, match="offers"):
        config.load_offer_table(str(path))


@pytest.mark.parametrize(
    "item, message",
    [
        ({"code": "X", "discount": 10}, "missing keys"),
        (
            {"code": "X", "discount": 120, "min_distance": 0, "max_distance": 1, "min_weight": 0, "max_weight": 1},
            "between 0 and 100",
        ),
        (
            {"code": "X", "discount": 5, "min_distance": 10, "max_distance": 1, "min_weight": 0, "max_weight": 1},
            "minimum exceeds maximum",
        ),
        (
            {"code": " ", "discount": 5, "min_distance": 0, "max_distance": 1, "min_weight": 0, "max_weight": 1},
            "blank code",
        ),
        ("OFR001", "must be a mapping"),
    ],
)
def test_offers_from_dicts_rejects_bad_entries(item, message):
    with pytest.raises(ValueError, match=message):
        config.offers_from_dicts([item])


def test_default_offers():
    codes = [o.code for o in config.offers_from_dicts(config.DEFAULT_OFFERS)]
    assert codes == ["OFR001", "OFR002", "OFR003"]


@pytest.mark.parametrize(
    "value, decimals, expected",
    [(2.5, 0, 3), (104.5, 0, 105), (887.4, 0, 887), (1.785, 1, 1.8), (0.125, 2, 0.13)],
)
def test_round_half_up(value, decimals, expected):
    assert round_half_up(value, decimals) == pytest.approx(expected)


@pytest.mark.parametrize(
    "hours, expected",
    [(1.5, "1 hr 30 min"), (0.75, "45 min"), (2.0, "2 hr"), (1.9999, "2 hr")],
)
def test_format_hours(hours, expected):
    assert format_hours(hours) == expected
