"""
Tests for the Present/Absent patch values, date helpers and snapshot rendering
"""
from datetime import date

import pytest

from freshstock.domain.base import enforce_max_length
from freshstock.domain.buyer import Buyer, BuyerPatch
from freshstock.domain.dates import normalize_date, parse_date
from freshstock.domain.optional import ABSENT, Present, is_present, merge_present, present_fields
from freshstock.domain.product import Product
from freshstock.errors import FieldTooLong


def test_absent_is_a_falsy_singleton():
    assert not ABSENT
    assert type(ABSENT)() is ABSENT
    assert repr(ABSENT) == 'ABSENT'


def test_present_wraps_falsy_values():
    assert is_present(Present(0))
    assert is_present(Present(''))
    assert not is_present(ABSENT)


def test_present_fields_only_lists_sent_values():
    patch = BuyerPatch(first_name=Present('Ana'), last_name=Present(''))

    assert present_fields(patch) == {'first_name': 'Ana', 'last_name': ''}


def test_merge_present_leaves_input_untouched():
    current = Buyer(1, '001', 'Juan', 'Perez')

    merged = merge_present(current, BuyerPatch(card_number_id=Present('009')))

    assert merged == Buyer(1, '009', 'Juan', 'Perez')
    assert current.card_number_id == '001'


def test_parse_date():
    assert parse_date('2030-01-31') == date(2030, 1, 31)
    assert normalize_date('2030-1-5') == '2030-01-05'


@pytest.mark.parametrize('value', ['2030-02-30', '31-01-2030', ' 2030-01-01', '2030-01-01 ', '', None, 20300131])
def test_parse_date_rejects(value):
    with pytest.raises(ValueError):
        parse_date(value)


def test_product_omits_unset_seller():
    product = Product(1, 'Peas', 1, 1, 1.0, 1.0, 1.0, 'P', -18.0, 1.0, 1)

    assert 'seller_id' not in product.to_dict()
    assert product.field_names()[0] == 'id'


def test_enforce_max_length():
    enforce_max_length(Buyer(1, '12345', 'a', 'b'), {'card_number_id': 5})

    with pytest.raises(FieldTooLong):
        enforce_max_length(Buyer(1, '123456', 'a', 'b'), {'card_number_id': 5})
