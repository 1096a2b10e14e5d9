"""
Partial update model tests
"""

import pytest
from pydantic import ValidationError

from hotel_listing.domain.catalog import CountryUpdate, HotelUpdate


@pytest.mark.parametrize("field", ["name", "rating", "country_id"])
def test_hotel_update_rejects_null_for_required_columns(field):
    with pytest.raises(ValidationError):
        HotelUpdate(**{field: None})


def test_hotel_update_allows_null_address():
    update = HotelUpdate(address=None)
    assert update.model_dump(exclude_unset=True) == {"address": None}


def test_hotel_update_omitted_fields_stay_unset():
    assert HotelUpdate(rating=3.5).model_dump(exclude_unset=True) == {"rating": 3.5}


def test_country_update_rejects_null_name():
    with pytest.raises(ValidationError):
        CountryUpdate(name=None)

    assert CountryUpdate(short_name=None).model_dump(exclude_unset=True) == {"short_name": None}
