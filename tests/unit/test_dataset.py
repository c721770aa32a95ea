"""Test cases for dataset generation."""

import polars as pl
import pytest

from minifaker import MiniFaker
from minifaker.dataset import (
    FIELD_GENERATORS,
    LOCALE_FREE_FIELDS,
    generate_field,
    records,
    to_frame,
)
from minifaker.errors import NoDefaultLocaleError


@pytest.fixture
def faker() -> MiniFaker:
    faker = MiniFaker(seed=4)
    faker.add_locale(
        "xx",
        {"firstNames": ["Ann", "Bob"], "lastNames": ["Lee"], "freeEmails": ["a.b"]},
    )
    faker.add_locale("yy", {"firstNames": ["Zed"]})
    return faker


class TestFieldRegistry:
    """Test cases for FIELD_GENERATORS."""

    def test_locale_free_fields_are_known(self) -> None:
        assert LOCALE_FREE_FIELDS <= set(FIELD_GENERATORS)

    def test_locale_free_fields_work_without_locale(self) -> None:
        faker = MiniFaker()
        for field in LOCALE_FREE_FIELDS:
            assert generate_field(faker, field) is not None

    def test_unknown_field(self, faker: MiniFaker) -> None:
        with pytest.raises(ValueError, match="Unknown field"):
            generate_field(faker, "shoe_size")


class TestRecords:
    """Test cases for records."""

    def test_shape(self, faker: MiniFaker) -> None:
        rows = records(faker, ["first_name", "last_name", "port"], 5)

        assert len(rows) == 5
        for row in rows:
            assert list(row) == ["first_name", "last_name", "port"]
            assert row["first_name"] in {"Ann", "Bob"}
            assert row["last_name"] == "Lee"
            assert isinstance(row["port"], int)

    def test_locale_passed_to_locale_aware_fields(self, faker: MiniFaker) -> None:
        rows = records(faker, ["first_name", "ip"], 3, locale="yy")
        assert {row["first_name"] for row in rows} == {"Zed"}

    def test_zero_rows(self, faker: MiniFaker) -> None:
        assert records(faker, ["first_name"], 0) == []

    def test_unknown_fields_checked_first(self, faker: MiniFaker) -> None:
        with pytest.raises(ValueError) as exc_info:
            records(faker, ["first_name", "nope", "also_nope"], 2)
        assert "nope, also_nope" in str(exc_info.value)

    def test_requires_locale(self) -> None:
        with pytest.raises(NoDefaultLocaleError):
            records(MiniFaker(), ["email"], 1)


class TestToFrame:
    """Test cases for to_frame."""

    def test_polars_frame(self, faker: MiniFaker) -> None:
        df = to_frame(faker, ["first_name", "email"], 4)

        assert isinstance(df, pl.DataFrame)
        assert df.columns == ["first_name", "email"]
        assert df.height == 4
        assert all("@a.b" in value for value in df["email"].to_list())

    def test_method_on_faker(self, faker: MiniFaker) -> None:
        df = faker.to_frame(["color", "mac_address"], 2)
        assert df.shape == (2, 2)
