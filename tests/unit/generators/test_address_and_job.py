"""Test cases for address and job generators."""

import pytest

from minifaker import MiniFaker
from minifaker.errors import MissingFieldError
from minifaker.generators import address, job


@pytest.fixture
def faker() -> MiniFaker:
    faker = MiniFaker(seed=11)
    faker.add_locale(
        "xx",
        {
            "cityPrefixes": ["North"],
            "cityNames": ["Salem"],
            "citySuffixes": ["ville"],
            "jobDescriptors": ["Lead"],
            "jobAreas": ["Data"],
            "jobTypes": ["Engineer"],
        },
    )
    faker.add_locale("yy", {"cityNames": ["Lyon"]})
    return faker


class TestCity:
    """Test cases for city generators."""

    def test_parts(self, faker: MiniFaker) -> None:
        assert address.city_prefix(faker) == "North"
        assert address.city_name(faker) == "Salem"
        assert address.city_suffix(faker) == "ville"

    def test_city_composition(self, faker: MiniFaker) -> None:
        expected = {"North Salem", "Salemville", "North Salemville"}
        results = {address.city(faker) for _ in range(100)}
        assert results == expected

    def test_city_name_explicit_locale(self, faker: MiniFaker) -> None:
        assert address.city_name(faker, locale="yy") == "Lyon"

    def test_city_requires_all_parts(self, faker: MiniFaker) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            address.city(faker, locale="yy")
        assert exc_info.value.key == "cityPrefixes"


class TestJob:
    """Test cases for job generators."""

    def test_parts(self, faker: MiniFaker) -> None:
        assert job.job_descriptor(faker) == "Lead"
        assert job.job_area(faker) == "Data"
        assert job.job_type(faker) == "Engineer"

    def test_title(self, faker: MiniFaker) -> None:
        assert job.job_title(faker) == "Lead Data Engineer"

    def test_missing_job_data(self, faker: MiniFaker) -> None:
        with pytest.raises(MissingFieldError):
            job.job_title(faker, locale="yy")
