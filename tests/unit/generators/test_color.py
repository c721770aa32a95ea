"""Test cases for the color generator."""

import re
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from minifaker import MiniFaker
from minifaker.generators.color import color


@pytest.fixture
def faker() -> MiniFaker:
    return MiniFaker(seed=8)


class TestColor:
    """Test cases for color."""

    def test_format(self, faker: MiniFaker) -> None:
        for _ in range(50):
            assert re.fullmatch(r"#[0-9a-f]{6}", color(faker))

    def test_fixed_channels(self, faker: MiniFaker) -> None:
        assert color(faker, r=255, g=16, b=1) == "#ff1001"

    def test_zero_is_honored(self, faker: MiniFaker) -> None:
        """A fixed 0 is not mistaken for an unset channel."""
        assert color(faker, r=0, g=0, b=0) == "#000000"

    def test_partial_fixed_channel(self, faker: MiniFaker) -> None:
        for _ in range(20):
            result = color(faker, r=1)
            assert result.startswith("#01")
            assert len(result) == 7

    @pytest.mark.parametrize("value", [-1, 256])
    def test_out_of_range(self, faker: MiniFaker, value: int) -> None:
        with pytest.raises(ValidationError):
            color(faker, g=value)

    def test_channels_drawn_uniformly(self, faker: MiniFaker) -> None:
        """Unset channels come from a uniform draw over all 256 values."""
        with patch.object(faker.random, "integer", return_value=255) as mock_integer:
            assert color(faker, g=0) == "#ff00ff"

        assert mock_integer.call_count == 2
        mock_integer.assert_called_with(256)
