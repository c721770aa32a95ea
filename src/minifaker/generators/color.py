"""Color generator."""

from typing import TYPE_CHECKING, Optional

from minifaker.generators.schemas import ColorOptions

if TYPE_CHECKING:
    from minifaker.faker import MiniFaker


def color(
    faker: "MiniFaker",
    *,
    r: Optional[int] = None,
    g: Optional[int] = None,
    b: Optional[int] = None,
) -> str:
    """
    Build a ``#rrggbb`` color.

    Each channel is the supplied value (0 included) or a fresh draw in
    0-255.

    Raises:
        pydantic.ValidationError: If a supplied channel is outside 0-255.
    """
    options = ColorOptions(r=r, g=g, b=b)
    channels = (
        value if value is not None else faker.random.integer(256)
        for value in (options.r, options.g, options.b)
    )
    return "#" + "".join(f"{channel:02x}" for channel in channels)
