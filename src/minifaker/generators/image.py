"""Placeholder image URL builders.

These only build strings; nothing is fetched.
"""

from typing import Optional, Union
from urllib.parse import quote_plus

from minifaker.generators.schemas import (
    PlaceholderOptions,
    PlaceImgCategory,
    PlaceImgFilter,
    PlaceImgOptions,
)

PLACEIMG_BASE_URL = "https://placeimg.com"
PLACEHOLDER_BASE_URL = "https://via.placeholder.com"


def image_url_from_placeimg(
    width: int,
    height: int,
    category: Union[PlaceImgCategory, str] = PlaceImgCategory.ANY,
    filter: Optional[Union[PlaceImgFilter, str]] = None,
) -> str:
    """
    Build a placeimg.com URL.

    Returns:
        ``https://placeimg.com/{width}/{height}/{category}[/{filter}]``.
    """
    options = PlaceImgOptions(
        width=width, height=height, category=category, filter=filter
    )
    url = (
        f"{PLACEIMG_BASE_URL}/{options.width}/{options.height}/"
        f"{options.category.value}"
    )
    if options.filter is not None:
        url += f"/{options.filter.value}"
    return url


def image_url_from_placeholder(
    width: int,
    height: Optional[int] = None,
    back_color: Optional[str] = None,
    text_color: Optional[str] = None,
    text_value: Optional[str] = None,
) -> str:
    """
    Build a via.placeholder.com URL.

    Returns:
        ``https://via.placeholder.com/{w}[x{h}][/{back}][/{text}][?text=...]``,
        with the text query value URL-quoted.
    """
    options = PlaceholderOptions(
        width=width,
        height=height,
        back_color=back_color,
        text_color=text_color,
        text_value=text_value,
    )
    url = f"{PLACEHOLDER_BASE_URL}/{options.width}"
    if options.height:
        url += f"x{options.height}"
    if options.back_color:
        url += f"/{options.back_color}"
    if options.text_color:
        url += f"/{options.text_color}"
    if options.text_value:
        url += f"?text={quote_plus(options.text_value)}"
    return url
