"""Word generator."""

from typing import TYPE_CHECKING, Callable, Optional, Union

from minifaker.generators.schemas import WordType

if TYPE_CHECKING:
    from minifaker.faker import MiniFaker


def word(
    faker: "MiniFaker",
    *,
    locale: Optional[str] = None,
    word_type: Optional[Union[WordType, str]] = None,
    predicate: Optional[Callable[[str], bool]] = None,
) -> str:
    """
    Pick a word of the given part of speech.

    Args:
        faker: Owning instance.
        locale: Locale to draw from.
        word_type: Part of speech; drawn from ``WordType`` when omitted.
            The field key is the plural, e.g. ``"nouns"``.
        predicate: Optional filter applied to the candidate words first.

    Raises:
        EmptyInputError: If ``predicate`` rejects every word.
    """
    if word_type is None:
        chosen = faker.random.array_element(list(WordType))
    else:
        chosen = WordType(word_type)
    words = faker.get_locale_data(f"{chosen.value}s", locale=locale)
    if predicate is not None:
        words = [w for w in words if predicate(w)]
    return faker.random.array_element(words)
