"""Random selection primitives shared by every field generator."""

import math
import random
from collections.abc import Mapping, Sequence
from typing import Any, Callable, List, NamedTuple, Optional, TypeVar, Union

from minifaker.errors import EmptyInputError, NotAnObjectError

T = TypeVar("T")


class ObjectElement(NamedTuple):
    """A key/value pair picked from a mapping."""

    key: Any
    value: Any


class RandomSource:
    """Seedable source of the bounded random draws used by generators.

    Each instance wraps its own ``random.Random``, so two sources seeded
    with the same value produce the same sequence of draws.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def seed(self, value: Optional[int] = None) -> None:
        """Reseed the underlying generator."""
        self._random.seed(value)

    def number(
        self,
        min_value: float = 0,
        max_value: float = 1,
        floating: bool = False,
    ) -> Union[int, float]:
        """
        Draw a number uniformly from ``[min_value, max_value]``.

        Args:
            min_value: Lower bound (default: 0).
            max_value: Upper bound (default: 1).
            floating: Return the raw fractional value instead of rounding
                half up to an ``int`` (default: False).

        Returns:
            The drawn value. ``min_value > max_value`` simply inverts the
            range.
        """
        value = min_value + self._random.random() * (max_value - min_value)
        if not floating:
            return int(math.floor(value + 0.5))
        return value

    def integer(self, upper: int) -> int:
        """Draw an int uniformly from ``[0, upper)``."""
        return self._random.randrange(upper)

    def boolean(self) -> bool:
        return bool(self.number(max_value=1))

    def array_element(self, seq: Sequence[T]) -> T:
        """
        Pick one element of ``seq`` uniformly at random.

        Raises:
            EmptyInputError: If ``seq`` is empty.
        """
        if len(seq) == 0:
            raise EmptyInputError()
        return seq[self._random.randrange(len(seq))]

    def array(self, count: int, fn: Callable[[int], T]) -> List[T]:
        """Build ``[fn(0), ..., fn(count - 1)]``, calling ``fn`` in index order."""
        return [fn(index) for index in range(count)]

    def object_element(self, mapping: Mapping) -> ObjectElement:
        """
        Pick one key of ``mapping`` uniformly and return it with its value.

        Raises:
            NotAnObjectError: If ``mapping`` is not a key/value mapping.
                Sequences are rejected.
            EmptyInputError: If ``mapping`` has no keys.
        """
        if not isinstance(mapping, Mapping):
            raise NotAnObjectError(mapping)
        key = self.array_element(list(mapping.keys()))
        return ObjectElement(key=key, value=mapping[key])
