import random
import string
from collections.abc import Sequence


class SyntheticDataGenerator:
    """Random ids, prices and picks for quote generation.

    Pass a seeded ``random.Random`` to make output reproducible.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def option_id(self) -> str:
        """Two uppercase letters, ``#``, two digits, e.g. ``AB#56``."""
        letters = "".join(self._rng.choices(string.ascii_uppercase, k=2))
        digits = "".join(self._rng.choices(string.digits, k=2))
        return f"{letters}#{digits}"

    def random_float(self) -> float:
        return self._rng.random()

    def choice(self, values: Sequence[str]) -> str:
        return self._rng.choice(values)
