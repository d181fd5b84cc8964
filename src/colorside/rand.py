"""Random value helpers."""

import math
import random
import string

# Shorthand ranges accepted by Random.string
CHARSET_RANGES = {
    "a-z": string.ascii_lowercase,
    "A-Z": string.ascii_uppercase,
    "0-9": string.digits,
}


class Random:
    """Static helpers over the standard ``random`` generator."""

    @staticmethod
    def integer(low: float, high: float) -> int:
        """Return a random integer in ``[ceil(low), floor(high)]``."""
        return random.randint(math.ceil(low), math.floor(high))

    @staticmethod
    def uniform(low: float, high: float) -> float:
        """Return a random float in ``[low, high)``."""
        return random.random() * (high - low) + low

    @staticmethod
    def string(charsets: list[str], length: int) -> str:
        """Return a random string drawn from the given character sets.

        Args:
            charsets: ``"a-z"``, ``"A-Z"`` and ``"0-9"`` expand to their
                ranges; any other entry contributes its characters as-is.
            length: Number of characters to generate.

        Returns:
            The generated string.

        Raises:
            ValueError: If characters are requested from an empty pool.

        """
        pool = "".join(CHARSET_RANGES.get(charset, charset) for charset in charsets)
        if length > 0 and not pool:
            raise ValueError("Cannot build a random string from an empty character pool")
        return "".join(random.choice(pool) for _ in range(length))
