"""Pronounceable document key generation.

Keys alternate consonants and vowels so that generated URLs can be read
aloud: a vowel at every position where index % 3 == 1, a consonant elsewhere,
with a separator between groups of six letters (e.g. "bakdeh-liru").

The randomness is NOT cryptographic. Keys are for readability and must never
be used for access control.
"""

import logging
import random
from typing import Optional

from ...observability.metrics import key_collisions_total
from .errors import KeyExhaustionError
from .ports import DocumentStorePort

logger = logging.getLogger(__name__)

CONSONANTS = "bcdfghjklmnpqrstvwxyz"
VOWELS = "aeiou"

MIN_KEY_LENGTH = 6
MAX_KEY_ATTEMPTS = 10
GROUP_SIZE = 6
SEPARATOR = "-"


def effective_length(length: int) -> int:
    """Clamp requested key length to MIN_KEY_LENGTH

    Example:
        >>> effective_length(3)
        6
        >>> effective_length(10)
        10
    """
    return max(length, MIN_KEY_LENGTH)


def generate_key(length: int, rng: Optional[random.Random] = None) -> str:
    """Generate a pronounceable key of `length` letters (at least 6)

    Args:
        length: Requested number of letters
        rng: Random source (module-level random if omitted)

    Returns:
        Key with a separator between each group of six letters
    """
    rng = rng or random
    letters = []
    for i in range(effective_length(length)):
        if i and i % GROUP_SIZE == 0:
            letters.append(SEPARATOR)
        letters.append(rng.choice(VOWELS if i % 3 == 1 else CONSONANTS))
    return "".join(letters)


class KeyGenerator:
    """Generates keys that do not collide with stored documents.

    Args:
        store: Document store used for the collision check
        rng: Random source, injectable for deterministic tests
        max_attempts: Candidates tried before giving up
    """

    def __init__(
        self,
        store: DocumentStorePort,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_KEY_ATTEMPTS,
    ):
        self.store = store
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

    def generate(self, length: int) -> str:
        return generate_key(length, self.rng)

    def generate_unique(self, length: int) -> str:
        """Generate a key not present in the store.

        Raises:
            KeyExhaustionError: If every attempt collided
            StoreUnavailableError: If the collision check fails
        """
        for attempt in range(1, self.max_attempts + 1):
            key = self.generate(length)
            if not self.store.exists(key):
                return key

            key_collisions_total.inc()
            logger.debug(
                f"Key collision on attempt {attempt}",
                extra={"document_key": key, "attempt": attempt},
            )

        logger.error(
            f"Key space exhausted after {self.max_attempts} attempts",
            extra={"key_length": length},
        )
        raise KeyExhaustionError(self.max_attempts)
