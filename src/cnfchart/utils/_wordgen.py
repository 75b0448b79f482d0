from __future__ import annotations

import random

char_pool = ("a", "b")

def random_word(length: int, alphabet=char_pool, rng: random.Random = None) -> str:
    rng = rng or random.Random()
    return "".join(rng.choice(alphabet) for _ in range(length))

def palindrome_word(length: int, alphabet=char_pool, rng: random.Random = None) -> str:
    """Returns s + reverse(s) for a random s of the given length."""
    s = random_word(length, alphabet, rng)
    return s + s[::-1]

def valid_words(count: int, min_length: int = 3, max_length: int = 10,
        alphabet=char_pool, seed: int = None) -> list[str]:
    rng = random.Random(seed)
    return [palindrome_word(rng.randrange(min_length, max_length), alphabet, rng)
        for _ in range(count)]

def invalid_words(count: int, min_length: int = 3, max_length: int = 10,
        alphabet=char_pool, seed: int = None, suffix: str = "a") -> list[str]:
    return [word + suffix for word in valid_words(count, min_length, max_length, alphabet, seed)]
