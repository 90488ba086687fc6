"""
Greeting and motivational quote selection.

Both take their clock or random source as an argument so the header
can be reproduced exactly in tests.
"""
import random
from datetime import datetime
from typing import Optional, Sequence

MOTIVATIONAL_QUOTES = (
    "The only bad workout is the one that didn't happen.",
    "Push harder than yesterday if you want a different tomorrow.",
    "Success starts with self-discipline.",
    "Your body can stand almost anything. It's your mind you have to convince.",
    "Don't stop when you're tired. Stop when you're done.",
)


def time_based_greeting(now: Optional[datetime] = None) -> str:
    """Morning before noon, afternoon before 17:00, evening after."""
    hour = (now or datetime.now()).hour
    if hour < 12:
        return "Good morning"
    if hour < 17:
        return "Good afternoon"
    return "Good evening"


def pick_quote(
    rng: Optional[random.Random] = None,
    quotes: Sequence[str] = MOTIVATIONAL_QUOTES,
) -> str:
    """
    Pick a motivational quote.

    Args:
        rng: Random source; a fresh unseeded one is used when omitted
        quotes: Pool to pick from

    Raises:
        ValueError: If the pool is empty
    """
    if not quotes:
        raise ValueError("Quote pool is empty")
    rng = rng or random.Random()
    return quotes[rng.randrange(len(quotes))]
