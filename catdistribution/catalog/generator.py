"""
Random cat factory used by the generation driver.

Names come from a fixed list of popular cat names with a numeric
suffix, retried until the result is not already taken. Descriptions
mix a random personality trait with a sentence chosen by age bracket.
"""

from __future__ import annotations

import random
import uuid
from typing import Callable, Collection, Optional

from .schemas import Cat

CAT_NAMES = (
    "Oliver", "Bella", "Leo", "Lily", "Milo", "Nala", "Simba",
    "Chloe", "Max", "Lucy", "Charlie", "Willow", "Jasper", "Ruby", "Oscar",
    "Sophie", "Jack", "Stella", "Felix", "Cleo", "Loki", "Zoe", "Toby",
    "Emma", "George", "Penny", "Gus", "Rosie", "Finn", "Molly", "Tucker",
    "Daisy", "Winston", "Maggie", "Sam", "Mittens", "Louie", "Ellie", "Apollo",
    "Gracie", "Henry", "Sadie", "Buddy", "Hazel", "Mochi", "Lola", "Rocky",
)

PERSONALITY_TRAITS = (
    "playful and full of energy",
    "calm and affectionate",
    "curious about everything",
    "a little mischievous but very loving",
    "shy at first, but warms up quickly",
    "always looking for a warm lap to sit on",
    "a big talker who loves attention",
    "an independent spirit with a gentle heart",
    "a little clumsy but incredibly sweet",
    "a brave explorer who loves adventure",
)

BREEDS = (
    "Domestic Shorthair", "Maine Coon", "Siamese", "Persian", "Ragdoll",
    "British Shorthair", "Bengal", "Sphynx", "Scottish Fold", "Abyssinian",
)

DEFAULT_IMAGE = (
    "https://mymodernmet.com/wp/wp-content/uploads/archive/"
    "3SVSdXInLL8ORNm6uCsk_1065304886.jpeg"
)

MAX_AGE = 20
_NAME_ATTEMPTS = 1000


def unique_name(
    taken: Collection[str],
    rng: Optional[random.Random] = None,
) -> str:
    """Pick a name of the form ``<Name><NN>`` that is not in ``taken``.

    ``taken`` is compared case-insensitively.
    """
    rng = rng or random.Random()
    lowered = {t.lower() for t in taken}
    for _ in range(_NAME_ATTEMPTS):
        name = f"{rng.choice(CAT_NAMES)}{rng.randint(0, 99)}"
        if name.lower() not in lowered:
            return name
    # Every short name is taken; fall back to a random hex suffix.
    return f"{rng.choice(CAT_NAMES)}{uuid.uuid4().hex[:8]}"


def describe(name: str, gender: str, age: int, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    trait = rng.choice(PERSONALITY_TRAITS)
    male = gender == "M"
    pronoun = "He" if male else "She"
    text = f"{name} is a {trait} cat. "
    if age <= 2:
        text += f"{pronoun} is still very young and loves to play all day long."
    elif age <= 5:
        text += (
            f"{pronoun} enjoys both playtime and naps, making "
            f"{'him' if male else 'her'} the perfect companion."
        )
    elif age <= 10:
        text += (
            f"{pronoun} has a gentle personality and loves cuddles but also "
            f"appreciates {'his' if male else 'her'} space."
        )
    else:
        text += f"{pronoun} is a wise and relaxed cat who enjoys quiet moments and cozy spots."
    return text


def random_cat(
    taken_names: Collection[str] = (),
    rng: Optional[random.Random] = None,
) -> Cat:
    """Build a new random ``Cat`` whose name is not in ``taken_names``."""
    rng = rng or random.Random()
    name = unique_name(taken_names, rng)
    gender = "M" if rng.random() < 0.5 else "F"
    age = rng.randint(0, MAX_AGE)
    return Cat(
        id=uuid.uuid4().hex,
        name=name,
        age=age,
        breed=rng.choice(BREEDS),
        gender=gender,
        weight=round(2.5 + rng.random() * 5.5, 1),
        description=describe(name, gender, age, rng),
        image=DEFAULT_IMAGE,
    )


def factory_for(
    names: Callable[[], Collection[str]],
    rng: Optional[random.Random] = None,
) -> Callable[[], Cat]:
    """Bind ``random_cat`` to a live source of taken names."""
    return lambda: random_cat(names(), rng)
