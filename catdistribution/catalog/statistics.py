"""Summary numbers shown under the cat list."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .filtering import AGE_GROUPS
from .schemas import Cat, CatStatistics


def compute_statistics(cats: Sequence[Cat]) -> CatStatistics:
    if not cats:
        return CatStatistics(
            age_groups={name: 0 for name in AGE_GROUPS if name != "all"},
        )

    ages = np.array([c.age for c in cats], dtype=np.int64)
    weights = np.array([c.weight for c in cats if c.weight is not None], dtype=np.float64)

    age_groups = {}
    for name, (low, high) in AGE_GROUPS.items():
        if name == "all":
            continue
        age_groups[name] = int(np.count_nonzero((ages >= low) & (ages <= high)))

    genders = {"M": 0, "F": 0, "unknown": 0}
    for cat in cats:
        genders[cat.gender or "unknown"] += 1

    return CatStatistics(
        count=len(cats),
        mean_age=round(float(np.mean(ages)), 2),
        median_age=float(np.median(ages)),
        min_age=int(ages.min()),
        max_age=int(ages.max()),
        mean_weight=round(float(np.mean(weights)), 2) if weights.size else None,
        age_groups=age_groups,
        genders=genders,
    )
