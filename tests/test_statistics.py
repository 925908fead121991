from catdistribution.catalog.statistics import compute_statistics


def test_statistics_over_collection(cats):
    stats = compute_statistics(cats)
    assert stats.count == 5
    assert stats.mean_age == 5.2
    assert stats.median_age == 5.0
    assert stats.min_age == 1
    assert stats.max_age == 12
    # Tomasina has no weight recorded
    assert stats.mean_weight == round((2.9 + 5.4 + 4.1 + 7.8) / 4, 2)
    assert stats.age_groups == {"kittens": 1, "adults": 3, "seniors": 1}
    assert stats.genders == {"M": 2, "F": 2, "unknown": 1}


def test_statistics_empty():
    stats = compute_statistics([])
    assert stats.count == 0
    assert stats.mean_weight is None
    assert stats.age_groups == {"kittens": 0, "adults": 0, "seniors": 0}
