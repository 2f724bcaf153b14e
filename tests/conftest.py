import pytest

from sr_calculation import createHitObjects, MonoStreak, AlternatingMonoPattern, RepeatingHitPatterns, EvenHitObjects, EvenPatterns


@pytest.fixture
def grouped_hit_objects():
    """
    Four notes 100ms apart at 200 BPM, coloured as two streaks of two (e.g. dd kk) in one
    alternating pattern, which repeats with interval 2.
    """
    hitObjects = createHitObjects([0, 100, 200, 300], [200] * 4)
    streaks = [MonoStreak(hitObjects[0:2]), MonoStreak(hitObjects[2:4])]
    pattern = AlternatingMonoPattern(streaks)
    RepeatingHitPatterns([pattern], repetitionInterval=2)
    return hitObjects


def make_doublet_map(previous_times=(400, 450), current_times=(600, 700, 800, 900)):
    """
    An even group at 0/200, then a short burst (previous_times), then the run being judged (current_times).
    Returns the notes and the three EvenHitObjects.
    """
    times = [0, 200] + list(previous_times) + list(current_times)
    hitObjects = createHitObjects(times, [200] * len(times))

    first = EvenHitObjects(hitObjects[0:2])
    burst = EvenHitObjects(hitObjects[2:2 + len(previous_times)], previous=first)
    run = EvenHitObjects(hitObjects[2 + len(previous_times):], previous=burst)

    EvenPatterns([first])
    EvenPatterns([burst])
    EvenPatterns([run])
    MonoStreak(hitObjects)
    return hitObjects, (first, burst, run)


@pytest.fixture
def doublet_map():
    return make_doublet_map()
