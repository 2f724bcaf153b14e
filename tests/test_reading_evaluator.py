import math

import pytest

from sr_calculation import config, createHitObjects
from sr_calculation.reading_evaluator import calculateObjectDensity, evaluateDifficultyOf, lowSV


def note_at(effectiveBPM, deltaTime=150):
    hitObjects = createHitObjects([0, deltaTime], [effectiveBPM, effectiveBPM])
    return hitObjects[1]


def test_high_sv_bonus_is_half_at_window_center():
    assert evaluateDifficultyOf(note_at(560)) == 0.5


def test_high_sv_bonus_rises_through_window():
    values = [evaluateDifficultyOf(note_at(bpm)) for bpm in [200, 480, 520, 560, 600, 640, 900]]
    assert values == sorted(values)
    assert values[0] < 0.01
    assert values[-1] > 0.99
    assert all(0 < v < 1 for v in values)


def test_high_sv_bonus_ignores_delta_time():
    assert evaluateDifficultyOf(note_at(600, deltaTime=50)) == evaluateDifficultyOf(note_at(600, deltaTime=500))


def test_high_sv_bonus_saturates_for_malformed_bpm():
    assert evaluateDifficultyOf(note_at(-1e6)) == 0.0
    assert evaluateDifficultyOf(note_at(1e6)) == 1.0


def test_high_sv_multiplier_is_read_from_config(monkeypatch):
    monkeypatch.setattr(config, "highSvMultiplier", 2.0)
    assert evaluateDifficultyOf(note_at(560)) == 1.0


def test_object_density_matches_formula():
    note = note_at(180, deltaTime=120)
    threshold = 50 / (1 + math.exp(-(120 - 200) / 300))
    expected = 1 - 1 / (1 + math.exp(-(180 - threshold) / 240))
    assert calculateObjectDensity(note) == pytest.approx(expected)


def test_object_density_falls_as_bpm_rises():
    densities = [calculateObjectDensity(note_at(bpm)) for bpm in [60, 120, 240, 480]]
    assert densities == sorted(densities, reverse=True)
    assert all(0 < d < 1 for d in densities)


def test_low_sv_is_zero_at_or_above_cap():
    assert lowSV(note_at(150)) == 0
    assert lowSV(note_at(400)) == 0


def test_low_sv_matches_formula():
    note = note_at(75, deltaTime=400)
    density = calculateObjectDensity(note)
    bonus = min(math.sqrt(75 / 150), 0.57)
    value = 200 * 1 / 75 - 150 * 1.33
    adjusted = (value / 75 * 3) / (1.5 / density)
    assert lowSV(note) == pytest.approx(adjusted * bonus * 0.9)


def test_low_sv_handles_non_positive_bpm():
    for bpm in [0, -10]:
        value = lowSV(note_at(bpm))
        assert math.isfinite(value)


def test_low_sv_keeps_small_positive_bpm():
    note = note_at(0.5, deltaTime=400)
    density = calculateObjectDensity(note)
    bonus = min(math.sqrt(149.5 / 150), 0.57)
    value = 200 / 0.5 - 150 * 1.33
    expected = (value / 0.5 * 3) / (1.5 / density) * bonus * 0.9
    assert lowSV(note) == pytest.approx(expected)
    assert lowSV(note) != pytest.approx(lowSV(note_at(1.0, deltaTime=400)))
