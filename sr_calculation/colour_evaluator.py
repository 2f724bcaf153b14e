# Difficulty calculation algorithm: Copyright (c) ppy Pty Ltd <contact@ppy.sh>. Licensed under the MIT Licence.
import logging

import numpy as np

from sr_calculation import config
from sr_calculation.difficulty_utils import logistic, logisticExponent

logger = logging.getLogger(__name__)


def evaluateDifficultyOfMonoStreak(monoStreak):
    # evaluated on the first note of the streak
    if monoStreak.Parent is None:
        return 0.0
    return logisticExponent(np.e * monoStreak.Index - 2 * np.e) * evaluateDifficultyOfAlternatingMonoPattern(monoStreak.Parent) * 0.5


def evaluateDifficultyOfAlternatingMonoPattern(alternatingMonoPattern):
    if alternatingMonoPattern.Parent is None:
        return 0.0
    return logisticExponent(np.e * alternatingMonoPattern.Index - 2 * np.e) * evaluateDifficultyOfRepeatingHitPatterns(alternatingMonoPattern.Parent)


def evaluateDifficultyOfRepeatingHitPatterns(repeatingHitPattern):
    # top of the hierarchy: no parent to fold in. A pattern repeated recently contributes ~0, one never seen ~2
    return 2 * (1 - logisticExponent(np.e * repeatingHitPattern.RepetitionInterval - 2 * np.e))


def _isConsistent(interval, referenceInterval, threshold):
    if referenceInterval == 0:
        return False
    return abs(1 - interval / referenceInterval) <= threshold


def consistentIntervalPenalty(hitObject, threshold=config.consistencyThreshold):
    """
    Penalty for runs of metronomically consistent delta times, compounded with the doublet penalty.
    Walks back over every pair of adjacent notes until there is no note before the previous one,
    counting the pairs whose delta times are within threshold of each other.
    Never takes off more than 15% on its own.
    """
    consistentCount = 0
    totalDeltaTime = 0.0

    current = hitObject
    previousHitObject = current.Previous(1)
    while previousHitObject is not None:
        if previousHitObject.Previous(1) is None:
            break

        if _isConsistent(current.DeltaTime, previousHitObject.DeltaTime, threshold):
            consistentCount += 1
            totalDeltaTime += current.DeltaTime

        current = previousHitObject
        previousHitObject = current.Previous(1)

    penaltyScale = min(consistentCount * config.consistencyCountScale, config.maxConsistencyPenalty)
    deltaPenalty = float(np.clip(1 - totalDeltaTime / (consistentCount + 1) * config.deltaPenaltyScale, config.minDeltaPenalty, 1.0))

    return (1.0 - min(penaltyScale, 1 - deltaPenalty)) * doubletPenalty(hitObject)


def doubletPenalty(hitObject):
    """
    Penalises a short two-note burst (the previous EvenHitObjects) followed by a gap, when the run after
    it is made of doublet-shaped intervals. Returns 1.0 whenever that shape doesn't apply.
    """
    evenHitObjects = hitObject.Rhythm.EvenHitObjects
    evenPatterns = hitObject.Rhythm.EvenPatterns
    mono = hitObject.Colour.MonoStreak

    if evenHitObjects is None or evenPatterns is None or mono is None:
        return 1.0
    if evenHitObjects.Previous is None or evenHitObjects.Previous.Previous is None:
        return 1.0

    previous = evenHitObjects.Previous
    childCount = len(evenHitObjects.Children)
    if not (len(previous.Children) == 2
            and evenHitObjects.StartTime - previous.EndTime > config.doubletMinGap
            and previous.Duration < config.doubletMaxDuration
            and childCount > 1):
        return 1.0

    doubletCount = 0
    for i in range(childCount - 1):
        interval = evenHitObjects.Children[i].HitObjectInterval
        nextInterval = evenHitObjects.Children[i + 1].HitObjectInterval
        if interval is not None and nextInterval is not None and _isConsistent(interval, nextInterval, config.doubletThreshold):
            doubletCount += 1

    doubletRatio = doubletCount / (childCount - 1)
    logger.debug(f"doublet shape at {hitObject.StartTime}: {doubletCount} doublets over {childCount} children")

    penalty = logistic(doubletRatio, config.doubletRatioCenter, config.doubletRatioScale, 1.0)
    return float(penalty ** config.doubletPenaltyExponent)


def evaluateDifficultyOf(hitObject):
    """
    Colour difficulty of a note. Only notes starting a mono streak, alternating mono pattern or
    repeating hit pattern get anything; each of those levels adds its own term.
    """
    colour = hitObject.Colour
    difficulty = 0.0

    if colour.MonoStreak is not None and colour.MonoStreak.FirstHitObject is hitObject:
        difficulty += evaluateDifficultyOfMonoStreak(colour.MonoStreak)

    if colour.AlternatingMonoPattern is not None and colour.AlternatingMonoPattern.FirstHitObject is hitObject:
        difficulty += evaluateDifficultyOfAlternatingMonoPattern(colour.AlternatingMonoPattern)

    if colour.RepeatingHitPattern is not None and colour.RepeatingHitPattern.FirstHitObject is hitObject:
        difficulty += evaluateDifficultyOfRepeatingHitPatterns(colour.RepeatingHitPattern)

    return float(difficulty * consistentIntervalPenalty(hitObject))
