# Difficulty calculation algorithm: Copyright (c) ppy Pty Ltd <contact@ppy.sh>. Licensed under the MIT Licence.
import numpy as np

from sr_calculation import config
from sr_calculation.difficulty_utils import logistic


def evaluateDifficultyOf(hitObject):
    """
    Bonus for high slider velocity. Shifts from 0 to highSvMultiplier as the effective BPM moves
    through [velocityMin, velocityMax], half way at the centre of that window.
    """
    center = (config.velocityMax + config.velocityMin) / 2
    scaleRange = config.velocityMax - config.velocityMin

    return float(config.highSvMultiplier * logistic(hitObject.EffectiveBPM, center, 1.0 / (scaleRange / 10)))


def lowSV(hitObject):
    # adjustment for slow scrolling, combined with the high SV bonus by the caller. Negative for most inputs.
    bpmCap = config.lowSvBpmCap
    effectiveCapBpm = min(hitObject.EffectiveBPM, bpmCap)
    if effectiveCapBpm <= 0:
        effectiveCapBpm = config.minimumEffectiveBPM
    lowSvBonus = float(np.clip(np.sqrt(max(0, abs(effectiveCapBpm - bpmCap) / bpmCap)), 0, config.lowSvBonusCap))

    objectDensity = calculateObjectDensity(hitObject)

    value = 200 / effectiveCapBpm - bpmCap * 1.33
    adjustedValue = value / effectiveCapBpm * 3 * objectDensity / 1.5  # (value / bpm * 3) / (1.5 / density)

    return config.lowSvMultiplier * adjustedValue * (lowSvBonus * 0.9)


def calculateObjectDensity(hitObject):
    # mixes note spacing and tempo: close notes at high BPM count as dense
    objectDensity = 50 * logistic(hitObject.DeltaTime, 200, 1.0 / 300)

    return float(1 - logistic(hitObject.EffectiveBPM, objectDensity, 1.0 / 240))
