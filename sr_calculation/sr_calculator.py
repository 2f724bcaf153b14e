# Per-note colour and reading values for a whole map. Combining these into a star rating happens downstream.
#
# Difficulty calculation algorithm: Copyright (c) ppy Pty Ltd <contact@ppy.sh>. Licensed under the MIT Licence.
#
import logging

import numpy as np

from sr_calculation import colour_evaluator, reading_evaluator

logger = logging.getLogger(__name__)


def evaluateHitObjects(hitObjects):
    """
    Evaluates every note of an already grouped sequence. Returns a dict of float arrays
    ("colour", "reading", "lowSV"), one entry per note in sequence order.
    """
    noteCount = len(hitObjects)
    colourValues = np.zeros(noteCount, dtype=np.float64)
    readingValues = np.zeros(noteCount, dtype=np.float64)
    lowSvValues = np.zeros(noteCount, dtype=np.float64)

    for i, obj in enumerate(hitObjects):
        colourValues[i] = colour_evaluator.evaluateDifficultyOf(obj)
        readingValues[i] = reading_evaluator.evaluateDifficultyOf(obj)
        lowSvValues[i] = reading_evaluator.lowSV(obj)

    if noteCount > 0:
        logger.debug(f"evaluated {noteCount} notes: colour peak {colourValues.max():.4f}, reading peak {readingValues.max():.4f}")

    return {"colour": colourValues, "reading": readingValues, "lowSV": lowSvValues}
