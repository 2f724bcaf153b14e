# Difficulty calculation algorithm: Copyright (c) ppy Pty Ltd <contact@ppy.sh>. Licensed under the MIT Licence.
from sr_calculation.colour import TaikoDifficultyHitObjectColour
from sr_calculation.rhythm import TaikoDifficultyHitObjectRhythm


class TaikoDifficultyHitObject:
    def __init__(self, startTime, deltaTime, effectiveBPM, noteDifficultyHitObjects, noteIndex):
        self.StartTime = startTime  # ms
        self.DeltaTime = deltaTime  # ms since the previous note
        self.EffectiveBPM = effectiveBPM  # bpm scaled by the local slider velocity
        self.noteDifficultyHitObjects = noteDifficultyHitObjects  # list of all notes, this one included
        self.NoteIndex = noteIndex  # index of this in noteDifficultyHitObjects
        self.HitObjectInterval = None  # time to the next note in its EvenHitObjects, set by the grouping
        self.Rhythm = TaikoDifficultyHitObjectRhythm()
        self.Colour = TaikoDifficultyHitObjectColour()

    def Previous(self, backwardsIndex):
        # None once we walk off the start of the map
        if backwardsIndex < 0:
            raise ValueError(f"backwardsIndex must not be negative, got {backwardsIndex}")
        index = self.NoteIndex - backwardsIndex
        if index < 0:
            return None
        return self.noteDifficultyHitObjects[index]

    def __repr__(self):
        return f"TaikoDifficultyHitObject(#{self.NoteIndex} t={self.StartTime} dt={self.DeltaTime} bpm={self.EffectiveBPM})"


def createHitObjects(startTimes, effectiveBPMs):
    """
    Builds the flat note sequence the evaluators walk over. DeltaTime is the gap to the previous
    start time (0 for the first note). Groupings are not built here.
    """
    if len(startTimes) != len(effectiveBPMs):
        raise ValueError(f"got {len(startTimes)} start times but {len(effectiveBPMs)} effective BPMs")

    hitObjects = []
    for i in range(len(startTimes)):
        deltaTime = startTimes[i] - startTimes[i - 1] if i > 0 else 0
        hitObjects.append(TaikoDifficultyHitObject(startTimes[i], deltaTime, effectiveBPMs[i], hitObjects, i))
    return hitObjects
