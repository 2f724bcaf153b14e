# Difficulty calculation algorithm: Copyright (c) ppy Pty Ltd <contact@ppy.sh>. Licensed under the MIT Licence.
#
# Colour groupings, leaf to root: MonoStreak -> AlternatingMonoPattern -> RepeatingHitPatterns.
# They are built by preprocessing outside this package; constructing a group links its children to it
# and records it on every hit object it covers. The evaluators only read them.


class TaikoDifficultyHitObjectColour:
    def __init__(self):
        self.MonoStreak = None  # the mono streak this note is in
        self.AlternatingMonoPattern = None
        self.RepeatingHitPattern = None


class MonoStreak:
    """
    A run of consecutive notes of the same colour.
    """

    def __init__(self, hitObjects):
        self.HitObjects = list(hitObjects)
        self.Parent = None  # AlternatingMonoPattern containing this streak
        self.Index = 0  # index of this streak within Parent

        for hitObject in self.HitObjects:
            hitObject.Colour.MonoStreak = self

    @property
    def FirstHitObject(self):
        return self.HitObjects[0] if self.HitObjects else None


class AlternatingMonoPattern:
    """
    A run of mono streaks that alternate in colour, e.g. kk ddd kk ddd.
    """

    def __init__(self, monoStreaks):
        self.MonoStreaks = list(monoStreaks)
        self.Parent = None  # RepeatingHitPatterns containing this pattern
        self.Index = 0

        for i, streak in enumerate(self.MonoStreaks):
            streak.Parent = self
            streak.Index = i
            for hitObject in streak.HitObjects:
                hitObject.Colour.AlternatingMonoPattern = self

    @property
    def FirstHitObject(self):
        return self.MonoStreaks[0].FirstHitObject if self.MonoStreaks else None


class RepeatingHitPatterns:
    """
    Alternating mono patterns that repeat. RepetitionInterval is how many patterns back the
    same shape last appeared; larger means less repetitive.
    """

    def __init__(self, alternatingMonoPatterns, repetitionInterval):
        self.AlternatingMonoPatterns = list(alternatingMonoPatterns)
        self.RepetitionInterval = repetitionInterval

        for i, pattern in enumerate(self.AlternatingMonoPatterns):
            pattern.Parent = self
            pattern.Index = i
            for streak in pattern.MonoStreaks:
                for hitObject in streak.HitObjects:
                    hitObject.Colour.RepeatingHitPattern = self

    @property
    def FirstHitObject(self):
        return self.AlternatingMonoPatterns[0].FirstHitObject if self.AlternatingMonoPatterns else None
