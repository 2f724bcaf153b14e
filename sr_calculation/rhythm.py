# Difficulty calculation algorithm: Copyright (c) ppy Pty Ltd <contact@ppy.sh>. Licensed under the MIT Licence.
#
# Rhythm groupings: EvenHitObjects are notes with (roughly) equal spacing, EvenPatterns are runs of
# EvenHitObjects with equal spacing between them. Like the colour groups these come from preprocessing.


class TaikoDifficultyHitObjectRhythm:
    def __init__(self):
        self.EvenHitObjects = None
        self.EvenPatterns = None


class _EvenGrouping:
    def __init__(self, children, previous=None):
        self.Children = list(children)
        self.Previous = previous  # the grouping right before this one, if any

    @property
    def StartTime(self):
        return self.Children[0].StartTime

    @property
    def Duration(self):
        return self.Children[-1].StartTime - self.Children[0].StartTime

    @property
    def EndTime(self):
        return self.StartTime + self.Duration

    @property
    def HitObjectInterval(self):
        # spacing between the first two children, None for a single child
        if len(self.Children) < 2:
            return None
        return self.Children[1].StartTime - self.Children[0].StartTime


class EvenHitObjects(_EvenGrouping):
    """
    Children are hit objects. Each child gets its HitObjectInterval set to the time until the next child;
    the last one keeps None.
    """

    def __init__(self, hitObjects, previous=None):
        super().__init__(hitObjects, previous)

        for i, hitObject in enumerate(self.Children):
            if i + 1 < len(self.Children):
                hitObject.HitObjectInterval = self.Children[i + 1].StartTime - hitObject.StartTime
            hitObject.Rhythm.EvenHitObjects = self

    @property
    def FirstHitObject(self):
        return self.Children[0]


class EvenPatterns(_EvenGrouping):
    """
    Children are EvenHitObjects.
    """

    def __init__(self, evenHitObjects, previous=None):
        super().__init__(evenHitObjects, previous)

        for group in self.Children:
            for hitObject in group.Children:
                hitObject.Rhythm.EvenPatterns = self

    @property
    def FirstHitObject(self):
        return self.Children[0].FirstHitObject
