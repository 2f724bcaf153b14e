from sr_calculation.TaikoDifficultyHitObject import TaikoDifficultyHitObject, createHitObjects
from sr_calculation.colour import MonoStreak, AlternatingMonoPattern, RepeatingHitPatterns
from sr_calculation.rhythm import EvenHitObjects, EvenPatterns
from sr_calculation.sr_calculator import evaluateHitObjects
