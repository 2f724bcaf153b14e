# Difficulty calculation algorithm: Copyright (c) ppy Pty Ltd <contact@ppy.sh>. Licensed under the MIT Licence.
# tuning constants for the colour and reading evaluators. Read at call time, so they can be patched.

# interval consistency
consistencyThreshold = 0.01  # relative difference under which two delta times count as the same interval
consistencyCountScale = 0.01  # penalty per consistent interval pair
maxConsistencyPenalty = 0.10
deltaPenaltyScale = 0.001  # applied to the mean consistent delta time (ms)
minDeltaPenalty = 0.85  # consistency can never take off more than 15%

# doublets
doubletThreshold = 0.01
doubletMinGap = 100  # ms between the previous rhythm group's end and the current group's start
doubletMaxDuration = 55  # ms, the previous group has to be a short burst
doubletRatioCenter = 0.5
doubletRatioScale = 1.5
doubletPenaltyExponent = 1.2

# reading
highSvMultiplier = 1.0
lowSvMultiplier = 1.0
velocityMax = 640
velocityMin = 480
lowSvBpmCap = 150
lowSvBonusCap = 0.57
minimumEffectiveBPM = 1e-6  # stands in for zero or negative BPM, low SV divides by the capped BPM
