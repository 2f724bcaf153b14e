# Difficulty calculation algorithm: Copyright (c) ppy Pty Ltd <contact@ppy.sh>. Licensed under the MIT Licence.
import numpy as np


def logistic(x, center=0.0, scale=1.0, maxValue=1.0):
    """
    Bounded sigmoid: maxValue / (1 + e^(-scale * (x - center))).
    Works on scalars and numpy arrays. Equals maxValue / 2 at x == center.
    """
    with np.errstate(over='ignore'):  # exp overflow just means we're at the bottom of the curve
        return maxValue / (1 + np.exp(scale * (center - x)))


def logisticExponent(exponent, maxValue=1.0):
    # same curve written in terms of the raw exponent: maxValue / (1 + e^exponent). Decreasing in exponent.
    with np.errstate(over='ignore'):
        return maxValue / (1 + np.exp(exponent))
