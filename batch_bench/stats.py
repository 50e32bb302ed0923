"""Summary statistics over trial durations."""

import math
from collections.abc import Sequence


def statistic(samples: Sequence[float]) -> tuple[float, float] | None:
    """Compute the mean and population standard deviation of samples.

    Args:
        samples: Trial durations in seconds

    Returns:
        ``(mean, stddev)``, or None when there are no samples

    """
    if not samples:
        return None

    count = len(samples)
    mean = math.fsum(samples) / count
    variance = math.fsum((value - mean) ** 2 for value in samples) / count

    return (mean, math.sqrt(variance))
