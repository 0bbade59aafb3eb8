"""Histogram: Profit/loss values binned into equal-width ranges.

Algorithm:
    bin_size = (max - min) / bins      (1.0 when max == min)
    index    = min(floor((v - min) / bin_size), bins - 1)

The clamp puts the maximum value in the last bin. Counts always sum
to the number of values, including when every value is equal (they all
land in the first bin).
"""

from typing import Sequence

import numpy as np

from trade_analytics.domain.models import HistogramBin

DEFAULT_BINS = 10


def build_histogram(
    values: Sequence[float],
    bins: int = DEFAULT_BINS,
) -> list[HistogramBin]:
    """Bin values into equal-width ranges.

    Args:
        values: Profit/loss values
        bins: Number of bins (>= 1)

    Returns:
        Exactly `bins` HistogramBin records, or [] for empty input

    Raises:
        ValueError: If bins < 1

    Example:
        >>> [b.count for b in build_histogram([0, 1, 2, 3], bins=2)]
        [2, 2]
    """
    if bins < 1:
        raise ValueError(f"bins must be at least 1, got: {bins}")
    if len(values) == 0:
        return []

    data = np.asarray(values, dtype=float)
    low = float(data.min())
    high = float(data.max())
    bin_size = (high - low) / bins
    if bin_size == 0:
        bin_size = 1.0

    indices = np.floor((data - low) / bin_size).astype(np.int64)
    indices = np.minimum(indices, bins - 1)
    counts = np.bincount(indices, minlength=bins)

    histogram = []
    for i in range(bins):
        bin_min = low + i * bin_size
        bin_max = low + (i + 1) * bin_size
        histogram.append(HistogramBin(
            range=f"{bin_min:.2f} to {bin_max:.2f}",
            count=int(counts[i]),
            min_value=bin_min,
            max_value=bin_max,
        ))

    return histogram
