"""
Statistical checks that a shuffle produces uniformly random permutations.

**Conceptual**: Fisher–Yates is only as good as its index arithmetic. A
classic off-by-one (picking from 0..m-1 instead of 0..m) still produces
permutations, just not uniformly distributed ones. The easiest way to catch
that is empirical: shuffle the same input many times, count where each
element lands, and test whether those counts look uniform.

**Mathematical**: For a population of size n shuffled T times, a uniform
shuffle puts each element in each position with probability 1/n, so every
cell of the element × position table has expectation T / n. Pearson's
chi-square statistic over the n² cells measures the deviation from that
expectation. Because every trial contributes a full permutation matrix, the
statistic is scaled by (n - 1) / n before scipy.stats.chi2 turns it into a
p-value with (n - 1)² degrees of freedom (the row and column totals are
fixed).
"""

from typing import Optional

import numpy as np
import pandas as pd
from scipy import stats

from numlib.basic.errors import InvalidArgument
from numlib.basic.sampling import shuffle_in_place
from numlib.utils.randomness import RandomSource, resolve_random_source


def tally_shuffle_positions(
    size: int,
    trials: int,
    rng: Optional[RandomSource] = None,
) -> pd.DataFrame:
    """
    Shuffle range(size) repeatedly and count where each element ends up.

    **Functionally**:
    - Output: DataFrame of shape (size, size); rows are elements, columns are
      final positions, values are counts. Every row and every column sums to
      trials.
    - Uses the same random source for every trial, so a seeded generator
      makes the whole table reproducible.

    Args:
        size: Population size (>= 1).
        trials: Number of shuffles (>= 1).
        rng: Random source; defaults to the process-wide generator.

    Returns:
        DataFrame of counts indexed by element, columns by position.

    Raises:
        InvalidArgument: If size or trials is less than 1.
    """
    if size < 1:
        raise InvalidArgument(f"size must be at least 1, got: {size}")
    if trials < 1:
        raise InvalidArgument(f"trials must be at least 1, got: {trials}")

    rng = resolve_random_source(rng)
    counts = np.zeros((size, size), dtype=np.int64)

    for _ in range(trials):
        permutation = shuffle_in_place(list(range(size)), rng=rng)
        for position, element in enumerate(permutation):
            counts[element, position] += 1

    return pd.DataFrame(
        counts,
        index=pd.Index(range(size), name="element"),
        columns=pd.Index(range(size), name="position"),
    )


def chi_square_uniformity(counts: pd.DataFrame) -> float:
    """
    p-value of Pearson's chi-square test against uniform placement.

    **Mathematical**: Every row and every column of the table sums to the
    number of trials, so only (n - 1)² of the n² cells are free. Each trial
    adds a whole permutation matrix, not n independent draws, so a cell's
    variance is E * (n - 1) / n rather than the E Pearson assumes. Pearson's
    statistic is therefore scaled by (n - 1) / n and compared against a
    chi-square distribution with (n - 1)² degrees of freedom.

    **Interpretation**:
    - Large p (e.g. > 0.01): counts are consistent with a uniform shuffle.
    - Tiny p: the shuffle is biased (or you got very unlucky).
    - Over many fair runs the p-values are uniform on [0, 1].

    **Edge cases**:
    - A 1 × 1 table has no free cells; the result is 1.0.

    Args:
        counts: Element × position count table from tally_shuffle_positions.

    Returns:
        p-value in [0, 1].
    """
    n = counts.shape[0]
    if n < 2:
        return 1.0

    observed = counts.to_numpy(dtype=float).ravel()
    expected = np.full_like(observed, observed.sum() / observed.size)
    pearson = stats.chisquare(observed, f_exp=expected).statistic
    statistic = pearson * (n - 1) / n
    return float(stats.chi2.sf(statistic, (n - 1) ** 2))
