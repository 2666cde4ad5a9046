"""
Line merging for the 2048 game: the one-dimensional rule every move is built on.
"""

from typing import Iterable


def merge_line(values: Iterable[int]) -> tuple[list[int], int]:
    """
    Merge adjacent equal values of a line towards its start.

    Parameters
    ----------
    values : Iterable[int]
        One row or column of tiles, start of the move first.

    Returns
    -------
    merged : list[int]
        The packed line after merging, without trailing zeros.
    score : int
        Sum of the tiles created by merges.

    Notes
    -----
    - Zeros (empty cells) are ignored and removed before merging.
    - Merging occurs from the start of the line towards the end, in a single pass.
    - Each value can only be merged once per call: ``[2, 2, 2, 2]`` gives ``[4, 4]``, not ``[8]``.

    Example
    -------
    >>> merge_line([2, 2, 4])
    ([4, 4], 4)
    """
    # ##: Drop empty cells.
    non_zero = [int(value) for value in values if value != 0]

    result = []
    score = 0

    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            merged = non_zero[i] * 2
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(non_zero[i])
            i += 1

    return result, score
