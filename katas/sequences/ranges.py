from collections.abc import Sequence
from itertools import groupby

from beartype import beartype


@beartype
def extract_ranges(nums: Sequence[int]) -> str:
    """Return the range-list notation of an ascending list of integers

    The list is written as comma separated items, each either an individual
    integer or a range 'start-end' covering every integer between both ends.
    Ranges are used only, and always, for runs of more than two consecutive
    integers.

    Args:
        nums (Sequence[int]): strictly ascending, distinct integers.

    Returns:
        str: range-list expression, '' for an empty list.

    Example:
        >>> extract_ranges([0, 1, 2, 3, 4, 5])
        '0-5'
        >>> extract_ranges([1, 4, 5])
        '1,4,5'
        >>> extract_ranges([0, 1, 2, 5, 7, 8, 9])
        '0-2,5,7-9'
        >>> extract_ranges([1, 2, 4, 5])
        '1,2,4,5'
    """
    items = []

    # consecutive integers share the same (value - position) key
    for _, group in groupby(enumerate(nums), key=lambda pair: pair[1] - pair[0]):
        run = [value for _, value in group]
        if len(run) > 2:
            items.append(f'{run[0]}-{run[-1]}')
        else:
            items.extend(str(value) for value in run)

    return ','.join(items)
