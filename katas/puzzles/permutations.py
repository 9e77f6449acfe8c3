from collections.abc import Iterator

from beartype import beartype


@beartype
def get_permutations(chars: str, prefix: str = '') -> Iterator[str]:
    """Lazily yield all permutations of a string of distinct characters

    Each next character is picked from the ones not used yet, recursively.
    The order of the permutations is not specified.

    Args:
        chars (str): characters left to place.
        prefix (str): characters already placed.

    Yields:
        str: `prefix` followed by one ordering of `chars`.

    Example:
        >>> sorted(get_permutations('abc'))
        ['abc', 'acb', 'bac', 'bca', 'cab', 'cba']
    """
    if not chars:
        yield prefix
        return

    for i, char in enumerate(chars):
        yield from get_permutations(chars[:i] + chars[i + 1 :], prefix + char)
