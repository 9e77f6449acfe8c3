"""Domino row feasibility

See https://en.wikipedia.org/wiki/Dominoes

Tiles are unordered pairs of face values ([i, j] plays the same as [j, i]).
A set of tiles can be laid in one row exactly when the multigraph whose
vertices are the faces and whose edges are the tiles has an Eulerian path:
at most two faces of odd degree, and all faces in one connected component.

Example:
    >>> can_dominoes_make_row([[1, 1], [2, 2], [1, 2]])
    True
    >>> can_dominoes_make_row([[1, 1], [0, 3], [1, 4]])
    False
"""

import logging
from collections import Counter, defaultdict
from collections.abc import Sequence

from beartype import beartype


logger = logging.getLogger(__name__)


@beartype
def can_dominoes_make_row(dominoes: Sequence[Sequence[int]]) -> bool:
    """Return True if all the tiles can be placed in a single row

    Args:
        dominoes (Sequence[Sequence[int]]):
            Tiles as [x, y] pairs. An empty set is trivially a row.

    Returns:
        bool: True if the tiles can be chained with matching faces.

    Raises:
        ValueError: If a tile does not have exactly two faces.

    Example:
        >>> can_dominoes_make_row([[1, 3], [2, 3], [1, 4], [2, 4], [1, 5], [2, 5]])
        True
    """
    degrees = Counter()
    neighbours = defaultdict(set)

    for tile in dominoes:
        if len(tile) != 2:
            raise ValueError(f'Domino tile must have exactly two faces (given value: {tile}).')
        a, b = tile
        # a double [k, k] adds 2 to the degree of k
        degrees[a] += 1
        degrees[b] += 1
        neighbours[a].add(b)
        neighbours[b].add(a)

    if not degrees:
        return True

    odd_faces = sum(1 for degree in degrees.values() if degree % 2)
    if odd_faces > 2:
        logger.debug('Too many odd-degree faces for a single row.', extra={'oddFaces': odd_faces})
        return False

    start = next(iter(degrees))
    visited = {start}
    stack = [start]
    while stack:
        face = stack.pop()
        for neighbour in neighbours[face] - visited:
            visited.add(neighbour)
            stack.append(neighbour)

    if len(visited) != len(degrees):
        logger.debug('Tiles split into disconnected groups.', extra={'reached': len(visited), 'faces': len(degrees)})
        return False

    return True
