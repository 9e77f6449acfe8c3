"""Zigzag matrix

The JPEG entropy coder orders the coefficients of a block along a zigzag path,
see https://en.wikipedia.org/wiki/JPEG#Entropy_coding

    3  =>  [[0, 1, 5],
            [2, 4, 6],
            [3, 7, 8]]
"""

from beartype import beartype


@beartype
def get_zigzag_matrix(n: int) -> list[list[int]]:
    """Return the n x n matrix numbering its cells along the zigzag path

    On even anti-diagonals (row + col even) the path moves up-right, dropping
    one row at the right edge or stepping one column right at the top edge.
    On odd anti-diagonals it moves down-left, stepping right at the bottom
    edge or dropping one row at the left edge.

    Args:
        n (int): matrix dimension, at least 1.

    Returns:
        list[list[int]]: rows of the matrix, filled with 0 .. n*n - 1.

    Raises:
        ValueError: If `n` is smaller than 1.

    Example:
        >>> get_zigzag_matrix(2)
        [[0, 1], [2, 3]]
    """
    if n < 1:
        raise ValueError(f'Matrix dimension must be a positive integer (given value: {n}).')

    matrix = [[0] * n for _ in range(n)]
    row = col = 0

    for value in range(n * n):
        matrix[row][col] = value

        if (row + col) % 2 == 0:
            if col == n - 1:
                row += 1
            elif row == 0:
                col += 1
            else:
                row, col = row - 1, col + 1
        else:
            if row == n - 1:
                col += 1
            elif col == 0:
                row += 1
            else:
                row, col = row + 1, col - 1

    return matrix
