"""Word snaking puzzle

A word occurs in the puzzle when it can be traced through the grid moving
up, down, left or right, using each cell at most once ("the snake does not
cross itself").

Example:
    >>> puzzle = [
    ...     'ANGULAR',
    ...     'REDNCAE',
    ...     'RFIDTCL',
    ...     'AGNEGSA',
    ...     'YTIRTSP',
    ... ]
    >>> find_string_in_snaking_puzzle(puzzle, 'REACT')  # top-right R, then down, left, left, down
    True
    >>> find_string_in_snaking_puzzle(puzzle, 'FUNCTION')
    False
"""

from collections.abc import Sequence

from beartype import beartype

from katas.types import Cell


DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


@beartype
def find_string_in_snaking_puzzle(puzzle: Sequence[str] | Sequence[Sequence[str]], search: str) -> bool:
    """Return True if `search` can be traced as a snake through the puzzle

    Depth-first search from every cell holding the first character; a cell is
    marked visited while on the current path and released on backtrack.

    Args:
        puzzle (Sequence[str] | Sequence[Sequence[str]]):
            Rectangular grid given as rows of characters.
        search (str):
            Word to look for. The empty word is always found.

    Returns:
        bool: True if the word occurs in the puzzle.
    """
    if not search:
        return True

    rows = len(puzzle)
    cols = len(puzzle[0]) if rows else 0

    def trace(cell: Cell, index: int, visited: set[Cell]) -> bool:
        if index == len(search):
            return True

        row, col = cell
        for d_row, d_col in DIRECTIONS:
            nxt = (row + d_row, col + d_col)
            r, c = nxt
            if 0 <= r < rows and 0 <= c < cols and nxt not in visited and puzzle[r][c] == search[index]:
                visited.add(nxt)
                if trace(nxt, index + 1, visited):
                    return True
                visited.discard(nxt)

        return False

    return any(
        trace((row, col), 1, {(row, col)})
        for row in range(rows)
        for col in range(cols)
        if puzzle[row][col] == search[0]
    )
