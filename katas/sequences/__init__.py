from katas.sequences.compass import create_compass_points, iter_compass_points
from katas.sequences.braces import expand_braces
from katas.sequences.zigzag import get_zigzag_matrix
from katas.sequences.dominoes import can_dominoes_make_row
from katas.sequences.ranges import extract_ranges


__all__ = [
    'create_compass_points',
    'iter_compass_points',
    'expand_braces',
    'get_zigzag_matrix',
    'can_dominoes_make_row',
    'extract_ranges',
]
