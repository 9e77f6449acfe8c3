from katas.models import Rectangle, CompassPoint
from katas.objects import (
    serialize,
    revive_with_behavior,
    Selector,
    CombinedSelector,
    css_selector_builder,
)
from katas.sequences import (
    create_compass_points,
    iter_compass_points,
    expand_braces,
    get_zigzag_matrix,
    can_dominoes_make_row,
    extract_ranges,
)
from katas.puzzles import (
    find_string_in_snaking_puzzle,
    get_permutations,
    get_most_profit_from_stock_quotes,
    UrlShortener,
)


__all__ = [
    'Rectangle',
    'CompassPoint',
    'serialize',
    'revive_with_behavior',
    'Selector',
    'CombinedSelector',
    'css_selector_builder',
    'create_compass_points',
    'iter_compass_points',
    'expand_braces',
    'get_zigzag_matrix',
    'can_dominoes_make_row',
    'extract_ranges',
    'find_string_in_snaking_puzzle',
    'get_permutations',
    'get_most_profit_from_stock_quotes',
    'UrlShortener',
]
