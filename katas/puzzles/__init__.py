from katas.puzzles.snake import find_string_in_snaking_puzzle
from katas.puzzles.permutations import get_permutations
from katas.puzzles.stocks import get_most_profit_from_stock_quotes
from katas.puzzles.shortener import UrlShortener


__all__ = [
    'find_string_in_snaking_puzzle',
    'get_permutations',
    'get_most_profit_from_stock_quotes',
    'UrlShortener',
]
