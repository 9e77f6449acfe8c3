from collections.abc import Sequence

from beartype import beartype


@beartype
def get_most_profit_from_stock_quotes(quotes: Sequence[int | float]) -> int | float:
    """Return the most profit that can be made from the daily stock quotes

    Each day you may buy one unit, sell any number of units you hold, or do
    nothing. The best strategy buys every unit on a day when a higher price
    still lies ahead and sells it at that future maximum, so the profit is the
    sum of (max price from that day on - price of the day), computed in one
    right-to-left pass.

    Args:
        quotes (Sequence[int | float]): prices in date order.

    Returns:
        int | float: maximum total profit, 0 when nothing is worth buying.

    Example:
        >>> get_most_profit_from_stock_quotes([1, 2, 3, 4, 5, 6])  # buy at 1..5, sell all at 6
        15
        >>> get_most_profit_from_stock_quotes([6, 5, 4, 3, 2, 1])
        0
        >>> get_most_profit_from_stock_quotes([1, 6, 5, 10, 8, 7])  # buy at 1, 6, 5, sell all at 10
        18
    """
    profit = 0
    max_price = None

    for price in reversed(quotes):
        if max_price is None or price > max_price:
            max_price = price
        profit += max_price - price

    return profit
