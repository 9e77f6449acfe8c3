# Type aliases shared by the katas
type Number = int | float
type Cell = tuple[int, int]
