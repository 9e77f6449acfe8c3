"""Bash-style brace expansion

See https://en.wikipedia.org/wiki/Bash_(Unix_shell)#Brace_expansion

A balanced pair of braces holding comma separated alternatives stands for
each of the alternatives at that position. Groups may nest; they are expanded
innermost first, breadth first, and every distinct result is yielded once.

Example:
    >>> sorted(expand_braces('~/{Downloads,Pictures}/*.{jpg,gif}'))
    ['~/Downloads/*.gif', '~/Downloads/*.jpg', '~/Pictures/*.gif', '~/Pictures/*.jpg']
    >>> sorted(expand_braces('thumbnail.{png,jp{e,}g}'))
    ['thumbnail.jpeg', 'thumbnail.jpg', 'thumbnail.png']
    >>> list(expand_braces('nothing to do'))
    ['nothing to do']
"""

from collections import deque
from collections.abc import Iterator

from beartype import beartype


def find_group(text: str) -> tuple[int, int] | None:
    """Return the (open, close) indexes of the first brace group to expand

    The first balanced pair to close with a comma directly inside it is an
    innermost group: any group nested in it would have closed earlier. Pairs
    without a comma are literal text and may sit inside a group.

    Args:
        text (str): String possibly containing brace pairs.

    Returns:
        tuple[int, int] | None: indexes of the group's braces, None if there is no group.

    Example:
        >>> find_group('{a,{b}}')
        (0, 6)
        >>> find_group('{x}') is None
        True
    """
    # [open index, has comma] per unclosed brace
    stack = []

    for i, char in enumerate(text):
        if char == '{':
            stack.append([i, False])
        elif char == ',' and stack:
            stack[-1][1] = True
        elif char == '}' and stack:
            start, has_comma = stack.pop()
            if has_comma:
                return start, i

    return None


@beartype
def expand_braces(text: str) -> Iterator[str]:
    """Lazily expand every brace group of `text`

    Args:
        text (str): String possibly containing (nested) brace groups.

    Yields:
        str: each distinct expansion, in no particular order.
    """
    pending = deque([text])
    seen = set()

    while pending:
        item = pending.popleft()
        group = find_group(item)

        if group is not None:
            start, end = group
            head, body, tail = item[:start], item[start + 1 : end], item[end + 1 :]
            # nested pairs hold no commas, so every comma here separates alternatives
            pending.extend(f'{head}{alternative}{tail}' for alternative in body.split(','))
        elif item not in seen:
            seen.add(item)
            yield item
