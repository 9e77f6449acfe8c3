from katas.objects.json_bridge import serialize, revive_with_behavior
from katas.objects.selector import BaseSelector, Selector, CombinedSelector, SelectorBuilder, css_selector_builder


__all__ = [
    'serialize',
    'revive_with_behavior',
    'BaseSelector',
    'Selector',
    'CombinedSelector',
    'SelectorBuilder',
    'css_selector_builder',
]
