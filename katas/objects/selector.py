"""CSS selector builder

Each compound selector consists of type, id, class, attribute, pseudo-class and
pseudo-element parts, always in this order:

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              may occur several times

Compound selectors are joined with the combinators ' ', '+', '~' and '>'.

Selectors are immutable: every builder call returns a new selector and leaves
the receiver untouched, so a partial selector can be reused as the common
prefix of several others. Ordering and uniqueness violations are reported by
the offending call, not when rendering.

Classes:
    BaseSelector:
        Interface shared by compound and combined selectors.
    Selector:
        Compound selector built part by part.
    CombinedSelector:
        Two selectors joined by a combinator.
    SelectorBuilder:
        Facade starting new selectors (`css_selector_builder` instance).

Example:
    >>> builder = css_selector_builder
    >>> builder.id('main').class_('container').class_('editable').render()
    '#main.container.editable'
    >>> builder.element('a').attr('href$=".png"').pseudo_class('focus').render()
    'a[href$=".png"]:focus'
    >>> builder.combine(
    ...     builder.element('div').id('main'),
    ...     '+',
    ...     builder.element('table').id('data'),
    ... ).render()
    'div#main + table#data'
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from beartype import beartype

from katas.constants import SELECTOR_COMBINATORS
from katas.exceptions import SelectorOrderError, SelectorDuplicateError, SelectorCombinatorError


logger = logging.getLogger(__name__)

ELEMENT = 'element'
ID = 'id'
CLASSES = 'classes'
ATTRIBUTES = 'attributes'
PSEUDO_CLASSES = 'pseudo_classes'
PSEUDO_ELEMENT = 'pseudo_element'

CATEGORY_ORDER = (ELEMENT, ID, CLASSES, ATTRIBUTES, PSEUDO_CLASSES, PSEUDO_ELEMENT)
CATEGORY_RANK = {category: rank for rank, category in enumerate(CATEGORY_ORDER)}
SINGLETON_CATEGORIES = frozenset({ELEMENT, ID, PSEUDO_ELEMENT})

ORDER_ERROR_MESSAGE = (
    'Selector parts should be arranged in the following order: '
    'element, id, class, attribute, pseudo-class, pseudo-element'
)
DUPLICATE_ERROR_MESSAGE = 'Element, id and pseudo-element should not occur more than one time inside the selector'


class BaseSelector(ABC):
    """Interface for renderable selectors.

    Methods:
        render() -> str:
            CSS text of the selector.

        stringify() -> str:
            Alias of render().
    """

    @abstractmethod
    def render(self) -> str:
        pass

    def stringify(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Selector(BaseSelector):
    """Compound CSS selector.

    Attributes:
        element_name (str | None):
            Type selector, e.g. 'div'.
        element_id (str | None):
            Id without the leading '#'.
        classes (tuple[str, ...]):
            Class names without the leading '.', in call order.
        attributes (tuple[str, ...]):
            Attribute conditions without the brackets, in call order.
        pseudo_classes (tuple[str, ...]):
            Pseudo-classes without the leading ':', in call order.
        pseudo_element_name (str | None):
            Pseudo-element without the leading '::'.
        order (tuple[str, ...]):
            Categories in the order they were set (append-only).
    """

    element_name: str | None = None
    element_id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element_name: str | None = None
    order: tuple[str, ...] = ()

    def _extend(self, category: str, value: str, **changes) -> 'Selector':
        if category in SINGLETON_CATEGORIES and category in self.order:
            logger.debug('Rejected duplicate selector part.', extra={'category': category, 'value': value})
            raise SelectorDuplicateError(DUPLICATE_ERROR_MESSAGE)
        if self.order and CATEGORY_RANK[self.order[-1]] > CATEGORY_RANK[category]:
            logger.debug('Rejected out of order selector part.', extra={'category': category, 'after': self.order[-1]})
            raise SelectorOrderError(ORDER_ERROR_MESSAGE)

        return replace(self, order=self.order + (category,), **changes)

    @beartype
    def element(self, value: str) -> 'Selector':
        return self._extend(ELEMENT, value, element_name=value)

    @beartype
    def id(self, value: str) -> 'Selector':
        return self._extend(ID, value, element_id=value)

    @beartype
    def class_(self, value: str) -> 'Selector':
        return self._extend(CLASSES, value, classes=self.classes + (value,))

    @beartype
    def attr(self, value: str) -> 'Selector':
        return self._extend(ATTRIBUTES, value, attributes=self.attributes + (value,))

    @beartype
    def pseudo_class(self, value: str) -> 'Selector':
        return self._extend(PSEUDO_CLASSES, value, pseudo_classes=self.pseudo_classes + (value,))

    @beartype
    def pseudo_element(self, value: str) -> 'Selector':
        return self._extend(PSEUDO_ELEMENT, value, pseudo_element_name=value)

    def render(self) -> str:
        parts = [self.element_name or '']
        if self.element_id is not None:
            parts.append(f'#{self.element_id}')
        parts.extend(f'.{name}' for name in self.classes)
        parts.extend(f'[{condition}]' for condition in self.attributes)
        parts.extend(f':{name}' for name in self.pseudo_classes)
        if self.pseudo_element_name is not None:
            parts.append(f'::{self.pseudo_element_name}')
        return ''.join(parts)


@dataclass(frozen=True)
class CombinedSelector(BaseSelector):
    """Two selectors joined by a combinator.

    The operands are kept as they are (not merged), so nested combinations
    render recursively: `left combinator right`.
    """

    left: BaseSelector
    combinator: str
    right: BaseSelector

    def render(self) -> str:
        return f'{self.left.render()} {self.combinator} {self.right.render()}'


class SelectorBuilder:
    """Facade starting new selectors.

    Each method starts from an empty `Selector`, so chains never share state.

    Example:
        >>> css_selector_builder.element('li').pseudo_class('first-child').render()
        'li:first-child'
    """

    def element(self, value: str) -> Selector:
        return Selector().element(value)

    def id(self, value: str) -> Selector:
        return Selector().id(value)

    def class_(self, value: str) -> Selector:
        return Selector().class_(value)

    def attr(self, value: str) -> Selector:
        return Selector().attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().pseudo_element(value)

    @beartype
    def combine(self, left: BaseSelector, combinator: str, right: BaseSelector) -> CombinedSelector:
        """Join two selectors with a combinator

        Args:
            left (BaseSelector): Selector on the left hand side.
            combinator (str): One of ' ', '+', '~', '>'.
            right (BaseSelector): Selector on the right hand side.

        Returns:
            CombinedSelector: composite node holding both operands.

        Raises:
            SelectorCombinatorError: If `combinator` is not a CSS combinator.
        """
        if combinator not in SELECTOR_COMBINATORS:
            raise SelectorCombinatorError(f'Unknown combinator {combinator!r} (expected one of: \' \', \'+\', \'~\', \'>\').')
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = SelectorBuilder()
