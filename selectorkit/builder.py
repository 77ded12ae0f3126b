"""
builder.py
==========
Fluent builder for CSS selector strings.

Each simple selector is made of type, id, class, attribute, pseudo-class
and pseudo-element parts, in that order:

    element#id.class[attr]:pseudoClass::pseudoElement

Class, attribute and pseudo-class parts may repeat. Any selectors can be
joined with the combinators ' ', '+', '~' and '>'.

Example:
    >>> from selectorkit import css_selector_builder as builder
    >>> builder.element('a').attr('href$=".png"').pseudo_class('focus').stringify()
    'a[href$=".png"]:focus'
"""

from typing import Protocol

import logfire

from selectorkit.exceptions import DuplicateCategoryError, OrderError
from selectorkit.models.selectors import SINGLE_OCCURRENCE, SelectorCategory, SelectorParts


class SelectorLike(Protocol):
    """Anything that renders itself as selector text."""

    def stringify(self) -> str:
        """Return the CSS selector text."""
        ...


class SimpleSelector:
    """Selector for a single element, built up part by part.

    All mutating methods return the same instance so calls can be chained.

    Attributes:
        parts: Formatted fragments collected so far

    """

    def __init__(self) -> None:
        """Initialize an empty selector."""
        self.parts = SelectorParts()

    def _check(self, category: SelectorCategory) -> None:
        """Validate that ``category`` may be written now.

        Raises:
            DuplicateCategoryError: If a single-occurrence category is already set.
            OrderError: If a category that must come later is already set.

        """
        if category in SINGLE_OCCURRENCE and self.parts.is_present(category):
            logfire.warn('Selector part rejected', category=category.value, reason='duplicate')
            raise DuplicateCategoryError(category)

        blocking = self.parts.present_after(category)
        if blocking:
            logfire.warn(
                'Selector part rejected',
                category=category.value,
                reason='order',
                blocking=[other.value for other in blocking],
            )
            raise OrderError(category, blocking)

    def set_element(self, value: str) -> 'SimpleSelector':
        """Set the type selector, e.g. 'div'."""
        self._check(SelectorCategory.ELEMENT)
        self.parts.element = value
        return self

    def set_id(self, value: str) -> 'SimpleSelector':
        """Set the id selector; stored as '#value'."""
        self._check(SelectorCategory.ID)
        self.parts.id = f'#{value}'
        return self

    def add_class(self, value: str) -> 'SimpleSelector':
        """Append a class selector; stored as '.value'."""
        self._check(SelectorCategory.CLASS)
        self.parts.classes.append(f'.{value}')
        return self

    def add_attribute(self, value: str) -> 'SimpleSelector':
        """Append an attribute selector; ``value`` is wrapped in brackets verbatim."""
        self._check(SelectorCategory.ATTRIBUTE)
        self.parts.attributes.append(f'[{value}]')
        return self

    def add_pseudo_class(self, value: str) -> 'SimpleSelector':
        """Append a pseudo-class; stored as ':value'."""
        self._check(SelectorCategory.PSEUDO_CLASS)
        self.parts.pseudo_classes.append(f':{value}')
        return self

    def set_pseudo_element(self, value: str) -> 'SimpleSelector':
        """Set the pseudo-element; stored as '::value'."""
        self._check(SelectorCategory.PSEUDO_ELEMENT)
        self.parts.pseudo_element = f'::{value}'
        return self

    # Chaining names matching the facade
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    def stringify(self) -> str:
        """Return the selector text, or '' if nothing was set."""
        return ''.join(self.parts.fragments())

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f'SimpleSelector({self.stringify()!r})'


class CombinedSelector:
    """Two selectors joined by a combinator.

    The combinator is stored verbatim and padded with one space on each
    side when rendered, so ``' '`` renders as three spaces.

    Attributes:
        left: Selector before the combinator
        combinator: Combinator token (' ', '+', '~' or '>')
        right: Selector after the combinator

    """

    def __init__(self, left: SelectorLike, combinator: str, right: SelectorLike):
        """Initialize combined selector."""
        self.left = left
        self.combinator = combinator
        self.right = right

    def stringify(self) -> str:
        """Return '<left> <combinator> <right>'."""
        return f'{self.left.stringify()} {self.combinator} {self.right.stringify()}'

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f'CombinedSelector({self.stringify()!r})'


class CssSelectorBuilder:
    """Facade creating fresh selectors, one entry point per part kind."""

    def element(self, value: str) -> SimpleSelector:
        """Start a selector with a type selector."""
        return SimpleSelector().set_element(value)

    def id(self, value: str) -> SimpleSelector:
        """Start a selector with an id."""
        return SimpleSelector().set_id(value)

    def class_(self, value: str) -> SimpleSelector:
        """Start a selector with a class."""
        return SimpleSelector().add_class(value)

    def attr(self, value: str) -> SimpleSelector:
        """Start a selector with an attribute."""
        return SimpleSelector().add_attribute(value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        """Start a selector with a pseudo-class."""
        return SimpleSelector().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        """Start a selector with a pseudo-element."""
        return SimpleSelector().set_pseudo_element(value)

    def combine(self, left: SelectorLike, combinator: str, right: SelectorLike) -> CombinedSelector:
        """Join two selectors with a combinator token."""
        logfire.debug('Combining selectors', combinator=combinator)
        return CombinedSelector(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
