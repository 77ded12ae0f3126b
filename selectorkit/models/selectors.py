"""Pydantic models for structured CSS selector parts."""

from enum import Enum

from pydantic import BaseModel, Field


class SelectorCategory(str, Enum):
    """Kinds of simple selector parts, declared in the order they must appear."""

    ELEMENT = 'element'
    ID = 'id'
    CLASS = 'class'
    ATTRIBUTE = 'attribute'
    PSEUDO_CLASS = 'pseudo_class'
    PSEUDO_ELEMENT = 'pseudo_element'


PRECEDENCE: tuple[SelectorCategory, ...] = tuple(SelectorCategory)

# Categories that may be written at most once per selector
SINGLE_OCCURRENCE = frozenset({SelectorCategory.ELEMENT, SelectorCategory.ID, SelectorCategory.PSEUDO_ELEMENT})


class SelectorParts(BaseModel):
    """Formatted fragments of a simple selector.

    Every fragment already carries its CSS prefix or brackets, so joining
    them in category order yields the selector text.

    Attributes:
        element: Type selector, e.g. 'div'
        id: Id fragment, e.g. '#main'
        classes: Class fragments, e.g. ['.container', '.editable']
        attributes: Attribute fragments, e.g. ['[href$=".png"]']
        pseudo_classes: Pseudo-class fragments, e.g. [':focus']
        pseudo_element: Pseudo-element fragment, e.g. '::before'

    """

    element: str | None = Field(default=None, description='Type selector')
    id: str | None = Field(default=None, description='Id fragment with # prefix')
    classes: list[str] = Field(default_factory=list, description='Class fragments with . prefix')
    attributes: list[str] = Field(default_factory=list, description='Attribute fragments in brackets')
    pseudo_classes: list[str] = Field(default_factory=list, description='Pseudo-class fragments with : prefix')
    pseudo_element: str | None = Field(default=None, description='Pseudo-element fragment with :: prefix')

    def _slot(self, category: SelectorCategory) -> str | list[str] | None:
        slots: dict[SelectorCategory, str | list[str] | None] = {
            SelectorCategory.ELEMENT: self.element,
            SelectorCategory.ID: self.id,
            SelectorCategory.CLASS: self.classes,
            SelectorCategory.ATTRIBUTE: self.attributes,
            SelectorCategory.PSEUDO_CLASS: self.pseudo_classes,
            SelectorCategory.PSEUDO_ELEMENT: self.pseudo_element,
        }
        return slots[category]

    def is_present(self, category: SelectorCategory) -> bool:
        """Return True if the given category already holds a value."""
        slot = self._slot(category)
        if isinstance(slot, list):
            return len(slot) > 0
        return slot is not None

    def present_after(self, category: SelectorCategory) -> list[SelectorCategory]:
        """Return categories later than ``category`` that already hold a value."""
        later = PRECEDENCE[PRECEDENCE.index(category) + 1 :]
        return [other for other in later if self.is_present(other)]

    def fragments(self) -> list[str]:
        """Return all stored fragments in category order."""
        result: list[str] = []
        for category in PRECEDENCE:
            slot = self._slot(category)
            if isinstance(slot, list):
                result.extend(slot)
            elif slot is not None:
                result.append(slot)
        return result
