"""Custom exceptions for selectorkit."""

from selectorkit.models.selectors import SelectorCategory


class SelectorKitError(Exception):
    """Base class for all selectorkit exceptions."""

    pass


class SelectorBuildError(SelectorKitError):
    """Raised when a selector builder is used out of contract."""

    def __init__(self, category: SelectorCategory, message: str):
        """Initialize builder error.

        Args:
            category: Category that was being written when the error occurred
            message: Human readable description of the misuse

        """
        self.category = category
        super().__init__(message)


class DuplicateCategoryError(SelectorBuildError):
    """Raised when element, id or pseudo-element is set twice on one selector."""

    def __init__(self, category: SelectorCategory):
        """Initialize duplicate category error.

        Args:
            category: Single-occurrence category that was already set

        """
        super().__init__(
            category,
            'Element, id and pseudo-element should not occur more then one time inside the selector',
        )


class OrderError(SelectorBuildError):
    """Raised when a selector part is written after a part that must follow it."""

    def __init__(self, category: SelectorCategory, blocking: list[SelectorCategory]):
        """Initialize order error with the categories that blocked the write.

        Args:
            category: Category that was being written
            blocking: Later categories already present on the selector

        """
        self.blocking = blocking
        super().__init__(
            category,
            'Selector parts should be arranged in the following order: '
            'element, id, class, attribute, pseudo-class, pseudo-element',
        )


class SerializationError(SelectorKitError):
    """Raised when a value cannot be serialized or deserialized."""

    pass
