"""selectorkit - Object helpers and a fluent CSS selector builder.

Build selectors part by part, combine them, and stringify:

    >>> from selectorkit import css_selector_builder as builder
    >>> builder.combine(builder.element('div').id('main'), '+', builder.element('table').id('data')).stringify()
    'div#main + table#data'
"""

__version__ = '0.1.0'

from selectorkit.builder import (
    CombinedSelector,
    CssSelectorBuilder,
    SelectorLike,
    SimpleSelector,
    css_selector_builder,
)
from selectorkit.config import Settings
from selectorkit.exceptions import (
    DuplicateCategoryError,
    OrderError,
    SelectorBuildError,
    SelectorKitError,
    SerializationError,
)
from selectorkit.models import PRECEDENCE, Rectangle, SelectorCategory, SelectorParts
from selectorkit.serialization import deserialize, from_json, get_json, serialize
from selectorkit.utils import setup_logging

__all__ = [
    # Selector builder
    'CombinedSelector',
    'CssSelectorBuilder',
    'SelectorLike',
    'SimpleSelector',
    'css_selector_builder',
    # Models
    'PRECEDENCE',
    'Rectangle',
    'SelectorCategory',
    'SelectorParts',
    # Serialization
    'deserialize',
    'from_json',
    'get_json',
    'serialize',
    # Errors
    'DuplicateCategoryError',
    'OrderError',
    'SelectorBuildError',
    'SelectorKitError',
    'SerializationError',
    # Configuration
    'Settings',
    'setup_logging',
]
