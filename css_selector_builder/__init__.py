# css_selector_builder/__init__.py
from .builder import (
    FragmentKind,
    Selector,
    CombinedSelector,
    CssSelectorBuilder,
    css_selector_builder,
    combine
)
from .exceptions import SelectorBuildError, DuplicateFragmentError, OutOfOrderFragmentError
from .objects import Rectangle, get_json, from_json

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "FragmentKind",
    "Selector",
    "CombinedSelector",
    "CssSelectorBuilder",
    "css_selector_builder",
    "combine",

    # Exceptions
    "SelectorBuildError",
    "DuplicateFragmentError",
    "OutOfOrderFragmentError",

    # Object utilities
    "Rectangle",
    "get_json",
    "from_json"
]
