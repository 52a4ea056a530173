from enum import Enum
from typing import Dict, FrozenSet, Set, Union
from dataclasses import dataclass
import logging

from .exceptions import DuplicateFragmentError, OutOfOrderFragmentError

logger = logging.getLogger(__name__)

class FragmentKind(Enum):
    # Declared in canonical order.
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return list(FragmentKind).index(self)

    @property
    def unique(self) -> bool:
        return self in _UNIQUE_KINDS

    def render(self, value: str) -> str:
        """Format a fragment value the way it appears in a selector."""
        return _FORMATS[self].format(value)

_FORMATS: Dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}

_UNIQUE_KINDS: FrozenSet[FragmentKind] = frozenset({
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.PSEUDO_ELEMENT,
})

# Kinds whose presence forbids appending the key kind, on top of the
# canonical ordering. An element additionally requires an empty selector.
_BLOCKED_BY: Dict[FragmentKind, FrozenSet[FragmentKind]] = {
    FragmentKind.ELEMENT: frozenset(),
    FragmentKind.ID: frozenset({FragmentKind.PSEUDO_ELEMENT, FragmentKind.CLASS}),
    FragmentKind.CLASS: frozenset({FragmentKind.ATTRIBUTE}),
    FragmentKind.ATTRIBUTE: frozenset({FragmentKind.PSEUDO_CLASS}),
    FragmentKind.PSEUDO_CLASS: frozenset({FragmentKind.PSEUDO_ELEMENT}),
    FragmentKind.PSEUDO_ELEMENT: frozenset({FragmentKind.CLASS}),
}

@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator. Rendered only, never extended."""
    text: str

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

SelectorLike = Union["Selector", CombinedSelector]

def combine(left: SelectorLike, combinator: str, right: SelectorLike) -> CombinedSelector:
    """
    Join two built selectors with a combinator.

    Args:
        left: Selector rendered before the combinator
        combinator: Token inserted verbatim, e.g. '+', '~', '>' or ' '
        right: Selector rendered after the combinator

    Returns:
        A new CombinedSelector; neither operand is modified
    """
    return CombinedSelector(f"{left} {combinator} {right}")

class Selector:
    """
    Mutable selector under construction.

    Fragments must follow the order element, id, class, attribute,
    pseudo-class, pseudo-element. Element, id and pseudo-element may
    appear once; the others may repeat.
    """

    def __init__(self):
        self.text = ""
        self.present: Set[FragmentKind] = set()

    def element(self, value: str) -> "Selector":
        return self._append(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> "Selector":
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> "Selector":
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> "Selector":
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> "Selector":
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "Selector":
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    @staticmethod
    def combine(left: SelectorLike, combinator: str, right: SelectorLike) -> CombinedSelector:
        return combine(left, combinator, right)

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r})"

    def _append(self, kind: FragmentKind, value: str) -> "Selector":
        """
        Validate and append one fragment.

        Raises:
            DuplicateFragmentError: If a unique kind is already present
            OutOfOrderFragmentError: If the append breaks fragment ordering
        """
        if kind.unique and kind in self.present:
            logger.debug(f"Duplicate {kind.value} fragment on {self.text!r}")
            raise DuplicateFragmentError(kind)

        if self._out_of_order(kind):
            logger.debug(f"Out of order {kind.value} fragment on {self.text!r}")
            raise OutOfOrderFragmentError(kind)

        self.text += kind.render(value)
        self.present.add(kind)
        return self

    def _out_of_order(self, kind: FragmentKind) -> bool:
        if kind is FragmentKind.ELEMENT and self.present:
            return True
        if self.present & _BLOCKED_BY[kind]:
            return True
        return any(other.rank > kind.rank for other in self.present)

class CssSelectorBuilder:
    """Facade whose fragment operations each start a new Selector."""

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

    def combine(self, left: SelectorLike, combinator: str, right: SelectorLike) -> CombinedSelector:
        return combine(left, combinator, right)

css_selector_builder = CssSelectorBuilder()
