class SelectorBuildError(Exception):
    """Base selector builder error."""

    message = "Invalid selector"

    def __init__(self, kind=None):
        self.kind = kind
        super().__init__(self.message)

class DuplicateFragmentError(SelectorBuildError):
    """Unique fragment appended twice."""

    message = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )

class OutOfOrderFragmentError(SelectorBuildError):
    """Fragment appended out of canonical order."""

    message = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )
