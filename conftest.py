import pytest
from css_selector_builder import CssSelectorBuilder

@pytest.fixture
def builder():
    """Return an instance of the CssSelectorBuilder class."""
    return CssSelectorBuilder()
