import pytest

from domsignal import set_document, set_scheduler


@pytest.fixture(autouse=True)
def _fresh_globals():
    """Each test gets its own default document and no write scheduler."""
    set_document(None)
    set_scheduler(None)
    yield
    set_document(None)
    set_scheduler(None)
