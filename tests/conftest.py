import pytest

from service.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Each test sees settings built from its own environment."""
    for name in (
        "IGNORE_CLASS_PATTERNS",
        "EMIT_INTERMEDIATE",
        "HTML_MAX_FILES",
        "HTML_EXCLUDE_DIRS",
        "HTML_PRIORITY_FILES",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


SAMPLE_HTML = (
    '<div class="sec01"><div class="card">'
    '<span class="br_icon"></span><span class="title">T</span>'
    "</div></div>"
)


@pytest.fixture
def sample_html():
    return SAMPLE_HTML
