import pytest

from tgadecoder import settings


@pytest.fixture(autouse=True)
def restore_settings():
    """Tests may change settings.STRICT or MAX_PIXELS; put them back afterwards."""
    strict = settings.STRICT
    max_pixels = settings.MAX_PIXELS
    yield
    settings.STRICT = strict
    settings.MAX_PIXELS = max_pixels
