import pytest

from ringfields.base.config import RingType
from ringfields.presets import get_preset, list_preset_names


@pytest.fixture(params=list_preset_names())
def preset_config(request):
    """Every preset, shrunk to keep the suite fast."""
    return get_preset(request.param).with_num_elements(1500)


@pytest.fixture
def saturn_config():
    return get_preset("Saturn Ring")


@pytest.fixture(params=list(RingType))
def ring_type(request):
    return request.param
