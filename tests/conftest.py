import pytest

from pagegen.core.buffer import DoubleBuffer
from pagegen.core.regenerator import Regenerator
from tests.fakes import SEED, ScriptedGenerator


@pytest.fixture
def make_regenerator():
    def _make(*outcomes, gate=None, seed=SEED, **kwargs):
        generator = ScriptedGenerator(*outcomes, gate=gate)
        return Regenerator(generator, DoubleBuffer(seed), **kwargs), generator
    return _make
