import pytest
import numpy as np

from hullsim.commons.types import DEFAULTS, COLINEAR_TOLERANCE
from hullsim.events import EventRecorder
from hullsim.geometry import as_point_set
from hullsim.hull import HULL_ALGORITHMS, Algorithm


# fixtures
@pytest.fixture
def rng():
    yield np.random.default_rng(20231019)


@pytest.fixture
def recorder():
    yield EventRecorder()


@pytest.fixture(params=list(Algorithm), ids=lambda a: a.value)
def engine(request):
    """ each hull engine in turn, as the callable taking (points, recorder) """
    yield HULL_ALGORITHMS[request.param]


@pytest.fixture
def unit_square():
    yield as_point_set([(0, 0), (1, 0), (1, 1), (0, 1)])


@pytest.fixture
def random_points(rng):
    yield as_point_set(rng.uniform(-100, 100, size=(300, 2)))


@pytest.fixture
def grid_points(rng):
    """ small integer grid: duplicates and colinear runs everywhere """
    yield as_point_set(rng.integers(-4, 5, size=(200, 2)))


@pytest.fixture
def restore_tolerance():
    yield
    DEFAULTS.update_tolerance(COLINEAR_TOLERANCE)
