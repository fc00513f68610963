import sys
from pathlib import Path

import pytest

# Repository root must be importable for `import rover_service` without an install.
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from rover_service.models import Coordinate, Orientation  # noqa: E402
from rover_service.services import Rover, RoverController  # noqa: E402


@pytest.fixture
def rover():
    return Rover(Coordinate(x=0.0, y=0.0), Orientation.N)


@pytest.fixture
def controller(rover):
    return RoverController(rover)
