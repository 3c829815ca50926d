import os
import tempfile

import pytest

# Keep test logs out of the working tree; must be set before the package imports
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='duotrigordle-logs-'))

from duotrigordle import create_app  # noqa: E402
from duotrigordle.config import TestingConfig  # noqa: E402
from duotrigordle.services.game_service import initialize_game_service  # noqa: E402
from duotrigordle.services.storage_service import initialize_storage_service  # noqa: E402


@pytest.fixture
def storage_service():
    return initialize_storage_service()


@pytest.fixture
def game_service(storage_service):
    return initialize_game_service()


@pytest.fixture
def client(game_service):
    app = create_app(TestingConfig)
    return app.test_client()
