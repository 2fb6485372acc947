"""
Общие фикстуры для тестов дашборда плотности.
"""

import pytest

from lpg_density.dashboard import DensityDashboard
from lpg_density.storage import InMemoryStorage, StateRepository


@pytest.fixture
def memory_storage():
    """Пустое хранилище в памяти."""
    return InMemoryStorage()


@pytest.fixture
def repository(memory_storage):
    """Репозиторий состояния поверх хранилища в памяти."""
    return StateRepository(memory_storage)


@pytest.fixture
def dashboard(repository):
    """Дашборд с состоянием по умолчанию."""
    return DensityDashboard(repository)
