from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_store():
    """ReservationStore のモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def mock_directory():
    """CustomerDirectory のモックフィクスチャ"""
    return MagicMock()
