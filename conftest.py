"""Shared pytest fixtures."""

import pytest

from services.draw_calc_service import reset_draw_calc_service


@pytest.fixture(autouse=True)
def _fresh_draw_calc_service():
    reset_draw_calc_service()
    yield
    reset_draw_calc_service()
