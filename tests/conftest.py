from __future__ import annotations

import pytest

from fluid_tailwind.context import get_context
from fluid_tailwind.log import reset_warnings

SCREENS = {"sm": "40rem", "md": "48rem", "lg": "64rem", "xl": "80rem"}


def theme_lookup(theme):
    def lookup(path, default=None):
        return theme.get(path, default)

    return lookup


def categories(caplog):
    return [getattr(record, "category", None) for record in caplog.records]


@pytest.fixture(autouse=True)
def fresh_warnings():
    reset_warnings()
    yield
    reset_warnings()


@pytest.fixture
def context():
    return get_context(theme_lookup({"screens": dict(SCREENS)}))


@pytest.fixture
def container_context():
    return get_context(
        theme_lookup(
            {
                "screens": dict(SCREENS),
                "containers": {"sm": "24rem", "md": "28rem", "lg": "32rem"},
            }
        )
    )
