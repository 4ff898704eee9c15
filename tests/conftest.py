# tests/conftest.py

import pytest

from reformcal.core.types import Holiday


class FakeProvider:
    """Records calls and answers with a fixed holiday list (or raises)."""

    def __init__(self, holidays=(), error=None):
        self.holidays = list(holidays)
        self.error = error
        self.calls = []

    def lookup(self, start, end, country):
        self.calls.append((start, end, country))
        if self.error is not None:
            raise self.error
        return [h for h in self.holidays if start <= h.date <= end]


@pytest.fixture
def no_holidays():
    return FakeProvider()


@pytest.fixture
def make_provider():
    def _make(*pairs, error=None):
        return FakeProvider([Holiday(date=d, name=n) for d, n in pairs], error=error)
    return _make
