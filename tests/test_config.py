"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from app.config import Settings


def test_holiday_country_defaults_to_disabled(monkeypatch):
    monkeypatch.delenv("EVENT_HOLIDAY_COUNTRY", raising=False)
    assert Settings().event_holiday_country == ""


def test_supported_holiday_country_normalized(monkeypatch):
    monkeypatch.setenv("EVENT_HOLIDAY_COUNTRY", "tr")
    assert Settings().event_holiday_country == "TR"


def test_unsupported_holiday_country_rejected(monkeypatch):
    monkeypatch.setenv("EVENT_HOLIDAY_COUNTRY", "XX")
    with pytest.raises(ValidationError):
        Settings()
