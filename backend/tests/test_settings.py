"""Tests for polling_finder.core.settings."""

import pytest
from pydantic import ValidationError

from polling_finder.core.settings import Settings


class TestDirectoryQueryLimit:
    def test_default(self):
        assert Settings(_env_file=None).DIRECTORY_QUERY_LIMIT == 50

    def test_unlimited(self):
        assert Settings(_env_file=None, DIRECTORY_QUERY_LIMIT=None).DIRECTORY_QUERY_LIMIT is None

    @pytest.mark.parametrize("limit", [0, -1])
    def test_rejects_non_positive(self, limit: int):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, DIRECTORY_QUERY_LIMIT=limit)

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("DIRECTORY_QUERY_LIMIT", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
