"""Unit tests for shared service helpers."""

import pytest

from university.registry import BadRequestError
from university.services.base import changed_fields, require


@pytest.mark.unit
class TestChangedFields:
    """Tests for changed_fields."""

    def test_same_value_is_no_change(self) -> None:
        assert changed_fields({"name": "Engineering"}, {"name": "Engineering"}) == {}

    def test_none_means_not_provided(self) -> None:
        assert changed_fields({"name": "Engineering"}, {"name": None}) == {}

    def test_case_change_counts(self) -> None:
        assert changed_fields({"name": "Engineering"}, {"name": "ENGINEERING"}) == {
            "name": "ENGINEERING"
        }

    def test_only_changed_fields_returned(self) -> None:
        current = {"name": "CS", "credits": 3}
        incoming = {"name": "CS", "credits": 4}

        assert changed_fields(current, incoming) == {"credits": 4}


@pytest.mark.unit
class TestRequire:
    """Tests for require."""

    def test_returns_value(self) -> None:
        assert require(0, "must be set") == 0

    def test_none_raises_default_code(self) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            require(None, "Name must be provided")

        assert exc_info.value.error_code == "FIELD_NOT_PROVIDED"
        assert exc_info.value.message == "Name must be provided"

    def test_custom_code(self) -> None:
        with pytest.raises(BadRequestError) as exc_info:
            require(None, "Level missing", "LEVEL_NOT_PROVIDED")

        assert exc_info.value.error_code == "LEVEL_NOT_PROVIDED"
