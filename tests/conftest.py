"""Shared fixtures for request-body validator tests."""

from __future__ import annotations

from typing import Any

import pytest

from request_body_validator import FieldValidator, StaticBodySource


@pytest.fixture
def form_body() -> dict[str, Any]:
    return {
        "datetime": "2021-03-21 18:08:23",
        "invalidDatetime": "20203-21 180823",
        "empty": "",
        "nonEmpty": "bytes",
        "numeric0": "25",
        "numeric1": "27.5",
        "text": "lorem",
        "checkboxPresent": True,
        "floating": 1.22,
        "integer": 36,
        "zero": "0",
        "falseFlag": False,
        "nothing": None,
    }


@pytest.fixture
def validator(form_body: dict[str, Any]) -> FieldValidator:
    return FieldValidator(StaticBodySource(form_body))
