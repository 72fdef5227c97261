import json
from datetime import date
from pathlib import Path
from typing import Any, Callable

import pytest

# Years deliberately out of order and mixed with keys that are not years
SAMPLE_DOCUMENT = {
    "need_id": "100021",
    "divisions": {
        "england-and-wales": {
            "2025": [
                {"title": "New Year's Day", "date": "01/01/2025", "notes": "", "bunting": "true"},
                {"title": "Good Friday", "date": "18/04/2025", "notes": "", "bunting": "false"},
            ],
            "2024": [
                {"title": "New Year's Day", "date": "01/01/2024", "notes": "", "bunting": "true"},
                {"title": "Christmas Day", "date": "25/12/2024", "notes": "", "bunting": "true"},
                {"title": "Boxing Day", "date": "26/12/2024", "notes": "Substitute day"},
            ],
            "notes": "not a year",
        },
        "scotland": {
            "2024": [
                {"title": "St Andrew's Day", "date": "02/12/2024", "notes": "Substitute day", "bunting": "true"},
            ],
            "2023a": {"broken": True},
            "": None,
            "20245": "five digits",
        },
    },
}


@pytest.fixture
def write_document(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a calendar document into the temporary data directory."""

    def _write(name: str, content: Any) -> Path:
        path = tmp_path / f"{name}.json"
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def data_path(tmp_path: Path, write_document: Callable[[str, Any], Path]) -> Path:
    write_document("bank-holidays", SAMPLE_DOCUMENT)
    return tmp_path


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 12, 25)
