"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path
from typing import Callable, List, Sequence

from techjobs.job_data import JobDataStore
from techjobs.web import create_app

HEADER = ["name", "employer", "location", "position type", "core competency"]

SAMPLE_ROWS = [
    ["Junior Data Analyst", "Lockerdome", "Saint Louis", "Data Scientist / Business Intelligence", "Statistical Analysis"],
    ["Jr. Java Engineer", "Acme Corp", "NYC", "Web - Back End", "Java"],
    ["Android Developer", "acme corp", "nyc", "Mobile", "java"],
    ["Frontend Developer, Contract", "Bluewolf", "Kansas City", "Web - Front End", "React"],
    ["Full Stack Developer", "LaunchCode", "Miami", "Web - Full Stack", "Python"],
]


@pytest.fixture
def write_csv(tmp_path) -> Callable[..., Path]:
    """Write rows (and a header) to a temporary CSV file."""

    def _write(rows: List[Sequence[str]], header: Sequence[str] = HEADER, name: str = "job_data.csv") -> Path:
        path = tmp_path / name
        lines = [",".join(_quote(v) for v in header)]
        lines.extend(",".join(_quote(v) for v in row) for row in rows)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


def _quote(value: str) -> str:
    if "," in value or '"' in value:
        return '"' + value.replace('"', '""') + '"'
    return value


@pytest.fixture
def sample_csv(write_csv) -> Path:
    """CSV file with a handful of jobs, including case-variant duplicates."""
    return write_csv(SAMPLE_ROWS)


@pytest.fixture
def store(sample_csv) -> JobDataStore:
    return JobDataStore(sample_csv)


@pytest.fixture
def missing_store(tmp_path) -> JobDataStore:
    """Store pointed at a file that does not exist."""
    return JobDataStore(tmp_path / "nope.csv")


@pytest.fixture
def app(store):
    flask_app = create_app(store)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
