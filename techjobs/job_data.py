"""
In-memory job data store.

Reads the job CSV once, on first query, and answers list and search
requests against the loaded records. A failed load is logged and leaves
the store empty for the rest of its lifetime; queries then return empty
results instead of raising.
"""

import csv
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, List, Optional, Type, TypeVar

from .env import get_settings
from .logger import get_logger
from .models import AttributeValue, CoreCompetency, Employer, Job, Location, PositionType
from .normalize import contains_ci, fold
from .schema import validate_header, validate_row

logger = get_logger()

V = TypeVar("V", bound=AttributeValue)


class DataLoadError(Exception):
    """Raised by a strict load when the job data could not be read."""
    pass


@dataclass(frozen=True)
class LoadResult:
    loaded: bool
    records: int = 0
    error: Optional[DataLoadError] = None


class AttributeIndex(Generic[V]):
    """Ordered, case-insensitively deduplicated values of one category."""

    def __init__(self, kind: Type[V]):
        self.kind = kind
        self.values: List[V] = []
        self._by_key: dict[str, V] = {}

    def get_or_create(self, text: str) -> V:
        key = fold(text)
        existing = self._by_key.get(key)
        if existing is not None:
            return existing
        value = self.kind(text)
        self._by_key[key] = value
        self.values.append(value)
        return value

    def __len__(self) -> int:
        return len(self.values)


def get_field_value(job: Job, column: str) -> str:
    """
    Text of a single job column.

    Unrecognized column names resolve to the core competency.
    """
    if column == "name":
        return job.name
    if column == "employer":
        return str(job.employer)
    if column == "location":
        return str(job.location)
    if column == "positionType":
        return str(job.position_type)
    return str(job.core_competency)


def _matches_any_field(job: Job, term: str) -> bool:
    return (
        contains_ci(job.name, term)
        or contains_ci(str(job.employer), term)
        or contains_ci(str(job.location), term)
        or contains_ci(str(job.position_type), term)
        or contains_ci(str(job.core_competency), term)
    )


class JobDataStore:
    """Job records loaded lazily from a CSV file."""

    def __init__(self, data_file: Path):
        self.data_file = Path(data_file)
        self._lock = threading.Lock()
        self._attempted = False
        self._result = LoadResult(loaded=False)

        self._jobs: List[Job] = []
        self._employers: AttributeIndex[Employer] = AttributeIndex(Employer)
        self._locations: AttributeIndex[Location] = AttributeIndex(Location)
        self._position_types: AttributeIndex[PositionType] = AttributeIndex(PositionType)
        self._core_competencies: AttributeIndex[CoreCompetency] = AttributeIndex(CoreCompetency)

    @property
    def loaded(self) -> bool:
        return self._result.loaded

    @property
    def load_error(self) -> Optional[DataLoadError]:
        return self._result.error

    def __len__(self) -> int:
        self._ensure_loaded()
        return len(self._jobs)

    def load(self, strict: bool = False) -> LoadResult:
        """
        Load the data file if that has not been attempted yet.

        Args:
            strict: Raise DataLoadError when the load failed, instead of
                only reporting it in the result

        Returns:
            LoadResult describing the (single) load attempt
        """
        self._ensure_loaded()
        if strict and self._result.error is not None:
            raise self._result.error
        return self._result

    def _ensure_loaded(self) -> None:
        if self._attempted:
            return
        with self._lock:
            if self._attempted:
                return
            try:
                self._result = self._read()
            finally:
                self._attempted = True

    def _read(self) -> LoadResult:
        logger.record_load_attempt()
        jobs: List[Job] = []
        employers = AttributeIndex(Employer)
        locations = AttributeIndex(Location)
        position_types = AttributeIndex(PositionType)
        core_competencies = AttributeIndex(CoreCompetency)

        try:
            for row in self._rows():
                name, employer, location, position_type, skill = row
                jobs.append(Job(
                    id=len(jobs) + 1,
                    name=name,
                    employer=employers.get_or_create(employer),
                    location=locations.get_or_create(location),
                    position_type=position_types.get_or_create(position_type),
                    core_competency=core_competencies.get_or_create(skill),
                ))
        except DataLoadError as e:
            cause = e.__cause__ if e.__cause__ is not None else e
            logger.record_load_failure(type(cause).__name__)
            logger.error(
                "Failed to load job data",
                path=str(self.data_file),
                error=str(e),
            )
            return LoadResult(loaded=False, error=e)

        self._jobs = jobs
        self._employers = employers
        self._locations = locations
        self._position_types = position_types
        self._core_competencies = core_competencies

        logger.record_load_success(len(jobs))
        logger.info(
            f"Loaded {len(jobs)} jobs",
            path=str(self.data_file),
            employers=len(employers),
            locations=len(locations),
        )
        return LoadResult(loaded=True, records=len(jobs))

    def _rows(self):
        """Yield validated data rows; every failure surfaces as DataLoadError."""
        try:
            with self.data_file.open("r", newline="", encoding="utf-8-sig") as f:
                reader = csv.reader(f)
                errors = validate_header(next(reader, None))
                if errors:
                    raise DataLoadError("; ".join(errors))

                for row in reader:
                    if not row:
                        continue
                    errors = validate_row(row, reader.line_num)
                    if errors:
                        raise DataLoadError("; ".join(errors))
                    yield row
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise DataLoadError(f"Cannot read {self.data_file}: {e}") from e

    def find_all(self) -> List[Job]:
        """All jobs in file order, as a new list."""
        self._ensure_loaded()
        return list(self._jobs)

    def find_by_value(self, term: str) -> List[Job]:
        """Jobs with the term in any field, case-insensitively."""
        self._ensure_loaded()
        return [job for job in self._jobs if _matches_any_field(job, term)]

    def find_by_column_and_value(self, column: str, term: str) -> List[Job]:
        """
        Jobs whose column contains the term, case-insensitively.

        A term of "all" returns every job and a column of "all" searches
        every field.
        """
        self._ensure_loaded()
        if fold(term) == "all":
            return self.find_all()
        if column == "all":
            return self.find_by_value(term)
        return [
            job for job in self._jobs
            if contains_ci(get_field_value(job, column), term)
        ]

    # The category getters hand out the live lists.

    def get_all_employers(self) -> List[Employer]:
        self._ensure_loaded()
        return self._employers.values

    def get_all_locations(self) -> List[Location]:
        self._ensure_loaded()
        return self._locations.values

    def get_all_position_types(self) -> List[PositionType]:
        self._ensure_loaded()
        return self._position_types.values

    def get_all_core_competency(self) -> List[CoreCompetency]:
        self._ensure_loaded()
        return self._core_competencies.values


# Process-wide store used by the web app and CLI
_default_store: Optional[JobDataStore] = None
_default_store_lock = threading.Lock()


def get_store(data_file: Optional[Path] = None) -> JobDataStore:
    """
    Get or create the default store.

    Args:
        data_file: CSV path; only used when the store is first created
            (default: TECHJOBS_DATA_FILE or the bundled data file)

    Returns:
        JobDataStore instance
    """
    global _default_store

    with _default_store_lock:
        if _default_store is None:
            if data_file is None:
                data_file = get_settings().data_file
            _default_store = JobDataStore(data_file)
        return _default_store


def reset_store():
    """Reset the default store (useful for testing)."""
    global _default_store
    with _default_store_lock:
        _default_store = None
