from dataclasses import dataclass, field
from typing import Dict, List

from .job_data import JobDataStore
from .logger import get_logger
from .models import AttributeValue, Job
from .normalize import fold

logger = get_logger()

# Field selectors offered by the search and list pages, in display order
COLUMN_CHOICES: Dict[str, str] = {
    "all": "All",
    "employer": "Employer",
    "location": "Location",
    "positionType": "Position Type",
    "coreCompetency": "Skill",
}


@dataclass
class SearchResults:
    """Search output plus the inputs echoed back for redisplay."""

    jobs: List[Job]
    search_type: str
    search_term: str
    columns: Dict[str, str] = field(default_factory=lambda: dict(COLUMN_CHOICES))


def search(store: JobDataStore, search_type: str, search_term: str | None) -> List[Job]:
    """
    Jobs matching a search form submission.

    An empty term, or a term of "all", lists every job. Anything else is a
    column search; a search_type of "all" searches every field and an
    unrecognized one searches core competency.
    """
    if not search_term or fold(search_term) == "all":
        return store.find_all()
    return store.find_by_column_and_value(search_type, search_term)


def run_search(store: JobDataStore, search_type: str | None, search_term: str | None) -> SearchResults:
    search_type = search_type or "all"
    search_term = search_term or ""
    jobs = search(store, search_type, search_term)
    logger.record_search(search_type, len(jobs))
    logger.debug("Search served", search_type=search_type, search_term=search_term, results=len(jobs))
    return SearchResults(jobs=jobs, search_type=search_type, search_term=search_term)


def table_choices(store: JobDataStore) -> Dict[str, List[AttributeValue]]:
    return {
        "employer": store.get_all_employers(),
        "location": store.get_all_locations(),
        "positionType": store.get_all_position_types(),
        "coreCompetency": store.get_all_core_competency(),
    }


def list_jobs(store: JobDataStore, column: str, value: str) -> List[Job]:
    if column == "all":
        return store.find_all()
    return store.find_by_column_and_value(column, value)


def list_title(column: str, value: str) -> str:
    if column == "all":
        return "All Jobs"
    label = COLUMN_CHOICES.get(column, column)
    return f"Jobs with {label}: {value}"
