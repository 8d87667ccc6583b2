import argparse
import json
from pathlib import Path
from typing import List, Optional

from . import __version__
from .env import get_settings, load_env
from .job_data import DataLoadError, JobDataStore, get_store
from .logger import get_logger
from .models import Job
from .search import COLUMN_CHOICES, list_jobs, list_title, run_search, table_choices


def _open_store(args: argparse.Namespace) -> JobDataStore:
    store = JobDataStore(Path(args.data)) if args.data else get_store()
    try:
        store.load(strict=args.strict)
    except DataLoadError as e:
        raise SystemExit(f"Could not load job data: {e}")
    return store


def print_jobs(jobs: List[Job], as_json: bool = False) -> None:
    if as_json:
        print(json.dumps([job.to_dict() for job in jobs], indent=2, ensure_ascii=False))
        return
    if not jobs:
        print("No results")
        return
    for job in jobs:
        print("*****")
        print(f"ID: {job.id}")
        print(f"  Name: {job.name}")
        print(f"  Employer: {job.employer}")
        print(f"  Location: {job.location}")
        print(f"  Position Type: {job.position_type}")
        print(f"  Skill: {job.core_competency}")
    print("*****")
    print(f"{len(jobs)} jobs")


def cmd_serve(args: argparse.Namespace) -> None:
    from .web import create_app

    settings = get_settings()
    store = _open_store(args)
    app = create_app(store)
    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port
    get_logger().info("Starting TechJobs web app", host=host, port=port, jobs=len(store))
    app.run(host=host, port=port, debug=args.debug or settings.debug)


def cmd_list(args: argparse.Namespace) -> None:
    store = _open_store(args)
    if args.column is None:
        for column, values in table_choices(store).items():
            print(f"{COLUMN_CHOICES[column]} ({len(values)}):")
            for value in values:
                print(f" - {value}")
        return
    print(list_title(args.column, args.value))
    print_jobs(list_jobs(store, args.column, args.value), as_json=args.json)


def cmd_search(args: argparse.Namespace) -> None:
    store = _open_store(args)
    results = run_search(store, args.type, args.term)
    if not args.json:
        print(f"Search {results.search_type!r} for {results.search_term!r}:")
    print_jobs(results.jobs, as_json=args.json)


def main(argv: Optional[List[str]] = None):
    # Load .env if present (TECHJOBS_DATA_FILE, TECHJOBS_PORT, etc.)
    load_env()
    settings = get_settings()
    get_logger().configure(level=settings.log_level, log_dir=settings.log_dir)

    parser = argparse.ArgumentParser(prog="techjobs", description="TechJobs: browse and search job listings")
    parser.add_argument("--version", action="store_true", help="Show version")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--data", help="Path to job CSV (default: TECHJOBS_DATA_FILE or bundled data)")
    common.add_argument("--strict", action="store_true", help="Exit with an error if the job data cannot be loaded")
    common.add_argument("--json", action="store_true", help="Print jobs as JSON")

    subparsers = parser.add_subparsers(dest="command")
    srv = subparsers.add_parser("serve", parents=[common], help="Run the web app")
    srv.add_argument("--host", help="Bind address (default: TECHJOBS_HOST or 127.0.0.1)")
    srv.add_argument("--port", type=int, help="Port (default: TECHJOBS_PORT or 8080)")
    srv.add_argument("--debug", action="store_true", help="Enable Flask debug mode")
    srv.set_defaults(func=cmd_serve)

    lst = subparsers.add_parser("list", parents=[common], help="List categories, or the jobs in one category value")
    lst.add_argument("--column", choices=list(COLUMN_CHOICES), help="Category to list jobs for")
    lst.add_argument("--value", default="", help="Category value to match")
    lst.set_defaults(func=cmd_list)

    sch = subparsers.add_parser("search", parents=[common], help="Search jobs")
    sch.add_argument("--type", default="all", help="Field to search: all, name, employer, location, positionType, coreCompetency")
    sch.add_argument("--term", default="", help="Search term (empty or 'all' lists every job)")
    sch.set_defaults(func=cmd_search)

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
