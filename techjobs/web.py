"""
Flask front end: home, list and search pages.

The store is attached to the app at creation time and read back from
``current_app.extensions`` by the views.
"""

from typing import Optional

from flask import Blueprint, Flask, current_app, render_template, request

from .job_data import JobDataStore, get_store
from .search import COLUMN_CHOICES, list_jobs, list_title, run_search, table_choices

bp = Blueprint("techjobs", __name__)

STORE_KEY = "techjobs_store"


def _store() -> JobDataStore:
    return current_app.extensions[STORE_KEY]


@bp.route("/")
def index():
    return render_template("index.html")


@bp.route("/list")
def list_page():
    return render_template(
        "list.html",
        columns=COLUMN_CHOICES,
        table_choices=table_choices(_store()),
    )


@bp.route("/list/jobs")
def list_jobs_page():
    column = request.args.get("column", "all")
    value = request.args.get("value", "")
    return render_template(
        "list-jobs.html",
        title=list_title(column, value),
        jobs=list_jobs(_store(), column, value),
    )


@bp.route("/search")
def search_page():
    return render_template("search.html", columns=COLUMN_CHOICES, search_type="all", search_term="")


@bp.route("/search/results", methods=["POST"])
def search_results():
    results = run_search(
        _store(),
        request.form.get("searchType"),
        request.form.get("searchTerm"),
    )
    return render_template(
        "search.html",
        jobs=results.jobs,
        columns=results.columns,
        search_type=results.search_type,
        search_term=results.search_term,
    )


def create_app(store: Optional[JobDataStore] = None) -> Flask:
    """
    Build the Flask app.

    Args:
        store: Job store to serve (default: the process-wide store)
    """
    app = Flask(__name__)
    app.extensions[STORE_KEY] = store if store is not None else get_store()
    app.register_blueprint(bp)
    return app
