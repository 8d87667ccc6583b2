"""
Tests for the Flask front end.
"""

from techjobs.job_data import JobDataStore
from techjobs.web import STORE_KEY, create_app


class TestPages:
    """GET pages render."""

    def test_index(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert b"Welcome to TechJobs" in resp.data

    def test_list_page_shows_categories(self, client):
        resp = client.get("/list")
        assert resp.status_code == 200
        body = resp.get_data(as_text=True)
        assert "Position Type" in body
        assert "Skill" in body
        assert "Lockerdome" in body
        assert "Bluewolf" in body
        assert "column=employer" in body

    def test_list_jobs_all(self, client):
        resp = client.get("/list/jobs?column=all&value=View+All")
        body = resp.get_data(as_text=True)
        assert resp.status_code == 200
        assert "All Jobs" in body
        assert "5 jobs found" in body

    def test_list_jobs_by_value(self, client):
        resp = client.get("/list/jobs?column=employer&value=Acme+Corp")
        body = resp.get_data(as_text=True)
        assert "Jobs with Employer: Acme Corp" in body
        assert "Jr. Java Engineer" in body
        assert "Android Developer" in body
        assert "Bluewolf" not in body

    def test_search_form(self, client):
        resp = client.get("/search")
        body = resp.get_data(as_text=True)
        assert resp.status_code == 200
        assert 'name="searchType"' in body
        assert 'value="all" checked' in body
        assert "Results" not in body


class TestSearchResults:
    """POST /search/results."""

    def test_search_by_column(self, client):
        resp = client.post("/search/results", data={"searchType": "location", "searchTerm": "kansas"})
        body = resp.get_data(as_text=True)
        assert resp.status_code == 200
        assert "1 job found" in body
        assert "Frontend Developer, Contract" in body

    def test_echoes_inputs(self, client):
        resp = client.post("/search/results", data={"searchType": "employer", "searchTerm": "acme"})
        body = resp.get_data(as_text=True)
        assert 'value="employer" checked' in body
        assert 'value="acme"' in body

    def test_empty_term_lists_all(self, client):
        resp = client.post("/search/results", data={"searchType": "employer", "searchTerm": ""})
        assert "5 jobs found" in resp.get_data(as_text=True)

    def test_missing_fields(self, client):
        resp = client.post("/search/results", data={})
        body = resp.get_data(as_text=True)
        assert resp.status_code == 200
        assert "5 jobs found" in body

    def test_no_results(self, client):
        resp = client.post("/search/results", data={"searchType": "all", "searchTerm": "cobol"})
        assert "No results" in resp.get_data(as_text=True)

    def test_get_not_allowed(self, client):
        assert client.get("/search/results").status_code == 405


class TestEmptyStore:
    """A store that failed to load still serves pages."""

    def test_pages_render_empty(self, tmp_path):
        app = create_app(JobDataStore(tmp_path / "missing.csv"))
        app.config["TESTING"] = True
        client = app.test_client()

        assert client.get("/list").status_code == 200
        resp = client.post("/search/results", data={"searchType": "all", "searchTerm": "java"})
        assert resp.status_code == 200
        assert "No results" in resp.get_data(as_text=True)


def test_store_attached(app, store):
    assert app.extensions[STORE_KEY] is store
