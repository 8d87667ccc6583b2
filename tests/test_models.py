"""
Tests for the job record model.
"""

import dataclasses

import pytest

from techjobs.models import CoreCompetency, Employer, Job, Location, PositionType


class TestAttributeValue:
    def test_str_is_value(self):
        assert str(Employer("Acme Corp")) == "Acme Corp"

    def test_equality_ignores_case(self):
        assert Employer("Acme") == Employer("ACME")
        assert hash(Employer("Acme")) == hash(Employer("acme"))

    def test_different_categories_not_equal(self):
        assert Employer("Java") != CoreCompetency("Java")

    def test_immutable(self):
        employer = Employer("Acme")
        with pytest.raises(AttributeError):
            employer.value = "Other"
        with pytest.raises(AttributeError):
            employer.extra = 1

    def test_repr(self):
        assert repr(Location("NYC")) == "Location('NYC')"


class TestJob:
    @pytest.fixture
    def job(self):
        return Job(
            id=1,
            name="Jr. Java Engineer",
            employer=Employer("Acme"),
            location=Location("NYC"),
            position_type=PositionType("Web - Back End"),
            core_competency=CoreCompetency("Java"),
        )

    def test_frozen(self, job):
        with pytest.raises(dataclasses.FrozenInstanceError):
            job.name = "Other"

    def test_to_dict(self, job):
        assert job.to_dict() == {
            "id": 1,
            "name": "Jr. Java Engineer",
            "employer": "Acme",
            "location": "NYC",
            "positionType": "Web - Back End",
            "coreCompetency": "Java",
        }
