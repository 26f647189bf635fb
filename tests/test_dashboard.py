"""
Tests for the dashboard aggregation endpoint.
"""

import pytest

from applytrack.models.job_application import ApplicationStatus


def _post(client, headers, sample_application_data, status):
    response = client.post(
        "/api/v1/applications",
        json={**sample_application_data, "status": status},
        headers=headers
    )
    assert response.status_code == 201
    return response.json()


def _assert_counts_add_up(stats):
    assert stats["totalApplications"] == (
        stats["appliedCount"]
        + stats["interviewingCount"]
        + stats["offeredCount"]
        + stats["rejectedCount"]
    )


class TestDashboard:

    def test_empty_dashboard_is_all_zero(self, client, owner):
        _, headers = owner

        response = client.get("/api/v1/dashboard/stats", headers=headers)

        assert response.status_code == 200
        assert response.json() == {
            "totalApplications": 0,
            "appliedCount": 0,
            "interviewingCount": 0,
            "offeredCount": 0,
            "rejectedCount": 0,
        }

    def test_counts_per_status(self, client, owner, sample_application_data):
        _, headers = owner
        for status in ["APPLIED", "APPLIED", "INTERVIEWING", "OFFERED", "REJECTED", "REJECTED", "REJECTED"]:
            _post(client, headers, sample_application_data, status)

        stats = client.get("/api/v1/dashboard/stats", headers=headers).json()

        assert stats == {
            "totalApplications": 7,
            "appliedCount": 2,
            "interviewingCount": 1,
            "offeredCount": 1,
            "rejectedCount": 3,
        }
        _assert_counts_add_up(stats)

    @pytest.mark.parametrize("status", [s.value for s in ApplicationStatus])
    def test_every_status_is_counted(self, client, owner, sample_application_data, status):
        _, headers = owner
        _post(client, headers, sample_application_data, status)

        stats = client.get("/api/v1/dashboard/stats", headers=headers).json()

        assert stats["totalApplications"] == 1
        _assert_counts_add_up(stats)

    def test_counts_follow_status_updates(self, client, owner, sample_application_data):
        _, headers = owner
        created = _post(client, headers, sample_application_data, "APPLIED")

        client.put(
            f"/api/v1/applications/{created['id']}",
            json={**sample_application_data, "status": "OFFERED"},
            headers=headers
        )
        stats = client.get("/api/v1/dashboard/stats", headers=headers).json()

        assert stats["appliedCount"] == 0
        assert stats["offeredCount"] == 1
        _assert_counts_add_up(stats)

    def test_counts_are_scoped_to_owner(self, client, owner, intruder, sample_application_data):
        _, owner_headers = owner
        _, intruder_headers = intruder
        for status in ["APPLIED", "OFFERED"]:
            _post(client, owner_headers, sample_application_data, status)
        _post(client, intruder_headers, sample_application_data, "REJECTED")

        owner_stats = client.get("/api/v1/dashboard/stats", headers=owner_headers).json()
        intruder_stats = client.get("/api/v1/dashboard/stats", headers=intruder_headers).json()

        assert owner_stats["totalApplications"] == 2
        assert owner_stats["rejectedCount"] == 0
        assert intruder_stats["totalApplications"] == 1
        assert intruder_stats["rejectedCount"] == 1
        _assert_counts_add_up(owner_stats)
        _assert_counts_add_up(intruder_stats)

    def test_dashboard_requires_authentication(self, client):
        response = client.get("/api/v1/dashboard/stats")

        assert response.status_code == 401
