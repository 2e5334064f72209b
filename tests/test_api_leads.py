from app.core.constants import Collections
from app.core.storage import get_store

LEADS_URL = "/api/v1/leads"


class TestCaptureLead:
    """Test cases for lead capture"""

    def test_new_lead(self, client):
        response = client.post(LEADS_URL, json={
            "reportId": "abc123def456",
            "email": "jane@example.com",
            "name": "Jane",
            "company": "Acme",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["leadId"]
        assert data["message"] == "Thank you for your interest!"

        events = get_store().find(Collections.ANALYTICS, {"report_id": "abc123def456"})
        assert [event["event_type"] for event in events] == ["lead_captured"]
        assert events[0]["lead_id"] == data["leadId"]
        assert events[0]["event_data"] == {"email": "jane@example.com", "name": "Jane", "company": "Acme"}

    def test_returning_visitor(self, client):
        payload = {"reportId": "abc123def456", "email": "jane@example.com"}
        first = client.post(LEADS_URL, json=payload).json()
        second = client.post(LEADS_URL, json=payload).json()

        assert second["leadId"] == first["leadId"]
        assert second["message"] == "Welcome back!"
        assert get_store().count(Collections.LEADS) == 1
        assert get_store().count(Collections.ANALYTICS, {"event_type": "lead_captured"}) == 1

    def test_same_email_different_report(self, client):
        first = client.post(LEADS_URL, json={"reportId": "report000001", "email": "jane@example.com"}).json()
        second = client.post(LEADS_URL, json={"reportId": "report000002", "email": "jane@example.com"}).json()

        assert first["leadId"] != second["leadId"]
        assert second["message"] == "Thank you for your interest!"

    def test_invalid_email(self, client):
        response = client.post(LEADS_URL, json={"reportId": "abc123def456", "email": "not-an-email"})
        assert response.status_code == 422

    def test_missing_report_id(self, client):
        response = client.post(LEADS_URL, json={"email": "jane@example.com"})
        assert response.status_code == 422


class TestLeadLookup:
    """Test cases for the returning visitor lookup"""

    def test_existing_lead(self, client):
        lead_id = client.post(LEADS_URL, json={
            "reportId": "abc123def456",
            "email": "jane@example.com",
            "name": "Jane",
        }).json()["leadId"]

        response = client.get(LEADS_URL, params={"email": "jane@example.com", "reportId": "abc123def456"})
        assert response.status_code == 200
        assert response.json() == {"exists": True, "lead": {"id": lead_id, "name": "Jane", "company": None}}

    def test_unknown_lead(self, client):
        response = client.get(LEADS_URL, params={"email": "nobody@example.com", "reportId": "abc123def456"})
        assert response.json() == {"exists": False, "lead": None}

    def test_lookup_requires_both_params(self, client):
        assert client.get(LEADS_URL, params={"email": "jane@example.com"}).status_code == 422
