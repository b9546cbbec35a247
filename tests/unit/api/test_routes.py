"""HTTP surface tests using FastAPI's TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from costsplit.api.app import create_app
from costsplit.core.config import AppSettings, StorageConfig, UploadConfig

REPORT = (
    b"Report Title\n"
    b"Service Name,Cost,Original Cost\n"
    b"SAP,10.5,12\n"
    b"--this is the end of report--,,\n"
)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def client(upload_dir):
    settings = AppSettings(
        storage=StorageConfig(backend="memory"),
        upload=UploadConfig(upload_dir=str(upload_dir)),
    )
    with TestClient(create_app(settings)) as test_client:
        yield test_client


def _staged_files(upload_dir):
    return list(upload_dir.iterdir()) if upload_dir.exists() else []


def test_root(client):
    assert client.get("/").json() == {"message": "CSV server running"}


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


class TestUpload:
    def test_parses_report(self, client, upload_dir):
        resp = client.post("/upload", files={"file": ("billing.csv", REPORT, "text/csv")})
        assert resp.status_code == 200
        assert resp.json() == {
            "success": True,
            "data": [{"Service Name": "SAP", "Cost": "10.50", "Original Cost": "12.00"}],
            "columns": ["Service Name", "Cost", "Original Cost"],
            "rowCount": 1,
        }
        assert _staged_files(upload_dir) == []

    def test_rejects_non_csv(self, client):
        resp = client.post("/upload", files={"file": ("notes.txt", b"a,b\n1,2", "text/plain")})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Only CSV files are allowed"}

    def test_missing_file(self, client):
        resp = client.post("/upload")
        assert resp.status_code == 400
        assert "No file" in resp.json()["error"]

    def test_too_few_rows(self, client, upload_dir):
        resp = client.post("/upload", files={"file": ("billing.csv", b"Service Name,Cost\n", "text/csv")})
        assert resp.status_code == 400
        assert "enough data" in resp.json()["error"]
        assert _staged_files(upload_dir) == []

    def test_only_junk_rows(self, client, upload_dir):
        body = b"Service Name,Cost\n--this is the end,\n,,\n"
        resp = client.post("/upload", files={"file": ("billing.csv", body, "text/csv")})
        assert resp.status_code == 400
        assert resp.json()["error"] == "No valid rows found in the CSV"
        assert _staged_files(upload_dir) == []

    def test_unexpected_failure_is_500_and_cleans_up(self, client, upload_dir, monkeypatch):
        def boom(path):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(client.app.state.parser, "parse_file", boom)
        resp = client.post("/upload", files={"file": ("billing.csv", REPORT, "text/csv")})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Error processing CSV file: disk on fire"}
        assert _staged_files(upload_dir) == []


class TestClients:
    def test_defaults_are_seeded(self, client):
        assert client.get("/clients").json() == {
            "success": True,
            "clients": ["Cliente 1", "Cliente 2", "Cliente 3"],
        }

    def test_add_and_delete(self, client):
        resp = client.post("/clients", json={"name": " Acme "})
        assert resp.json()["clients"][-1] == "Acme"
        resp = client.delete("/clients/Acme")
        assert "Acme" not in resp.json()["clients"]

    def test_blank_name(self, client):
        resp = client.post("/clients", json={"name": "  "})
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_missing_body(self, client):
        resp = client.post("/clients")
        assert resp.status_code == 400
        assert resp.json()["error"].startswith("Invalid request")


class TestApplications:
    def test_duplicate_rejected(self, client):
        resp = client.post("/applications", json={"name": "SAP"})
        assert resp.status_code == 400
        assert "already exists" in resp.json()["error"]

    def test_add_and_delete(self, client):
        assert client.post("/applications", json={"name": "Billing"}).json()["applications"][-1] == "Billing"
        assert "SAP" not in client.delete("/applications/SAP").json()["applications"]


class TestServiceTemplates:
    def test_upsert_and_list(self, client):
        body = {"serviceName": "SAP", "distribution": [
            {"client": "A", "percentage": 60},
            {"client": "B", "percentage": 40},
        ]}
        resp = client.post("/service-templates", json=body)
        assert resp.status_code == 200
        assert resp.json()["templates"][0]["serviceName"] == "SAP"
        assert client.get("/service-templates").json()["templates"][0]["distribution"][1]["client"] == "B"

    def test_bad_total(self, client):
        body = {"serviceName": "SAP", "distribution": [
            {"client": "A", "percentage": 60},
            {"client": "B", "percentage": 30},
        ]}
        resp = client.post("/service-templates", json=body)
        assert resp.status_code == 400
        assert "actual: 90%" in resp.json()["error"]

    def test_distribution_not_a_list(self, client):
        resp = client.post("/service-templates", json={"serviceName": "SAP", "distribution": "A"})
        assert resp.status_code == 400

    def test_nan_percentage_is_rejected_and_not_stored(self, client):
        body = b'{"serviceName": "SAP", "distribution": [{"client": "A", "percentage": NaN}]}'
        resp = client.post(
            "/service-templates", content=body, headers={"Content-Type": "application/json"}
        )
        assert resp.status_code == 400
        assert "non-finite" in resp.json()["error"]
        assert client.get("/service-templates").json()["templates"] == []

    def test_body_that_is_not_json(self, client):
        resp = client.post(
            "/service-templates", content=b"serviceName=SAP", headers={"Content-Type": "application/json"}
        )
        assert resp.status_code == 400
        assert "error" in resp.json()

    def test_delete(self, client):
        client.post("/service-templates", json={
            "serviceName": "SAP", "distribution": [{"client": "A", "percentage": 100}],
        })
        assert client.delete("/service-templates/SAP").json() == {"success": True, "templates": []}
