"""
Tests for the FastAPI routes.

The check routes are mounted under ``/monitoring`` as they would be in a
host application.

Run with: pytest tests/test_api.py -v
"""
import json

import pytest
from fastapi.testclient import TestClient

from health_aggregator import CheckFailure, Error, Ok, create_app, create_container
from health_aggregator.infrastructure.config import Settings
from health_aggregator.presentation.schemas import CheckReportDTO, CheckStatusDTO, EnvironmentDTO


def crash():
    raise RuntimeError("boom")


def replica_lag():
    raise CheckFailure("replica lag 30s")


class BrokenRepr:
    def __repr__(self):
        raise RuntimeError("repr broken")


def make_settings(**overrides) -> Settings:
    values = dict(
        app_name="billing",
        app_version="2.3.1",
        environment="test",
        registry_path=None,
        functional_registry_path=None,
        json_encoder="json",
        concurrent=False,
        mount_prefix="/monitoring",
    )
    values.update(overrides)
    return Settings(**values)


def make_client(registry=None, functional_registry=None, **overrides) -> TestClient:
    container = create_container(
        make_settings(**overrides),
        registry=registry,
        functional_registry=functional_registry,
    )
    return TestClient(create_app(container))


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def client():
    return make_client(registry={"db": lambda: Ok()})


@pytest.fixture
def mixed_client():
    return make_client(
        registry={
            "db": lambda: True,
            "disk": lambda: Error("disk full"),
            "boom": crash,
            "replica": replica_lag,
        },
        functional_registry={"checkout": lambda: Ok()},
    )


# =============================================================================
# ROUTE TESTS
# =============================================================================

class TestLivenessRoute:

    def test_returns_ok(self, client):
        resp = client.get("/monitoring/health_check")

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/json")
        assert resp.json() == {"status": "ok"}

    def test_does_not_run_checks(self):
        """
        SCENARIO: The registry contains only crashing checks
        EXPECTED: Liveness still reports ok
        REASONING: Liveness says the process responds, not that dependencies work
        """
        calls = []

        def check():
            calls.append(1)
            raise RuntimeError("down")

        client = make_client(registry={"db": check})

        resp = client.get("/monitoring/health_check")

        assert resp.json() == {"status": "ok"}
        assert calls == []


class TestEnvironmentRoute:

    def test_returns_environment_metadata(self, client):
        resp = client.get("/monitoring/environment")

        assert resp.status_code == 200
        info = EnvironmentDTO.model_validate(resp.json())
        assert info.application.name == "billing"
        assert info.application.version == "2.3.1"
        assert info.application.environment == "test"
        assert "python" in info.stack


class TestChecksRoute:

    def test_healthy_check(self, client):
        resp = client.get("/monitoring/")

        assert resp.status_code == 200
        document = resp.json()
        assert len(document) == 1
        assert document[0]["db"] == {"status": "ok"}
        assert isinstance(document[0]["time"], float)

    def test_structured_failure(self):
        client = make_client(registry={"disk": lambda: Error("disk full")})

        document = client.get("/monitoring/").json()

        assert document[0]["disk"] == {
            "status": "error",
            "message": [{"type": "error", "message": "disk full"}],
        }
        assert document[0]["time"] >= 0

    def test_crash_reports_unknown_error(self):
        client = make_client(registry={"boom": crash})

        document = client.get("/monitoring/").json()

        assert document[0]["boom"] == {
            "status": "error",
            "message": [{"type": "error", "message": "UNKNOWN ERROR"}],
        }

    def test_mixed_registry_keeps_order_and_isolation(self, mixed_client):
        document = mixed_client.get("/monitoring/").json()

        CheckReportDTO.model_validate(document)
        statuses = {}
        for entry in document:
            name = next(key for key in entry if key != "time")
            statuses[name] = CheckStatusDTO.model_validate(entry[name])

        assert list(statuses) == ["db", "disk", "boom", "replica"]
        assert statuses["db"].status == "ok"
        assert statuses["db"].message is None
        assert statuses["disk"].message[0].message == "disk full"
        assert statuses["boom"].message[0].message == "UNKNOWN ERROR"
        assert statuses["replica"].message[0].message == "replica lag 30s"

    def test_empty_registry(self):
        client = make_client()

        resp = client.get("/monitoring/")

        assert resp.status_code == 200
        assert resp.json() == []

    def test_pydantic_encoder_produces_same_document(self):
        registry = {"disk": lambda: Error("disk full")}
        stdlib = make_client(registry=registry, json_encoder="json").get("/monitoring/").json()
        pydantic = make_client(registry=registry, json_encoder="pydantic").get("/monitoring/").json()

        for document in (stdlib, pydantic):
            document[0]["time"] = 0.0
        assert stdlib == pydantic

    def test_concurrent_executor(self):
        client = make_client(
            registry={"db": lambda: True, "boom": crash, "cache": lambda: True},
            concurrent=True,
            max_workers=3,
        )

        document = client.get("/monitoring/").json()

        assert [next(k for k in entry if k != "time") for entry in document] == ["db", "boom", "cache"]
        assert document[0]["db"]["status"] == "ok"
        assert document[1]["boom"]["status"] == "error"

    def test_misbehaving_return_value_keeps_sibling_results(self):
        """
        SCENARIO: One check returns an object that cannot even be printed
        EXPECTED: 200 with the healthy sibling reported ok
        REASONING: A bad check must not cost the report its other results
        """
        client = make_client(registry={"db": Ok, "weird": BrokenRepr})

        resp = client.get("/monitoring/")

        assert resp.status_code == 200
        document = resp.json()
        assert document[0]["db"] == {"status": "ok"}
        assert document[1]["weird"]["message"][0]["message"] == "UNKNOWN ERROR"


class TestFunctionalRoute:

    def test_runs_functional_registry(self, mixed_client):
        document = mixed_client.get("/monitoring/functional").json()

        assert len(document) == 1
        assert document[0]["checkout"] == {"status": "ok"}

    def test_not_found_without_functional_registry(self, client):
        resp = client.get("/monitoring/functional")

        assert resp.status_code == 404
        assert resp.text == "not found"


class TestNotFound:

    @pytest.mark.parametrize("path", ["/monitoring/unknown", "/monitoring/health_check/extra", "/monitoring/a/b/c"])
    def test_unmatched_paths(self, client, path):
        resp = client.get(path)

        assert resp.status_code == 404
        assert resp.text == "not found"

    def test_unmatched_path_does_not_run_checks(self):
        calls = []
        client = make_client(registry={"db": lambda: calls.append(1)})

        client.get("/monitoring/nope")

        assert calls == []


class TestMounting:

    def test_bare_prefix_serves_report(self):
        client = make_client(registry={"db": lambda: True})

        resp = client.get("/monitoring", follow_redirects=False)

        assert resp.status_code == 200
        assert resp.json()[0]["db"] == {"status": "ok"}

    def test_custom_prefix(self):
        client = make_client(registry={"db": lambda: True}, mount_prefix="/ops/health")

        assert client.get("/ops/health/health_check").json() == {"status": "ok"}
        assert client.get("/ops/health/").json()[0]["db"] == {"status": "ok"}

    def test_root_mount(self):
        client = make_client(registry={"db": lambda: True}, mount_prefix="")

        assert client.get("/health_check").json() == {"status": "ok"}
        assert client.get("/").json()[0]["db"] == {"status": "ok"}


class TestSerializationFailure:

    def test_unencodable_report_returns_500(self):
        """
        SCENARIO: A check's reason cannot be serialized
        EXPECTED: 500 response rather than a partial document
        REASONING: Serialization failure is fatal for the request
        """
        circular = []
        circular.append(circular)
        client = make_client(registry={"weird": lambda: Error(circular)})

        resp = client.get("/monitoring/")

        assert resp.status_code == 500
        assert resp.text == "internal server error"

    def test_liveness_is_unaffected(self):
        circular = []
        circular.append(circular)
        client = make_client(registry={"weird": lambda: Error(circular)})

        assert json.loads(client.get("/monitoring/health_check").content) == {"status": "ok"}
