import pytest
from fastapi.testclient import TestClient

from vpic_lookup.api.vehicles import get_nhtsa_service
from vpic_lookup.main import app

VIN = "5YJ3E1EA7KF317000"


@pytest.fixture
def client_for(make_service):
    def _client(handler):
        app.dependency_overrides[get_nhtsa_service] = lambda: make_service(handler)
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


def test_health():
    client = TestClient(app)
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["status"] == "online"


def test_decode_vin(client_for, handler_cls, decode_payload):
    client = client_for(handler_cls(payload=decode_payload([("Make", "TESLA"), ("Model", "Model 3")])))
    response = client.get("/api/vehicles/decode-vin", params={"vin": VIN})
    assert response.status_code == 200
    assert response.json() == {"Make": "TESLA", "Model": "Model 3"}


def test_describe_vin(client_for, handler_cls, decode_payload):
    pairs = [("Model Year", "2019"), ("Make", "TESLA"), ("Model", "Model 3"), ("Trim", "Long Range")]
    client = client_for(handler_cls(payload=decode_payload(pairs)))
    response = client.get("/api/vehicles/describe-vin", params={"vin": VIN, "model_year": 2019})
    assert response.status_code == 200
    assert response.json() == {
        "Model_Year": "2019",
        "Make": "TESLA",
        "Model": "MODEL 3",
        "Trim": "LONG RANGE",
        "Engine": None,
    }


def test_invalid_vin_is_400(client_for, handler_cls):
    handler = handler_cls(payload={"Count": 1, "Results": []})
    response = client_for(handler).get("/api/vehicles/decode-vin", params={"vin": "TOO-SHORT"})
    assert response.status_code == 400
    assert "17 characters" in response.json()["detail"]
    assert handler.requests == []


def test_no_data_is_404(client_for, handler_cls):
    client = client_for(handler_cls(payload={"Count": 0, "Results": []}))
    response = client.get("/api/vehicles/recalls", params={"model_year": 2019, "make": "TESLA", "model": "MODEL 3"})
    assert response.status_code == 404


def test_upstream_failure_is_502(client_for, handler_cls):
    client = client_for(handler_cls(status_code=503, text="Service Unavailable"))
    response = client.get("/api/vehicles/recalls", params={"model_year": 2019, "make": "TESLA", "model": "MODEL 3"})
    assert response.status_code == 502


def test_recalls(client_for, handler_cls):
    records = [{"NHTSACampaignNumber": "19V123000"}]
    client = client_for(handler_cls(payload={"Count": 1, "Results": records}))
    response = client.get("/api/vehicles/recalls", params={"model_year": 2019, "make": "TESLA", "model": "MODEL 3"})
    assert response.status_code == 200
    assert response.json() == records
