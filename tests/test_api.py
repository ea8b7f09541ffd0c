"""
Tests for the HTTP service and the report builder.
"""

from cnpj_alfa import __version__
from cnpj_alfa.services.report import describe, describe_batch


class TestDescribe:
    def test_valid(self):
        report = describe("12.abc.345/01de-35")
        assert report.valid
        assert report.normalized == "12ABC34501DE35"
        assert report.formatted == "12.ABC.345/01DE-35"
        assert report.alphanumeric
        assert report.check_digits == "35"

    def test_wrong_digits_reports_expected(self):
        report = describe("12ABC34501DE00")
        assert not report.valid
        assert report.check_digits == "35"

    def test_body_only(self):
        report = describe("59952259000")
        assert not report.valid
        assert report.check_digits is None

    def test_numeric(self):
        report = describe("59.952.259/0001-85")
        assert report.valid
        assert not report.alphanumeric

    def test_batch_counts(self):
        batch = describe_batch(["12ABC34501DE35", "12ABC34501DE00", "SHORT"])
        assert batch.valid_count == 1
        assert batch.invalid_count == 2
        assert [r.valid for r in batch.results] == [True, False, False]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}


class TestValidateEndpoints:
    def test_validate_one(self, client):
        response = client.get("/api/v1/cnpj/validate", params={"value": "12.ABC.345/01DE-35"})
        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is True
        assert body["formatted"] == "12.ABC.345/01DE-35"
        assert body["input"] == "12.ABC.345/01DE-35"

    def test_validate_one_invalid(self, client):
        response = client.get("/api/v1/cnpj/validate", params={"value": "12ABC34501DE00"})
        assert response.status_code == 200
        assert response.json()["valid"] is False

    def test_validate_batch(self, client):
        response = client.post(
            "/api/v1/cnpj/validate",
            json={"values": ["00.000.000/0001-91", "12ABC34501DE00"]},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["valid_count"] == 1
        assert body["invalid_count"] == 1
        assert len(body["results"]) == 2

    def test_validate_batch_limit(self, client, monkeypatch):
        monkeypatch.setenv("CNPJ_ALFA_BATCH_LIMIT", "2")
        from cnpj_alfa.config import get_settings
        get_settings.cache_clear()

        response = client.post(
            "/api/v1/cnpj/validate",
            json={"values": ["00000000000191"] * 3},
        )
        assert response.status_code == 422

    def test_validate_batch_missing_values(self, client):
        response = client.post("/api/v1/cnpj/validate", json={})
        assert response.status_code == 422


class TestFormatEndpoint:
    def test_format(self, client):
        response = client.get("/api/v1/cnpj/format", params={"value": "12abc34501de35"})
        assert response.status_code == 200
        assert response.json() == {
            "value": "12abc34501de35",
            "formatted": "12.ABC.345/01DE-35",
        }

    def test_format_short(self, client):
        response = client.get("/api/v1/cnpj/format", params={"value": "12.abc"})
        assert response.json()["formatted"] == "12ABC"


class TestCheckDigitsEndpoint:
    def test_check_digits(self, client):
        response = client.post("/api/v1/cnpj/check-digits", json={"body": "12.abc.345/01de"})
        assert response.status_code == 200
        assert response.json() == {
            "body": "12ABC34501DE",
            "check_digits": "35",
            "cnpj": "12ABC34501DE35",
            "formatted": "12.ABC.345/01DE-35",
        }

    def test_invalid_length(self, client):
        response = client.post("/api/v1/cnpj/check-digits", json={"body": "SHORT"})
        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "InvalidLengthError"
        assert "12" in body["detail"]

    def test_error_schema_documented(self, client):
        spec = client.get("/openapi.json").json()
        responses = spec["paths"]["/api/v1/cnpj/check-digits"]["post"]["responses"]
        schema = responses["422"]["content"]["application/json"]["schema"]
        assert schema["$ref"].endswith("/ErrorResponse")
