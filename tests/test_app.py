import pytest

from universe.settings import get_settings


def test_index_renders_form(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Byte Converter" in response.text
    assert 'name="base_from"' in response.text


def test_convert_form(client):
    response = client.post(
        "/convert",
        data={"value": "255", "base_from": "dec", "base_to": "hex", "upper": "true"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["output"] == "FF"
    assert body["mode"] == "single"


def test_convert_form_byte_list(client):
    response = client.post(
        "/convert", data={"value": "AB CD", "base_from": "hex", "base_to": "bin"}
    )
    assert response.status_code == 200
    assert response.json()["output"] == "10101011 11001101"


def test_convert_form_error(client):
    response = client.post(
        "/convert", data={"value": "ABC", "base_from": "hex", "base_to": "dec"}
    )
    assert response.status_code == 400
    assert "partial bytes" in response.json()["error"]


def test_convert_form_respects_input_limit(client, monkeypatch):
    monkeypatch.setenv("SPARKY_BYTE_CONVERT_MAX_INPUT", "4")
    get_settings.cache_clear()
    response = client.post(
        "/convert", data={"value": "123456", "base_from": "dec", "base_to": "hex"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Value must be at most 4 characters."}


def test_api_convert(client):
    response = client.post(
        "/api/convert",
        json={"tokens": ["28391287459812749"], "source": "dec", "target": "hex"},
    )
    assert response.status_code == 200
    assert response.json() == {"from": "dec", "to": "hex", "output": "64ddb9bbc2158d"}


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"tokens": ["ZG", "U="], "source": "base64", "target": "text"}, "de"),
        ({"tokens": ["255"], "source": "decimal", "target": "binary"}, "11111111"),
        ({"tokens": ["ff"], "source": "HEX", "target": "Decimal"}, "255"),
    ],
)
def test_api_convert_accepts_format_aliases(client, payload, expected):
    response = client.post("/api/convert", json=payload)
    assert response.status_code == 200
    assert response.json()["output"] == expected


def test_api_convert_unknown_format(client):
    response = client.post(
        "/api/convert", json={"tokens": ["7"], "source": "octal", "target": "dec"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input."}


def test_api_convert_error_carries_code(client):
    response = client.post(
        "/api/convert", json={"tokens": ["AA/:"], "source": "b64", "target": "hex"}
    )
    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "character"
    assert "':'" in body["error"]


def test_api_convert_invalid_payload(client):
    response = client.post(
        "/api/convert", json={"tokens": [], "source": "hex", "target": "dec"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid input."}


def test_random_bytes(client):
    response = client.post("/random", data={"count": "8", "format": "b64"})
    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 8
    assert len(body["value"]) == 12


def test_random_bytes_error(client):
    response = client.post("/random", data={"count": "0"})
    assert response.status_code == 400
    assert "Count must be between" in response.json()["error"]
