from unittest import mock

import pytest

from phonetic.deploy.worker import CORS_HEADERS, FlaskException, app, validate_and_unpack
from phonetic.dictionary import Dictionaries
from phonetic.dispatch import ConversionRequest, Operation


@pytest.fixture
def client(dictionaries: Dictionaries):
    """Flask test client that converts text with the `dictionaries` fixture."""
    with mock.patch("phonetic.deploy.worker.get_dictionaries") as mock_get_dictionaries:
        mock_get_dictionaries.return_value = dictionaries
        with app.test_client() as client:
            yield client


def test_flask_exception():
    """Test `FlaskException` `to_dict` produces the correct dictionary."""
    exception = FlaskException("This is a test", 404, code="NOT_FOUND", payload={"blah": "hi"})
    assert exception.to_dict() == {"blah": "hi", "code": "NOT_FOUND", "message": "This is a test"}


def test_validate_and_unpack():
    """Test `validate_and_unpack` handles all sorts of arguments."""
    args = {"text": "Hello world", "operation": "PairedLookup"}
    expected = ConversionRequest("Hello world", Operation.PAIRED_LOOKUP)
    assert validate_and_unpack(args) == expected  # type: ignore

    with pytest.raises(FlaskException):
        validate_and_unpack({})  # type: ignore

    with pytest.raises(FlaskException):  # `operation` argument missing
        validate_and_unpack({"text": "Hello world"})  # type: ignore

    with pytest.raises(FlaskException):  # `text` argument missing
        validate_and_unpack({"operation": "PairedLookup"})  # type: ignore

    with pytest.raises(FlaskException):  # `text` must be a string
        validate_and_unpack({**args, "text": 1.0})  # type: ignore

    with pytest.raises(FlaskException):  # `operation` must be known
        validate_and_unpack({**args, "operation": "SentRes"})  # type: ignore

    with pytest.raises(FlaskException):  # `text` must be smaller than `max_chars`
        validate_and_unpack({**args, "text": "a" * 2000}, max_chars=1000)  # type: ignore


def test_healthy(client):
    response = client.get("/healthy")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "ok"


def test_convert__paired(client):
    """Test `/api/convert` responds with word pairs."""
    response = client.post("/api/convert", json={"text": "Cat dog", "operation": "PairedLookup"})
    assert response.status_code == 200
    assert response.get_json() == {
        "kind": "paired",
        "pairs": [{"text": "Cat", "phonetic": "k ae t"}, {"text": "dog", "phonetic": "dog"}],
    }
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_convert__sentence(client):
    """Test `/api/convert` responds with only the pronunciations."""
    json = {"text": " Hello.  world ", "operation": "SentenceLookup"}
    response = client.post("/api/convert", json=json)
    assert response.status_code == 200
    assert response.get_json() == {"kind": "sentence", "words": ["HH AH L OW", "/wˈɜːld/"]}


def test_convert__empty(client):
    """Test `/api/convert` accepts empty text."""
    for operation, key in [("PairedLookup", "pairs"), ("SentenceLookup", "words")]:
        response = client.post("/api/convert", json={"text": "", "operation": operation})
        assert response.status_code == 200
        assert response.get_json()[key] == []


def test_convert__invalid(client):
    """Test `/api/convert` rejects malformed requests with an error code."""
    cases = [
        ({"text": "Hello"}, "MISSING_ARGUMENT"),
        ({"text": 1, "operation": "PairedLookup"}, "INVALID_TEXT"),
        ({"text": "Hello", "operation": "MapRes"}, "INVALID_OPERATION"),
        ({"text": "a" * 20000, "operation": "PairedLookup"}, "INVALID_TEXT_LENGTH_EXCEEDED"),
    ]
    for json, code in cases:
        response = client.post("/api/convert", json=json)
        assert response.status_code == 400
        assert response.get_json()["code"] == code
        assert response.headers["Access-Control-Allow-Origin"] == "*"

    response = client.post("/api/convert", data="Hello", content_type="text/plain")
    assert response.status_code == 400
    assert response.get_json()["code"] == "MISSING_ARGUMENT"


def test_convert__unknown_error(client):
    """Test `/api/convert` responds with an error code for unexpected errors."""
    with mock.patch("phonetic.deploy.worker.dispatch") as mock_dispatch:
        mock_dispatch.side_effect = RuntimeError("Oops")
        response = client.post("/api/convert", json={"text": "Hi", "operation": "PairedLookup"})
    assert response.status_code == 500
    assert response.get_json()["code"] == "UNKNOWN_ERROR"


def test_preflight(client):
    """Test CORS preflight requests are answered without content."""
    for path in ["/api/convert", "/healthy"]:
        response = client.options(path)
        assert response.status_code == 204
        assert response.get_data() == b""
        for key, value in CORS_HEADERS.items():
            assert response.headers[key] == value
