import httpx
import pytest
from pydantic import ValidationError

from gw2api import (
    ApiError,
    ErrorKind,
    Gw2ApiError,
    HttpError,
    InvalidArgumentError,
    JsonError,
    NoAccessTokenError,
    PolledAfterCompletionError,
)
from gw2api.core.exceptions import ApiErrorBody, classify_exception, decode_api_error
from gw2api.domain.content.models import Build


class TestTaxonomy:
    def test_kinds(self):
        assert HttpError("boom").kind is ErrorKind.HTTP
        assert JsonError("bad").kind is ErrorKind.JSON
        assert ApiError("nope").kind is ErrorKind.API
        assert NoAccessTokenError().kind is ErrorKind.NO_ACCESS_TOKEN

    def test_predicates(self):
        error = ApiError("invalid key", status_code=401)
        assert error.is_api()
        assert not error.is_http()
        assert not error.is_json()
        assert not error.is_no_access_token()

    def test_messages(self):
        assert str(ApiError("invalid key")) == "api error: invalid key"
        assert str(NoAccessTokenError()) == "no access token"

    def test_to_dict(self):
        error = ApiError("invalid key", status_code=401, endpoint="/v2/account")
        assert error.to_dict() == {
            "error": "ApiError",
            "kind": "api",
            "message": "api error: invalid key",
            "details": {"status_code": 401, "endpoint": "/v2/account"},
        }

    def test_programmer_errors_are_outside_taxonomy(self):
        assert issubclass(InvalidArgumentError, ValueError)
        assert issubclass(PolledAfterCompletionError, RuntimeError)
        assert not issubclass(InvalidArgumentError, Gw2ApiError)
        assert not issubclass(PolledAfterCompletionError, Gw2ApiError)


class TestClassification:
    def test_error_body_round_trip(self):
        body = ApiErrorBody(text="no access token").model_dump_json().encode()
        error = decode_api_error(body, status_code=401, endpoint="/v2/account")

        assert isinstance(error, ApiError)
        assert error.text == "no access token"
        assert error.status_code == 401

    def test_malformed_error_body(self):
        error = decode_api_error(b'{"message": "wrong shape"}', status_code=500)
        assert isinstance(error, JsonError)
        assert isinstance(error.original_exception, ValidationError)

    def test_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Build.model_validate({"id": "x"})

        error = classify_exception(exc_info.value, "/v2/build")
        assert isinstance(error, JsonError)
        assert error.details["endpoint"] == "/v2/build"

    def test_timeout(self):
        error = classify_exception(httpx.ReadTimeout("timed out"))
        assert isinstance(error, HttpError)
        assert error.details["reason"] == "timeout"

    def test_network_error(self):
        error = classify_exception(httpx.ConnectError("refused"))
        assert error.is_http()
        assert error.details["reason"] == "network"

    def test_taxonomy_errors_pass_through(self):
        original = NoAccessTokenError("/v2/account")
        assert classify_exception(original) is original
