"""Error classification tests."""

import dataclasses

import pytest

from jobo.errors import (
    ApiError,
    ErrorKind,
    JoboError,
    classify_response,
    extract_detail,
    parse_retry_after,
    raise_for_response,
)


@pytest.mark.parametrize(
    "status, kind",
    [
        (401, ErrorKind.AUTHENTICATION),
        (429, ErrorKind.RATE_LIMIT),
        (400, ErrorKind.VALIDATION),
        (500, ErrorKind.SERVER),
        (502, ErrorKind.SERVER),
        (503, ErrorKind.SERVER),
        (599, ErrorKind.SERVER),
        (403, ErrorKind.GENERIC),
        (404, ErrorKind.GENERIC),
        (409, ErrorKind.GENERIC),
        (422, ErrorKind.GENERIC),
        (304, ErrorKind.GENERIC),
    ],
)
def test_status_maps_to_kind(status, kind):
    error = classify_response(status, {}, "")
    assert error is not None
    assert error.kind == kind
    assert error.status_code == status


@pytest.mark.parametrize("status", [200, 201, 204, 299])
def test_success_is_not_an_error(status):
    assert classify_response(status, {}, "garbage") is None


def test_retry_after_parsed_for_rate_limit():
    error = classify_response(429, {"Retry-After": "30"}, "")
    assert error.retry_after_seconds == 30


def test_retry_after_lookup_is_case_insensitive():
    assert parse_retry_after({"retry-after": " 12 "}) == 12


@pytest.mark.parametrize(
    "headers",
    [{}, {"Retry-After": "soon"}, {"Retry-After": "Wed, 21 Oct 2015 07:28:00 GMT"}],
)
def test_retry_after_unset_when_missing_or_not_numeric(headers):
    error = classify_response(429, headers, "")
    assert error.kind == ErrorKind.RATE_LIMIT
    assert error.retry_after_seconds is None


def test_retry_after_ignored_outside_rate_limit():
    error = classify_response(503, {"Retry-After": "30"}, "")
    assert error.retry_after_seconds is None


def test_detail_from_json_body():
    error = classify_response(400, {}, '{"detail":"bad cursor"}')
    assert error.detail == "bad cursor"
    assert error.message == "HTTP 400: bad cursor"
    assert error.response_body == '{"detail":"bad cursor"}'


def test_non_json_body_becomes_detail():
    assert extract_detail("not json") == "not json"
    error = classify_response(502, {}, "<html>Bad Gateway</html>")
    assert error.detail == "<html>Bad Gateway</html>"
    assert error.message == "HTTP 502: <html>Bad Gateway</html>"


def test_json_without_detail_has_no_detail():
    error = classify_response(404, {}, "{}")
    assert error.detail is None
    assert error.message == "HTTP 404"


def test_null_detail_is_absent():
    assert extract_detail('{"detail": null}') is None


@pytest.mark.parametrize("body", ['{"detail": 42}', '["detail"]', '"just a string"'])
def test_unusable_json_falls_back_to_raw_body(body):
    assert extract_detail(body) == body


def test_empty_body():
    error = classify_response(500, {}, "")
    assert error.detail is None
    assert error.response_body is None
    assert error.message == "HTTP 500"


def test_api_error_is_immutable():
    error = ApiError(kind=ErrorKind.SERVER, status_code=500)
    with pytest.raises(dataclasses.FrozenInstanceError):
        error.status_code = 200


def test_raise_for_response_raises_jobo_error():
    with pytest.raises(JoboError) as exc_info:
        raise_for_response(429, {"Retry-After": "5"}, '{"detail": "slow down"}')

    err = exc_info.value
    assert err.kind == ErrorKind.RATE_LIMIT
    assert err.status_code == 429
    assert err.detail == "slow down"
    assert err.retry_after_seconds == 5
    assert str(err) == "HTTP 429: slow down"


def test_raise_for_response_passes_success():
    raise_for_response(200, {}, "{}")
