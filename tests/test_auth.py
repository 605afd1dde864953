import pytest

from sensorlink.auth import (
    STREAM_TOKEN,
    UNARY_TOKEN,
    is_valid_token,
    stream_auth_interceptor,
    unary_auth_interceptor,
)
from sensorlink.messages import RpcError, SensorData, StatusCode


def _echo(request, metadata):
    return (request, metadata)


@pytest.mark.parametrize(
    "header, expected",
    [
        (f"Bearer {UNARY_TOKEN}", True),
        (f"bearer {UNARY_TOKEN}", False),
        (f"Bearer  {UNARY_TOKEN}", False),
        (f"Bearer {UNARY_TOKEN} extra", False),
        ("Bearer placeholder", False),
        (UNARY_TOKEN, False),
        ("", False),
    ],
)
def test_is_valid_token(header, expected):
    assert is_valid_token(header) is expected


def test_unary_passes_valid_request_to_handler():
    metadata = {"authorization": [f"Bearer {UNARY_TOKEN}"]}
    request = SensorData(id="a", temperature=55.0)
    assert unary_auth_interceptor(metadata, request, _echo) == (request, metadata)


def test_unary_accepts_single_string_and_any_key_case():
    metadata = {"Authorization": f"Bearer {UNARY_TOKEN}"}
    result = unary_auth_interceptor(metadata, "req", _echo)
    assert result[0] == "req"


def test_unary_rejects_missing_metadata():
    with pytest.raises(RpcError) as info:
        unary_auth_interceptor(None, "req", _echo)
    assert info.value.code is StatusCode.UNAUTHENTICATED
    assert info.value.details == "Missing Metadata"


@pytest.mark.parametrize(
    "metadata",
    [{}, {"authorization": []}, {"authorization": ["Bearer placeholder"]}],
)
def test_unary_rejects_bad_token(metadata):
    with pytest.raises(RpcError) as info:
        unary_auth_interceptor(metadata, "req", _echo)
    assert info.value.code is StatusCode.UNAUTHENTICATED
    assert info.value.details == "Invalid or missing token"


def test_unary_does_not_call_handler_when_rejected():
    calls = []
    with pytest.raises(RpcError):
        unary_auth_interceptor({}, "req", lambda r, m: calls.append(r))
    assert calls == []


def test_stream_passes_requests_to_handler():
    metadata = {"authorization": [f"Bearer {STREAM_TOKEN}"]}
    requests = [SensorData(id="1"), SensorData(id="2")]
    assert stream_auth_interceptor(metadata, requests, len) == 2


def test_stream_rejects_unary_token():
    metadata = {"authorization": [f"Bearer {UNARY_TOKEN}"]}
    with pytest.raises(RpcError) as info:
        stream_auth_interceptor(metadata, [], len)
    assert info.value.details == "Invalid or missing token"


def test_stream_rejects_missing_metadata():
    with pytest.raises(RpcError) as info:
        stream_auth_interceptor(None, [], len)
    assert info.value.code is StatusCode.UNAUTHENTICATED
    assert info.value.details == "Missing metadata"