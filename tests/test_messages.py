import dataclasses

import pytest

from sensorlink.messages import (
    RpcError,
    SensorData,
    SensorRequest,
    ServerResponse,
    StatusCode,
)


def test_sensor_data_defaults_are_empty():
    data = SensorData()
    assert (data.id, data.temperature, data.timestamp) == ("", 0.0, 0)


def test_sensor_data_equality_by_value():
    assert SensorData("a", 55.0, 7) == SensorData(id="a", temperature=55.0, timestamp=7)
    assert SensorData("a", 55.0, 7) != SensorData("a", 56.0, 7)


def test_messages_are_immutable():
    request = SensorRequest(sensor_id="sensor_112")
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.sensor_id = "other"  # type: ignore[misc]
    assert request.sensor_id == "sensor_112"


def test_server_response_carries_status():
    assert ServerResponse(status="Received!").status == "Received!"
    assert ServerResponse().status == ""


def test_status_codes_follow_wire_numbers():
    assert StatusCode(16) is StatusCode.UNAUTHENTICATED
    assert StatusCode(3) is StatusCode.INVALID_ARGUMENT
    assert StatusCode(0) is StatusCode.OK


def test_rpc_error_keeps_code_and_details():
    error = RpcError(StatusCode.INVALID_ARGUMENT, "Temperature cannot be negative here")
    assert error.code is StatusCode.INVALID_ARGUMENT
    assert error.details == "Temperature cannot be negative here"
    message = str(error)
    assert "INVALID_ARGUMENT" in message
    assert "Temperature cannot be negative here" in message


def test_rpc_error_is_an_exception_carrying_unauthenticated_code():
    error = RpcError(StatusCode.UNAUTHENTICATED, "Invalid or missing token")
    assert isinstance(error, Exception)
    assert error.code is StatusCode.UNAUTHENTICATED
    assert error.code.value == 16
    assert error.details == "Invalid or missing token"