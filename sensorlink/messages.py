"""Sensor service messages, status codes and the error raised by handlers."""

from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class SensorData:
    """One reading taken by a sensor."""

    id: str = ""
    temperature: float = 0.0
    timestamp: int = 0


@dataclass(frozen=True)
class SensorRequest:
    """A request for the readings of one sensor."""

    sensor_id: str = ""


@dataclass(frozen=True)
class ServerResponse:
    """The server's answer to a reading or a batch of readings."""

    status: str = ""


class StatusCode(enum.Enum):
    """Outcome codes of a remote call."""

    OK = 0
    CANCELLED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


class RpcError(Exception):
    """A call that ended with a status other than OK."""

    def __init__(self, code: StatusCode, details: str) -> None:
        super().__init__(f"{code.name}: {details}")
        self.code = code
        self.details = details