"""The sensor service: unary, server-streaming, client-streaming and chat calls."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Optional, Union

from sensorlink.messages import (
    RpcError,
    SensorData,
    SensorRequest,
    ServerResponse,
    StatusCode,
)

logger = logging.getLogger(__name__)

_STREAM_LENGTH = 10
_WARNING_THRESHOLD = 80


class SensorServer:
    """Handles sensor readings sent by clients."""

    def __init__(self, processing_delay: float = 4.0, stream_interval: float = 1.0) -> None:
        self.processing_delay = processing_delay
        self.stream_interval = stream_interval

    def send_sensor_data(
        self,
        data: SensorData,
        metadata: Optional[Mapping[str, Union[str, Sequence[str]]]] = None,
    ) -> ServerResponse:
        """Accept one reading; negative temperatures are rejected."""
        logger.info(
            "Received Data from Sensors: %s, %s, %s",
            data.id,
            data.temperature,
            data.timestamp,
        )
        if metadata is not None:
            client_ids = metadata.get("client-id")
            if isinstance(client_ids, str):
                client_ids = [client_ids]
            if client_ids:
                logger.info("Client ID from metadata: %s", client_ids[0])

        if data.temperature < 0:
            raise RpcError(StatusCode.INVALID_ARGUMENT, "Temperature cannot be negative here")

        time.sleep(self.processing_delay)
        return ServerResponse(status="Received!")

    def get_sensor_data_stream(self, request: SensorRequest) -> Iterator[SensorData]:
        """Yield ten simulated readings for the requested sensor."""
        logger.info("Streaming data for: %s", request.sensor_id)
        for _ in range(_STREAM_LENGTH):
            yield SensorData(
                id=request.sensor_id,
                temperature=50 + random.random() * (100 - 50),
                timestamp=int(time.time()),
            )
            time.sleep(self.stream_interval)

    def upload_sensor_batch(self, requests: Iterable[SensorData]) -> ServerResponse:
        """Consume a stream of readings and report how many arrived."""
        count = 0
        for data in requests:
            logger.info("Received SensorData: ID=%s, Temp=%.2f", data.id, data.temperature)
            count += 1
        return ServerResponse(status=f"Received {count} sensor records.")

    def live_sensor_chats(self, requests: Iterable[SensorData]) -> Iterator[ServerResponse]:
        """Answer every reading, warning about temperatures above 80."""
        for data in requests:
            logger.info("Received from client: %s", data)
            status = "OK"
            if data.temperature > _WARNING_THRESHOLD:
                status = f"WARNING: High Temperature for {data.id}"
            yield ServerResponse(status=status)