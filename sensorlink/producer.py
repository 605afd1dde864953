"""Client side: generate readings and send them with bounded concurrency."""

from __future__ import annotations

import logging
import queue as queue_module
import random
import threading
import time
import uuid
from collections.abc import Iterator
from typing import Optional, Protocol

from sensorlink.messages import SensorData, ServerResponse

logger = logging.getLogger(__name__)

_DONE = object()


class _SensorClient(Protocol):
    def send_sensor_data(self, data: SensorData) -> ServerResponse: ...


def generate_sensor_data() -> SensorData:
    """A reading with a fresh id and a temperature between 50 and 100."""
    sensor_id = str(uuid.uuid4())
    temperature = 50 + random.random() * (100 - 50)
    logger.info("Generated: %s", sensor_id)
    return SensorData(id=sensor_id, temperature=temperature, timestamp=int(time.time()))


def make_batch(size: int = 10) -> list[SensorData]:
    """Readings for a batch upload, temperatures between 20 and 70."""
    return [
        SensorData(
            id=str(uuid.uuid4()),
            temperature=random.random() * 50 + 20,
            timestamp=int(time.time()),
        )
        for _ in range(size)
    ]


def data_producer(
    queue: "queue_module.Queue[Optional[SensorData]]",
    duration: float = 60.0,
    interval: float = 1.0,
) -> None:
    """Put a new reading on ``queue`` every ``interval`` seconds until ``duration``
    has passed, then put ``None`` to mark the end."""
    if interval <= 0:
        raise ValueError("interval must be positive")
    start = time.monotonic()
    deadline = start + duration
    next_tick = start + interval
    try:
        while next_tick <= deadline:
            time.sleep(max(0.0, next_tick - time.monotonic()))
            queue.put(generate_sensor_data())
            next_tick += interval
        time.sleep(max(0.0, deadline - time.monotonic()))
        logger.info("Data Generation Ended!!!")
    finally:
        queue.put(None)


def processor(
    queue: "queue_module.Queue[Optional[SensorData]]",
    client: _SensorClient,
    max_in_flight: int = 5,
) -> Iterator[ServerResponse]:
    """Send every reading from ``queue`` to ``client``, at most ``max_in_flight``
    at a time, yielding responses as they complete. A failed call yields a
    response with status ``ERROR!``. Stops after the ``None`` end marker."""
    if max_in_flight < 1:
        raise ValueError("max_in_flight must be at least 1")

    results: queue_module.Queue = queue_module.Queue()
    slots = threading.BoundedSemaphore(max_in_flight)

    def send(data: SensorData) -> None:
        try:
            response = client.send_sensor_data(data)
        except Exception as exc:  # any failed call is reported, not fatal
            logger.error("Error receiving Data: %s", exc)
            response = ServerResponse(status="ERROR!")
        results.put(response)
        slots.release()

    def dispatch() -> None:
        workers = []
        while (data := queue.get()) is not None:
            slots.acquire()
            worker = threading.Thread(target=send, args=(data,), daemon=True)
            worker.start()
            workers.append(worker)
        for worker in workers:
            worker.join()
        results.put(_DONE)

    threading.Thread(target=dispatch, daemon=True).start()
    while (item := results.get()) is not _DONE:
        yield item


def run_pipeline(
    client: _SensorClient,
    duration: float = 60.0,
    interval: float = 1.0,
    max_in_flight: int = 5,
) -> list[ServerResponse]:
    """Produce readings for ``duration`` seconds and send them all; return the responses."""
    readings: queue_module.Queue = queue_module.Queue(maxsize=10)
    producer = threading.Thread(
        target=data_producer, args=(readings, duration, interval), daemon=True
    )
    producer.start()
    responses = []
    for response in processor(readings, client, max_in_flight):
        logger.info("Received Data: %s", response)
        responses.append(response)
    producer.join()
    return responses