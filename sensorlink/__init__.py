"""In-process sensor telemetry: messages, token checks, server calls and a producer pipeline."""

__version__ = "0.1.0"
__all__ = ["auth", "messages", "producer", "server"]