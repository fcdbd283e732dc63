import time
import json
import logging
from typing import Optional
from functools import wraps

logger = logging.getLogger("worksheet_ai.telemetry")


def emit_event(event: str, *, route: str, version: str, provider: Optional[str] = None,
               topic: Optional[str] = None, error_type: Optional[str] = None,
               latency_ms: Optional[int] = None, ok: Optional[bool] = None) -> dict:
    payload = {
        "event": event,
        "route": route,
        "version": version,
        "provider": provider,
        "topic": topic,
        "error_type": error_type,
        "latency_ms": latency_ms,
        "ok": ok,
        "ts": time.time(),
    }
    # single-line JSON for easy parsing in prod
    logger.info("telemetry=%s", json.dumps(payload, separators=(",", ":")))
    return payload


def _error_name(exc: BaseException) -> str:
    # HTTPException raised "from" a generation error reports the root cause.
    root = exc.__cause__ or exc
    return root.__class__.__name__


def instrument(route: str, version: str):
    """
    Wrap an async worksheet endpoint with one telemetry event per call.

    The provider is taken from a ``generator`` argument and the topic from a
    ``request`` argument when the endpoint has them.
    """
    def deco(fn):
        @wraps(fn)
        async def wrapped(*args, **kwargs):
            generator = kwargs.get("generator")
            request = kwargs.get("request")
            provider = type(generator).__name__ if generator is not None else None
            topic = getattr(request, "topic", None)

            t0 = time.time()
            err = None
            try:
                return await fn(*args, **kwargs)
            except Exception as e:
                err = _error_name(e)
                raise
            finally:
                emit_event(
                    "worksheet_failed" if err else "worksheet_generated",
                    route=route, version=version, provider=provider, topic=topic,
                    error_type=err, latency_ms=int((time.time() - t0) * 1000), ok=err is None,
                )
        return wrapped
    return deco
