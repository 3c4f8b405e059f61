"""FEMA / ARC National Shelter System fetch stage."""

from __future__ import annotations

import logging
import time

from shelter_feed.common.config_loader import SourceConfig
from shelter_feed.common.http import HttpClient, TimeoutConfig
from shelter_feed.common.logging import log_event
from shelter_feed.common.models import Shelter
from shelter_feed.pipeline.normalise import exceeded_transfer_limit, extract_features, normalize_features


def fetch_and_normalize(
    http_client: HttpClient | None = None,
    *,
    source: SourceConfig | None = None,
    timeout: TimeoutConfig | None = None,
    logger: logging.Logger | None = None,
    run_id: str | None = None,
) -> list[Shelter]:
    """Fetch the shelter feed once and return normalised records.

    Raises ``FetchError``, ``ParseError`` or ``InvalidFormatError`` when the
    whole response is unusable. Individual malformed features are dropped.
    """
    source = source or SourceConfig()
    started = time.monotonic()
    if logger is not None:
        log_event(logger, "fetch start", run_id=run_id, stage="fetch", source=source.name, event="FETCH_START", status="ok")

    owns_client = http_client is None
    client = http_client or HttpClient(timeout=timeout)
    try:
        payload = client.get_json(source.url, params=dict(source.params))
    finally:
        if owns_client:
            client.close()

    features = extract_features(payload)
    if logger is not None and exceeded_transfer_limit(payload):
        log_event(
            logger,
            "upstream truncated the result set; only the first page was consumed",
            level=logging.WARNING,
            run_id=run_id,
            stage="fetch",
            source=source.name,
            event="TRANSFER_LIMIT_EXCEEDED",
            status="warning",
            rows_in=len(features),
        )

    shelters = normalize_features(payload)

    if logger is not None:
        log_event(
            logger,
            "fetch end",
            run_id=run_id,
            stage="fetch",
            source=source.name,
            event="FETCH_END",
            status="ok",
            duration_ms=int((time.monotonic() - started) * 1000),
            rows_in=len(features),
            rows_out=len(shelters),
        )
    return shelters
