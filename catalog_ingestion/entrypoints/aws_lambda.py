"""AWS Lambda handler for catalog ingestion.

Triggered by the host pipeline (or an EventBridge rule) with a location:

  {"type": "aws-organization", "target": "my-org"}
"""

from __future__ import annotations

import json
import logging

from catalog_ingestion.cli import _get_processors, ingest_location
from catalog_ingestion.config import load_config
from catalog_ingestion.logging_config import configure_logging
from catalog_ingestion.model import LocationSpec

logger = logging.getLogger("ingestion.lambda")


def handler(event: dict, context) -> dict:
    """Lambda entry point."""
    config = load_config()
    configure_logging(config.log_level)

    location_type = event.get("type", "")
    if not location_type:
        return {"statusCode": 400, "body": "Missing 'type' in event"}

    location = LocationSpec(type=location_type, target=event.get("target", ""))
    run_id = getattr(context, "aws_request_id", None)
    logger.info("Lambda invoked for location type=%s", location_type)

    try:
        handled, results = ingest_location(
            location,
            _get_processors(config),
            optional=bool(event.get("optional", False)),
            run_id=run_id,
        )
        return {
            "statusCode": 200,
            "body": json.dumps({
                "handled": handled,
                "entities": [r.entity.to_dict() for r in results],
            }),
        }
    except Exception as exc:
        logger.error("Read failed for %s: %s", location_type, exc, exc_info=True)
        return {
            "statusCode": 500,
            "body": json.dumps({"type": location_type, "error": str(exc)}),
        }
