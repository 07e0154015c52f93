"""CLI entry point: read a location and print the emitted entities."""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import sys
from typing import Optional

from catalog_ingestion.base_processor import CatalogProcessor
from catalog_ingestion.config import IngestionConfig, load_config
from catalog_ingestion.logging_config import configure_logging
from catalog_ingestion.model import EntityResult, LocationSpec

logger = logging.getLogger("ingestion.cli")


PROCESSOR_REGISTRY: dict[str, tuple[str, str, str]] = {
    # name -> (config_attr, module_path, class_name)
    "aws_organization": (
        "aws_organization",
        "catalog_ingestion.processors.aws_organization",
        "AwsOrganizationProcessor",
    ),
}


def _get_processors(config: IngestionConfig) -> list[CatalogProcessor]:
    """Instantiate every registered processor, in registry order."""
    processors: list[CatalogProcessor] = []
    for name, (config_attr, module_path, class_name) in PROCESSOR_REGISTRY.items():
        module = importlib.import_module(module_path)
        cls = getattr(module, class_name)
        processors.append(cls(getattr(config, config_attr)))
        logger.debug("Registered processor %s", name)
    return processors


def ingest_location(
    location: LocationSpec,
    processors: list[CatalogProcessor],
    optional: bool = False,
    run_id: Optional[str] = None,
) -> tuple[bool, list[EntityResult]]:
    """Hand the location to the first processor that owns it.

    Emitted entities pass through that processor's pre/post hooks. Returns
    (handled, results); errors from the owning processor propagate.
    """
    for processor in processors:
        emitted: list[EntityResult] = []
        if not processor.read_location_with_tracking(location, optional, emitted.append, run_id=run_id):
            continue
        results = []
        for result in emitted:
            entity = processor.pre_process_entity(result.entity, location)
            entity = processor.post_process_entity(entity, location)
            results.append(EntityResult(location=result.location, entity=entity))
        return True, results

    logger.warning("No processor handles location type %s", location.type)
    return False, []


def cmd_read(args: argparse.Namespace) -> int:
    """Read one location and write each entity as a JSON line to stdout."""
    config = load_config()
    configure_logging(config.log_level)

    location = LocationSpec(type=args.type, target=args.target)
    handled, results = ingest_location(location, _get_processors(config), optional=args.optional)
    for result in results:
        print(json.dumps(result.entity.to_dict()))
    return 0 if handled else 1


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="catalog-ingestion",
        description="Catalog ingestion processors",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    read_parser = subparsers.add_parser("read", help="Read a location and print its entities")
    read_parser.add_argument(
        "--type", "-t",
        default="aws-organization",
        help="Location type (default: aws-organization)",
    )
    read_parser.add_argument(
        "--target",
        default="",
        help="Location target, passed through to the emitted results",
    )
    read_parser.add_argument(
        "--optional",
        action="store_true",
        help="Mark the location as optional",
    )
    read_parser.set_defaults(func=cmd_read)

    args = parser.parse_args(argv)
    sys.exit(args.func(args))
