"""Abstract base class for all catalog processors."""

from __future__ import annotations

import time
import uuid
from abc import ABC, abstractmethod
from typing import Optional

from catalog_ingestion.logging_config import processor_logger
from catalog_ingestion.model import ComponentEntity, Emit, EntityResult, LocationSpec


class CatalogProcessor(ABC):
    """Each processor overrides read_location() and declares PROCESSOR_NAME.

    The lifecycle hooks default to pass-through / no-op so a processor only
    writes the ones it needs.
    """

    PROCESSOR_NAME: str = ""

    @abstractmethod
    def read_location(self, location: LocationSpec, optional: bool, emit: Emit) -> bool:
        """Emit entities for the location. Returns False if the location is not ours."""

    def pre_process_entity(self, entity: ComponentEntity, location: LocationSpec) -> ComponentEntity:
        return entity

    def post_process_entity(self, entity: ComponentEntity, location: LocationSpec) -> ComponentEntity:
        return entity

    def handle_error(self, error: Exception, location: LocationSpec) -> None:
        return None

    def validate_entity_kind(self, entity: ComponentEntity) -> bool:
        return False

    def read_location_with_tracking(
        self,
        location: LocationSpec,
        optional: bool,
        emit: Emit,
        run_id: Optional[str] = None,
    ) -> bool:
        """Wrap read_location() with run id, timing and emitted-count logging."""
        run_id = run_id or str(uuid.uuid4())
        log = processor_logger(
            "ingestion.processor",
            self.PROCESSOR_NAME,
            location_type=location.type,
            run_id=run_id,
        )
        started = time.monotonic()
        emitted = 0

        def counting_emit(result: EntityResult) -> None:
            nonlocal emitted
            emitted += 1
            emit(result)

        try:
            handled = self.read_location(location, optional, counting_emit)
        except Exception as exc:
            self.handle_error(exc, location)
            log.error("Read failed: %s", exc)
            raise

        if handled:
            log.info(
                "Read complete",
                extra={
                    "entities": emitted,
                    "duration_s": round(time.monotonic() - started, 3),
                },
            )
        return handled
