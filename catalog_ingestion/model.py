"""Catalog data types: location descriptors, Component entities, emit results."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable

ENTITY_API_VERSION = "backstage.io/v1alpha1"
ENTITY_KIND_COMPONENT = "Component"

# Empty names are allowed through; rejecting them is left to downstream validation.
ENTITY_NAME_PATTERN = re.compile(r"[a-z0-9-]*")


def is_valid_entity_name(name: str) -> bool:
    return ENTITY_NAME_PATTERN.fullmatch(name) is not None


@dataclass(frozen=True)
class LocationSpec:
    type: str
    target: str = ""


@dataclass
class EntityMetadata:
    name: str
    namespace: str
    annotations: dict[str, str] = field(default_factory=dict)


@dataclass
class ComponentSpec:
    type: str
    lifecycle: str
    owner: str


@dataclass
class ComponentEntity:
    metadata: EntityMetadata
    spec: ComponentSpec
    api_version: str = ENTITY_API_VERSION
    kind: str = ENTITY_KIND_COMPONENT

    def to_dict(self) -> dict:
        """Render the entity in its wire shape."""
        return {
            "apiVersion": self.api_version,
            "kind": self.kind,
            "metadata": {
                "name": self.metadata.name,
                "namespace": self.metadata.namespace,
                "annotations": dict(self.metadata.annotations),
            },
            "spec": {
                "type": self.spec.type,
                "lifecycle": self.spec.lifecycle,
                "owner": self.spec.owner,
            },
        }


@dataclass(frozen=True)
class EntityResult:
    """An entity emitted by a processor, tagged with the location it came from."""

    location: LocationSpec
    entity: ComponentEntity


Emit = Callable[[EntityResult], None]


def entity_result(location: LocationSpec, entity: ComponentEntity) -> EntityResult:
    return EntityResult(location=location, entity=entity)
