"""AWS Organizations processor: member accounts as Component entities."""

from __future__ import annotations

import re
from typing import Iterator, Optional

import boto3

from catalog_ingestion.arn import AccountIdentity, parse_account_arn
from catalog_ingestion.base_processor import CatalogProcessor
from catalog_ingestion.config import AwsOrganizationConfig
from catalog_ingestion.logging_config import processor_logger
from catalog_ingestion.model import (
    ComponentEntity,
    ComponentSpec,
    Emit,
    EntityMetadata,
    LocationSpec,
    entity_result,
)

logger = processor_logger("ingestion.aws_organization", "aws_organization")

LOCATION_TYPE = "aws-organization"
DEFAULT_NAMESPACE = "default"

ANNOTATION_ARN = "amazonaws.com/arn"
ANNOTATION_ACCOUNT_ID = "amazonaws.com/account-id"
ANNOTATION_ORGANIZATION_ID = "amazonaws.com/organization-id"

COMPONENT_TYPE = "cloud-account"
UNKNOWN = "unknown"

_DISALLOWED_NAME_CHARS = re.compile(r"[^a-zA-Z0-9\-]")

# Trimmed from account names: ECMAScript WhiteSpace and LineTerminator code points.
# Includes U+FEFF; excludes U+0085 and U+001C-U+001F.
_TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class AwsOrganizationProcessor(CatalogProcessor):
    PROCESSOR_NAME = "aws_organization"

    def __init__(self, config: Optional[AwsOrganizationConfig] = None, client=None) -> None:
        self.config = config or AwsOrganizationConfig()
        self._client = client or boto3.client("organizations", region_name=self.config.region)

    # ------------------------------------------------------------------
    # Discovery
    # ------------------------------------------------------------------

    def iter_account_pages(self) -> Iterator[list[dict]]:
        """Yield the Accounts list of each list_accounts page, in order.

        A page without an Accounts key yields an empty list; the paginator
        keeps following NextToken regardless.
        """
        paginator = self._client.get_paginator("list_accounts")
        for number, page in enumerate(paginator.paginate(), start=1):
            accounts = page.get("Accounts", [])
            logger.debug("Fetched list_accounts page %d (%d accounts)", number, len(accounts))
            yield accounts

    def get_accounts(self) -> list[dict]:
        all_accounts: list[dict] = []
        pages = 0
        for accounts in self.iter_account_pages():
            pages += 1
            all_accounts.extend(accounts)
        logger.info(
            "Discovered %d AWS accounts",
            len(all_accounts),
            extra={"pages": pages},
        )
        return all_accounts

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    @staticmethod
    def normalize_name(name: str) -> str:
        """Lowercase and replace each character outside [a-zA-Z0-9-] with '-'."""
        return _DISALLOWED_NAME_CHARS.sub("-", name.strip(_TRIM_CHARS).lower())

    def map_account_to_component(
        self, account: dict, identity: Optional[AccountIdentity] = None
    ) -> ComponentEntity:
        arn = account.get("Arn") or ""
        if identity is None:
            identity = parse_account_arn(arn)
        return ComponentEntity(
            metadata=EntityMetadata(
                name=self.normalize_name(account.get("Name") or ""),
                namespace=DEFAULT_NAMESPACE,
                annotations={
                    ANNOTATION_ARN: arn,
                    ANNOTATION_ACCOUNT_ID: identity.account_id,
                    ANNOTATION_ORGANIZATION_ID: identity.organization_id,
                },
            ),
            spec=ComponentSpec(
                type=COMPONENT_TYPE,
                lifecycle=UNKNOWN,
                owner=UNKNOWN,
            ),
        )

    def _should_emit(self, account: dict, identity: AccountIdentity) -> bool:
        if identity.complete:
            return True
        skip = self.config.malformed_arn_policy == "skip"
        logger.warning(
            "Account %s has malformed ARN %r%s",
            account.get("Id", "<unknown>"),
            account.get("Arn"),
            ", skipping" if skip else "",
        )
        return not skip

    # ------------------------------------------------------------------
    # Host entry point
    # ------------------------------------------------------------------

    def read_location(self, location: LocationSpec, optional: bool, emit: Emit) -> bool:
        if location.type != LOCATION_TYPE:
            return False

        # Discovery completes before anything is emitted.
        accounts = self.get_accounts()
        for account in accounts:
            identity = parse_account_arn(account.get("Arn") or "")
            if not self._should_emit(account, identity):
                continue
            emit(entity_result(location, self.map_account_to_component(account, identity)))
        return True
