"""Configuration via environment variables.

AWS credentials are never read here; boto3 resolves them through its
default chain (env vars, profile, IAM role attached to Lambda/ECS).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

MALFORMED_ARN_POLICIES = ("degrade", "skip")


@dataclass(frozen=True)
class AwsOrganizationConfig:
    region: str = "us-east-1"  # Organizations API is only served from us-east-1
    # degrade = emit with empty id annotations, skip = do not emit the account
    malformed_arn_policy: str = "degrade"

    def __post_init__(self) -> None:
        if self.malformed_arn_policy not in MALFORMED_ARN_POLICIES:
            raise ValueError(
                f"Unknown malformed ARN policy {self.malformed_arn_policy!r}, "
                f"expected one of {', '.join(MALFORMED_ARN_POLICIES)}"
            )


@dataclass(frozen=True)
class IngestionConfig:
    aws_organization: AwsOrganizationConfig = field(default_factory=AwsOrganizationConfig)
    log_level: str = "INFO"


def load_config() -> IngestionConfig:
    """Load configuration from environment variables (and a local .env file)."""
    load_dotenv()

    region = (
        os.environ.get("AWS_ORGANIZATIONS_REGION")
        or os.environ.get("AWS_REGION")
        or "us-east-1"
    )
    policy = os.environ.get("CATALOG_MALFORMED_ARN_POLICY", "degrade").strip().lower()

    return IngestionConfig(
        aws_organization=AwsOrganizationConfig(
            region=region,
            malformed_arn_policy=policy,
        ),
        log_level=os.environ.get("LOG_LEVEL", "INFO"),
    )
