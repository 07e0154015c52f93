"""
Shared fixtures for catalog ingestion tests
"""
import boto3
import pytest
from botocore.stub import Stubber

from catalog_ingestion.config import AwsOrganizationConfig
from catalog_ingestion.processors.aws_organization import AwsOrganizationProcessor

ORG_ARN_PREFIX = "arn:aws:organizations::111111111111:account/o-abc123"


def make_account(account_id, name):
    return {
        "Id": account_id,
        "Arn": f"{ORG_ARN_PREFIX}/{account_id}",
        "Email": f"{account_id}@example.com",
        "Name": name,
        "Status": "ACTIVE",
        "JoinedMethod": "CREATED",
    }


@pytest.fixture
def organizations_client():
    """An Organizations client that never talks to AWS."""
    return boto3.client(
        "organizations",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(organizations_client):
    with Stubber(organizations_client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def processor(organizations_client):
    return AwsOrganizationProcessor(AwsOrganizationConfig(), client=organizations_client)
