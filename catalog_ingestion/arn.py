"""Account identity extraction from Organizations account ARNs.

An account ARN looks like::

    arn:aws:organizations::111111111111:account/o-exampleorgid/222222222222

The organization id is the second-to-last ``/`` segment and the account id
is the last one.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AccountIdentity:
    account_id: str
    organization_id: str
    complete: bool


EMPTY_IDENTITY = AccountIdentity(account_id="", organization_id="", complete=False)


def parse_account_arn(arn: str) -> AccountIdentity:
    """Split an account ARN into account and organization ids.

    ARNs with fewer than two segments yield ``EMPTY_IDENTITY`` rather than
    raising; callers decide what to do with an incomplete identity.
    """
    parts = (arn or "").split("/")
    if len(parts) < 2:
        return EMPTY_IDENTITY
    return AccountIdentity(
        account_id=parts[-1],
        organization_id=parts[-2],
        complete=True,
    )
