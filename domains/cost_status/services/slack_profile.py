"""Slack profile status updates via users.profile.set.

Each account is updated independently; one account failing never blocks or
cancels the others.
"""

import asyncio
from typing import Optional, Sequence

import httpx

from logger import logger
from utils.log_sanitizer import sanitize_for_log
from ..config import SLACK_PROFILE_URL
from ..errors import PublishError
from ..types import Account, PublishResult, StatusUpdate


async def set_profile_status(client: httpx.AsyncClient, account: Account, status: StatusUpdate) -> PublishResult:
    """Set one account's Slack status.

    Raises:
        PublishError: on transport errors, HTTP errors or an ok=false reply.
    """
    payload = {
        "profile": {
            "status_text": status.text,
            "status_emoji": status.emoji,
        }
    }
    headers = {
        "Authorization": f"Bearer {account.token}",
        "Content-Type": "application/json; charset=utf-8",
    }

    try:
        response = await client.post(SLACK_PROFILE_URL, json=payload, headers=headers)
    except httpx.HTTPError as e:
        raise PublishError(account.name, f"request failed: {sanitize_for_log(str(e))}") from e

    if response.status_code != 200:
        raise PublishError(account.name, f"HTTP {response.status_code}")

    try:
        data = response.json()
    except ValueError as e:
        raise PublishError(account.name, "response was not JSON") from e

    if not isinstance(data, dict):
        raise PublishError(account.name, "response was not a JSON object")

    if not data.get("ok"):
        raise PublishError(account.name, data.get("error") or "unknown error")

    return PublishResult(account=account.name, ok=True)


async def _publish_one(client: httpx.AsyncClient, account: Account, status: StatusUpdate) -> PublishResult:
    try:
        result = await set_profile_status(client, account, status)
    except PublishError as e:
        logger.error(f"Failed to update Slack profile for {account.name}: {e.reason}")
        return PublishResult(account=account.name, ok=False, error=e.reason)
    except Exception as e:
        # Anything else (e.g. a token httpx can't encode as a header) stays scoped to this account
        error = sanitize_for_log(f"{type(e).__name__}: {e}")
        logger.error(f"Unexpected error updating Slack profile for {account.name}: {error}")
        return PublishResult(account=account.name, ok=False, error=error)

    logger.info(f"Slack profile updated for {account.name}: {status.emoji} {status.text}")
    return result


async def publish_status(
    accounts: Sequence[Account],
    status: StatusUpdate,
    client: Optional[httpx.AsyncClient] = None,
) -> list[PublishResult]:
    """Push a status to every account concurrently.

    Returns:
        One PublishResult per account, in account order.
    """
    if client is not None:
        return list(await asyncio.gather(*(_publish_one(client, a, status) for a in accounts)))

    async with httpx.AsyncClient() as own_client:
        return list(await asyncio.gather(*(_publish_one(own_client, a, status) for a in accounts)))
