"""Stateless pass-through from an `endpoint` query parameter to the Sleeper API."""

import logging
from typing import Any, Mapping, Optional, Sequence

from .client import SleeperAPIError, SleeperClient
from .constants import INVALID_ENDPOINT_MESSAGE, RELAY_ERROR_MESSAGE

logger = logging.getLogger('sleeperdash.relay')


def relay_request(
    query: Mapping[str, Sequence[str]],
    client: Optional[SleeperClient] = None,
) -> tuple[int, Any]:
    """
    Forward `endpoint` to the Sleeper API and return its JSON body.

    Args:
        query: Parsed query string, as returned by urllib.parse.parse_qs
        client: Client to forward with (default: a new SleeperClient)

    Returns:
        Tuple of (status_code, body). 200 with the upstream JSON verbatim,
        400 if `endpoint` is missing or repeated, 500 if forwarding fails.
    """
    values = query.get('endpoint') or []
    if len(values) != 1 or not values[0]:
        return 400, {'error': INVALID_ENDPOINT_MESSAGE}

    endpoint = values[0]
    client = client or SleeperClient()

    try:
        data = client.get_json(endpoint, check_status=False)
    except SleeperAPIError as e:
        logger.error(f'Relay to {endpoint!r} failed: {e}')
        return 500, {'error': RELAY_ERROR_MESSAGE}

    return 200, data
