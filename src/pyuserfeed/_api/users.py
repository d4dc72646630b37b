"""User list endpoint.

Endpoint:
  - GET /users
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from pyuserfeed._api._common import decode_list
from pyuserfeed._constants import USERS_PATH
from pyuserfeed._transport import Transport
from pyuserfeed.models.user import User

_logger = logging.getLogger(__name__)

_OPERATION = "list_users"
_USERS_ADAPTER: TypeAdapter[list[User]] = TypeAdapter(list[User])


async def fetch_users(transport: Transport) -> list[User]:
    """Fetch every user, in server response order."""
    body = await transport.get_json(_OPERATION, USERS_PATH)
    users = decode_list(_OPERATION, body, _USERS_ADAPTER)
    _logger.debug("User list decoded count=%d", len(users))
    return users
