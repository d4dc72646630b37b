"""Posts-by-user endpoint.

Endpoint:
  - GET /posts?userId=<id>
"""

from __future__ import annotations

import logging

from pydantic import TypeAdapter

from pyuserfeed._api._common import decode_list
from pyuserfeed._constants import POSTS_PATH, POSTS_USER_PARAM
from pyuserfeed._transport import Transport
from pyuserfeed.models.post import Post

_logger = logging.getLogger(__name__)

_OPERATION = "list_posts_by_user"
_POSTS_ADAPTER: TypeAdapter[list[Post]] = TypeAdapter(list[Post])


async def fetch_posts_by_user(transport: Transport, user_id: int) -> list[Post]:
    """Fetch the posts owned by ``user_id``.

    Filtering is done by the server through the ``userId`` query parameter.
    """
    body = await transport.get_json(_OPERATION, POSTS_PATH, {POSTS_USER_PARAM: str(user_id)})
    posts = decode_list(_OPERATION, body, _POSTS_ADAPTER)
    _logger.debug("Posts decoded user_id=%s count=%d", user_id, len(posts))
    return posts
