"""Internal constants shared across the library."""

BASE_URL = "https://jsonplaceholder.typicode.com"
USER_AGENT = "pyuserfeed/1 aiohttp"

USERS_PATH = "/users"
POSTS_PATH = "/posts"

#: Query parameter used by the posts resource to filter by owner.
POSTS_USER_PARAM = "userId"
