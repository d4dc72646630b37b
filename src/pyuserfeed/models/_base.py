"""Base model for feed API records.

Every record model inherits from :class:`FeedBaseModel` which provides:

* ``alias_generator=to_camel`` so camelCase API keys (``userId``) map
  automatically to snake_case fields (``user_id``).
* ``populate_by_name`` so records can also be built from snake_case
  keyword arguments (tests, caches).
* ``frozen`` instances: decoded records are never mutated.
* ``extra="ignore"``: the API may add keys (``address``, ``company``)
  that the core does not model.

Identifier fields are declared ``StrictInt`` so JSON booleans, strings
and floats are rejected instead of coerced.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FeedBaseModel(BaseModel):
    """Base for feed API record models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )
