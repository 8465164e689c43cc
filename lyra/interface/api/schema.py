"""Shared API request model base.

The reader web app sends camelCase JSON; snake_case is accepted too.
Responses keep the column names (snake_case). The one exception is the
imported manuscript annotation, which the editor stores as-is and so uses
the editor's camelCase keys.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Request body accepting camelCase or snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
