from typing import ClassVar, Optional
from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """
    Base class for models stored as MongoDB documents.

    `id` maps to the document's `_id`; dump with `by_alias=True` to get a
    document ready for insertion.
    """

    model_config = ConfigDict(populate_by_name=True)

    collection_name: ClassVar[str]

    id: Optional[str] = Field(default=None, alias="_id")
