from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from utils.enums import Category


class ArticleOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str = Field(..., min_length=1)
    description: str
    source: str
    published_at: str = Field(..., alias="publishedAt")
    url: Optional[str] = None
    image_url: Optional[str] = Field(None, alias="imageUrl")
    category: Category
