from typing import List

from pydantic import BaseModel, ConfigDict, Field

from utils.enums import Category


class HealthOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "ok"
    timestamp: str
    message: str
    categories: List[Category]
    features: List[str]
    news_api_configured: bool = Field(..., alias="newsApiConfigured")
