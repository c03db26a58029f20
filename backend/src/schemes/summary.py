from pydantic import BaseModel, ConfigDict, Field


class SummaryOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    summary: str
    model: str
    processing_time: str = Field(..., alias="processingTime")
