"""
Description:
Schema for the health check response, reporting service and database status.

Dependencies:
- pydantic: For data validation.

Author: @kcaparas1630
"""
from pydantic import BaseModel, Field

class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status")
    database: str = Field(description="Database connectivity, either 'ok' or 'unavailable'")
