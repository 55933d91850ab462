from datetime import datetime

from pydantic import BaseModel


class ApiHealth(BaseModel):
    success: bool = True
    message: str = "Server is running"
    timestamp: datetime
    uptime: float
