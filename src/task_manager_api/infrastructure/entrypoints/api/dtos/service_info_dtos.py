from datetime import datetime

from pydantic import BaseModel


class WelcomeResponseDTO(BaseModel):
    message: str
    version: str
    docs: str


class HealthResponseDTO(BaseModel):
    status: str
    timestamp: datetime
    version: str
