from pydantic import BaseModel


class SystemInfo(BaseModel):
    environment: str
    version: str


class HealthcheckResponse(BaseModel):
    status: str
    system_info: SystemInfo
