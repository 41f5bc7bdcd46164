from pydantic import BaseModel

from config import APP_STATUS, APP_MESSAGE, APP_VERSION


class RootStatus(BaseModel):
    status: str = APP_STATUS
    message: str = APP_MESSAGE
    version: str = APP_VERSION


class HealthStatus(BaseModel):
    status: str = APP_STATUS
    # epoch milliseconds, string-encoded
    timestamp: str
