# Browser client configuration schema
from pydantic import BaseModel, Field, ConfigDict

class ClientConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    auth_domain: str = Field(..., alias='authDomain')
    project_id: str = Field(..., alias='projectId')
    storage_bucket: str = Field(..., alias='storageBucket')
    messaging_sender_id: str = Field(..., alias='messagingSenderId')
    app_id: str = Field(..., alias='appId')
    measurement_id: str = Field(..., alias='measurementId')
