from pydantic import BaseModel, Field


class InfoResponse(BaseModel):
    """Response payload for the /api/info endpoint."""

    service_app_name: str = Field(..., description="Service name.")
    service_version: str = Field(..., description="Service version string.")
    service_model: str = Field(..., description="Oracle model name.")
    target_script: str = Field(..., description="Script profile used for detection and extraction.")
