"""Schema baselines shared by request and response DTOs."""

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Response DTO base: camelCase on the wire, no unexpected fields."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, from_attributes=True)


class RequestModel(BaseModel):
    """
    Request DTO base.

    Fields are loosely typed on purpose: services validate and report
    missing or malformed values as 400 domain errors.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)
