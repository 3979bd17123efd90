from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator


class CapacityEvent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: StrictStr


class LaunchEvent(BaseModel):
    """An instance joined the fleet.

    Accepts the fleet's native notification ({"detail": {"EC2InstanceId": ...}})
    as well as the flat {"instanceId": ...} form.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    instance_id: StrictStr = Field(alias="instanceId")

    @model_validator(mode="before")
    @classmethod
    def _unwrap_detail(cls, data):
        if isinstance(data, dict) and "instanceId" not in data:
            detail = data.get("detail")
            if isinstance(detail, dict) and "EC2InstanceId" in detail:
                return {"instanceId": detail["EC2InstanceId"]}
        return data

    @field_validator("instance_id")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("instance id must not be blank")
        return value
