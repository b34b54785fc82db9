from pydantic import BaseModel, ConfigDict, Field, field_validator


'''Gateway configuration model (Pydantic)'''


class GatewayConfigModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str
    connect_timeout: float = Field(10.0, gt=0.0)
    receive_timeout: float = Field(15.0, gt=0.0)

    # Only absolute http(s) URLs can be prefixed to endpoint paths
    @field_validator('base_url')
    @classmethod
    def must_be_http_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")

        return v
