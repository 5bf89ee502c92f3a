from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress, ValidationError, field_validator

from .errors import ConfigurationError
from .partition import MAX_PORT


FIELD_LABELS = {
    "target": "address",
    "workers": "thread count",
    "timeout": "timeout",
    "max_inflight": "connection limit",
}


class ScanConfig(BaseModel):
    """
    Validation model for scan parameters.
    Enforces strict types and safe ranges before any worker starts.
    """
    model_config = ConfigDict(frozen=True)

    target: IPvAnyAddress
    workers: int = Field(4, ge=1, le=MAX_PORT)
    timeout: float = Field(1.5, gt=0, le=10.0)
    max_inflight: int = Field(512, ge=1)

    @field_validator('workers', mode='before')
    @classmethod
    def reject_bool_workers(cls, v):
        # bool is an int subclass; "-j True" makes no sense
        if isinstance(v, bool):
            raise ValueError("thread count must be an integer")
        return v

    @classmethod
    def build(cls, **kwargs) -> "ScanConfig":
        """Like the constructor, but reports the first problem as a ConfigurationError."""
        try:
            return cls(**kwargs)
        except ValidationError as e:
            err = e.errors()[0]
            field = str(err["loc"][0]) if err.get("loc") else "config"
            label = FIELD_LABELS.get(field, field)
            raise ConfigurationError(err["msg"], context=f"invalid {label}") from None
