from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Base for resolved entities: immutable snapshots handed to callers."""

    model_config = ConfigDict(frozen=True)
