"""Pydantic models for the Pangolin blueprint document."""

from __future__ import annotations

import yaml
from pydantic import BaseModel, ConfigDict, Field


class PangolinBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)


class BlueprintTarget(PangolinBaseModel):
    hostname: str
    port: int = Field(ge=1, le=65535)
    method: str
    enabled: bool = True
    path: str | None = None


class ProxyResource(PangolinBaseModel):
    name: str
    protocol: str = "http"
    full_domain: str = Field(alias="full-domain")
    ssl: bool | None = None
    enabled: bool = True
    targets: list[BlueprintTarget]


class Blueprint(PangolinBaseModel):
    proxy_resources: list[ProxyResource] = Field(alias="proxy-resources")

    def to_document(self) -> dict[str, object]:
        """Return the blueprint with Pangolin's key names; unset optional keys are dropped."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.to_document(), sort_keys=False)
