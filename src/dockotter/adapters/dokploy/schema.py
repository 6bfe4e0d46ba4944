"""Pydantic models describing the Dokploy project listing."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, field_validator


def _none_to_empty_list(value: object) -> object:
    return [] if value is None else value


def _none_to_zero(value: object) -> object:
    if value is None:
        return 0
    if isinstance(value, str) and not value.strip():
        return 0
    return value


class DokployBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class DokployDomain(DokployBaseModel):
    domain_id: str | None = Field(default=None, alias="domainId")
    host: str = ""
    path: str | None = None
    port: int = 0
    https: bool = False
    certificate: str | None = Field(
        default=None, validation_alias=AliasChoices("certificate", "certificateType")
    )

    _normalize_port = field_validator("port", mode="before")(_none_to_zero)

    @field_validator("host", mode="before")
    @classmethod
    def _none_to_blank(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("https", mode="before")
    @classmethod
    def _none_to_false(cls, value: object) -> object:
        return False if value is None else value


class DokployApplication(DokployBaseModel):
    """Shared shape of entries in a project's ``applications`` and ``compose`` lists."""

    application_id: str | None = Field(default=None, alias="applicationId")
    compose_id: str | None = Field(default=None, alias="composeId")
    name: str = ""
    app_name: str = Field(default="", alias="appName")
    description: str | None = None
    domains: list[DokployDomain] = Field(default_factory=list)
    port: int = 0
    status: str = Field(
        default="",
        validation_alias=AliasChoices("applicationStatus", "composeStatus"),
    )
    project_id: str | None = Field(default=None, alias="projectId")

    _normalize_domains = field_validator("domains", mode="before")(_none_to_empty_list)
    _normalize_port = field_validator("port", mode="before")(_none_to_zero)

    @field_validator("app_name", "status", mode="before")
    @classmethod
    def _none_to_blank(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def identifier(self) -> str:
        return self.application_id or self.compose_id or ""


class DokployProject(DokployBaseModel):
    project_id: str = Field(default="", alias="projectId")
    name: str = ""
    description: str | None = None
    applications: list[DokployApplication] = Field(default_factory=list)
    compose: list[DokployApplication] = Field(default_factory=list)

    _normalize_applications = field_validator("applications", "compose", mode="before")(
        _none_to_empty_list
    )


ProjectList = TypeAdapter(list[DokployProject])
