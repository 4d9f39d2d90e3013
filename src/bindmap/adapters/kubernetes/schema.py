"""Pydantic models describing the Kubernetes API payloads we consume."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class KubernetesBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ObjectMeta(KubernetesBaseModel):
    name: str
    namespace: str = ""


class ListMeta(KubernetesBaseModel):
    continue_token: str | None = Field(default=None, alias="continue")


class ObjectList(KubernetesBaseModel):
    metadata: ListMeta = Field(default_factory=ListMeta)
    items: list[dict[str, object]] = Field(default_factory=list)


# ServiceBinding (binding.operators.coreos.com/v1alpha1)


class RefPayload(KubernetesBaseModel):
    group: str = ""
    version: str = ""
    kind: str = ""
    resource: str = ""
    name: str = ""


class ServicePayload(RefPayload):
    namespace: str | None = None
    env_var_prefix: str | None = Field(default=None, alias="envVarPrefix")
    id: str | None = None


class LabelSelectorPayload(KubernetesBaseModel):
    match_labels: dict[str, str] = Field(default_factory=dict, alias="matchLabels")


class ApplicationPayload(RefPayload):
    label_selector: LabelSelectorPayload | None = Field(default=None, alias="labelSelector")


class ServiceBindingSpec(KubernetesBaseModel):
    services: list[ServicePayload] = Field(default_factory=list["ServicePayload"])
    application: ApplicationPayload | None = None


class ServiceBindingStatus(KubernetesBaseModel):
    secret: str = ""


class ServiceBindingManifest(KubernetesBaseModel):
    metadata: ObjectMeta
    spec: ServiceBindingSpec = Field(default_factory=ServiceBindingSpec)
    status: ServiceBindingStatus = Field(default_factory=ServiceBindingStatus)
