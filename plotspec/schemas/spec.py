from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DependencyModel(BaseModel):
    name: Optional[str] = None
    payload: Dict[str, Any] = Field(default_factory=dict)
    kind: Optional[str] = None


class SpecModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: List[Dict[str, Any]] = Field(default_factory=list)
    layout: Dict[str, Any] = Field(default_factory=dict)
    layout_overrides_by_scope: Dict[str, List[Dict[str, Any]]] = Field(
        default_factory=dict, alias="layoutOverridesByScope"
    )
    config: Dict[str, Any] = Field(default_factory=dict)
    dependencies: List[DependencyModel] = Field(default_factory=list)
    current_scope: Optional[str] = Field(None, alias="currentScope")


class DiagnosticModel(BaseModel):
    code: str
    message: str
    level: str
    ts: float


class LayoutRequest(BaseModel):
    spec: SpecModel = Field(default_factory=SpecModel)
    overrides: Dict[str, Any] = Field(default_factory=dict)
    scope: Optional[str] = Field(None, description="Data scope; the spec's current scope when omitted.")


class RangeSliderRequest(BaseModel):
    spec: SpecModel = Field(default_factory=SpecModel)
    start: Optional[Any] = None
    end: Optional[Any] = None
    options: Dict[str, Any] = Field(default_factory=dict)


class ConfigRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    spec: SpecModel = Field(default_factory=SpecModel)
    options: Dict[str, Any] = Field(default_factory=dict)
    locale: Optional[str] = None
    mathjax: Optional[str] = None
    cloud: bool = False
    show_send_to_cloud: Optional[bool] = Field(None, alias="showSendToCloud")


class FinalizeRequest(BaseModel):
    spec: SpecModel = Field(default_factory=SpecModel)
    persist: bool = False


class SpecResponse(BaseModel):
    spec: SpecModel
    diagnostics: List[DiagnosticModel]


class FinalizeResponse(BaseModel):
    document: Dict[str, Any]
    diagnostics: List[DiagnosticModel]
    audit_path: Optional[str] = Field(None, description="Filesystem path to persisted artifacts.")
