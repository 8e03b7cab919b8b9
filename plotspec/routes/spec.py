from __future__ import annotations

from fastapi import APIRouter, Depends

from ..core.settings import get_settings
from ..schemas.spec import (
    ConfigRequest,
    FinalizeRequest,
    FinalizeResponse,
    LayoutRequest,
    RangeSliderRequest,
    SpecModel,
    SpecResponse,
)
from ..services import Specification, add_range_slider, finalize, set_config, set_layout
from ..utils.audit import AuditLogger

router = APIRouter(prefix="/spec", tags=["spec"])


def _load(model: SpecModel) -> Specification:
    return Specification.from_dict(model.model_dump(by_alias=True))


def _respond(spec: Specification) -> SpecResponse:
    return SpecResponse.model_validate(
        {
            "spec": spec.to_dict(),
            "diagnostics": spec.diagnostics.to_json(),
        }
    )


@router.post("/layout", response_model=SpecResponse)
def post_layout(body: LayoutRequest) -> SpecResponse:
    spec = _load(body.spec)
    if "scope" in body.model_fields_set:
        set_layout(spec, body.overrides, scope=body.scope)
    else:
        set_layout(spec, body.overrides)
    return _respond(spec)


@router.post("/rangeslider", response_model=SpecResponse)
def post_rangeslider(body: RangeSliderRequest) -> SpecResponse:
    spec = _load(body.spec)
    add_range_slider(spec, body.start, body.end, **body.options)
    return _respond(spec)


@router.post("/config", response_model=SpecResponse)
def post_config(body: ConfigRequest) -> SpecResponse:
    spec = _load(body.spec)
    set_config(
        spec,
        body.options,
        locale=body.locale,
        mathjax=body.mathjax,
        cloud=body.cloud,
        show_send_to_cloud=body.show_send_to_cloud,
    )
    return _respond(spec)


@router.post("/finalize", response_model=FinalizeResponse)
def post_finalize(body: FinalizeRequest, settings=Depends(get_settings)) -> FinalizeResponse:
    spec = _load(body.spec)
    spec_in = spec.to_dict()
    document = finalize(spec)
    diagnostics = spec.diagnostics.to_json()

    audit_path = None
    if body.persist:
        audit_logger = AuditLogger(settings.storage_root)
        audit_path = str(audit_logger.persist(spec_in=spec_in, document=document, diagnostics=diagnostics))

    return FinalizeResponse.model_validate(
        {
            "document": document,
            "diagnostics": diagnostics,
            "audit_path": audit_path,
        }
    )
