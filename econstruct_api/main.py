from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
import pandas as pd
from fastapi import FastAPI, Query
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from econstruct.context import normalize_context
from econstruct.dashboard import compute_dashboard
from econstruct.flows import EF_GRID
from econstruct.geocode import GeocodeError, search_address
from econstruct.settings import load_settings
from econstruct.shaping import COLORS
from econstruct.upload import DEFAULT_CENTER, DEFAULT_ZOOM, SelectionIncomplete, SelectionState, format_code
from econstruct_api.schemas import (
    ContinueResponse,
    GeocodeResponse,
    LocationModel,
    SelectionModel,
    UploadValidateModel,
    UploadValidateResponse,
)

settings = load_settings()

app = FastAPI(title="ECOnstruct Dashboard API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _json(data: object) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except Exception:
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                np.ndarray: lambda arr: arr.tolist(),
            },
        )
    )


def _error(exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": str(exc), "type": type(exc).__name__})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/meta/defaults")
def meta_defaults():
    return _json(
        {
            "center": {"lat": DEFAULT_CENTER.lat, "lng": DEFAULT_CENTER.lng},
            "zoom": DEFAULT_ZOOM,
            "emissions_factor": EF_GRID,
            "colors": COLORS,
        }
    )


@app.get("/dashboard/{code}")
def dashboard(
    code: str,
    file_name: str = Query(default=""),
    lat: Optional[float] = Query(default=None),
    lng: Optional[float] = Query(default=None),
    charts: bool = Query(default=True),
):
    try:
        ctx = normalize_context({"file_name": file_name, "lat": lat, "lng": lng})
        return _json(compute_dashboard(code, ctx, with_charts=charts))
    except Exception as exc:
        logger.exception("dashboard failed")
        return _error(exc)


@app.post("/upload/validate", response_model=UploadValidateResponse)
def upload_validate(body: UploadValidateModel):
    state = SelectionState().with_file(body.file_name)
    return UploadValidateResponse(
        file_name=state.file_name,
        number=state.file_number,
        code=format_code(state.file_number) if state.file_number is not None else None,
        error=state.file_error or None,
    )


@app.get("/geocode", response_model=GeocodeResponse)
def geocode(q: str = Query(default="")):
    try:
        location = search_address(q, settings)
    except GeocodeError as exc:
        return GeocodeResponse(location=None, error=exc.message)
    except Exception as exc:
        logger.exception("geocode failed")
        return _error(exc)
    if location is None:
        return GeocodeResponse()
    return GeocodeResponse(location=LocationModel(lat=location.lat, lng=location.lng))


@app.post("/selection/continue", response_model=ContinueResponse)
def selection_continue(body: SelectionModel):
    state = SelectionState().with_file(body.file_name)
    ctx = normalize_context({"location": body.location.model_dump() if body.location else None})
    if ctx.location is not None:
        state = state.with_marker(ctx.location)
    try:
        code = state.continue_code()
    except SelectionIncomplete as exc:
        return JSONResponse(status_code=422, content={"error": str(exc), "type": type(exc).__name__})
    logger.info("selection complete: file=%s code=%s", state.file_name, code)
    return ContinueResponse(code=code, path=f"/dashboard/{code}")
