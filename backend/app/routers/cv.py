from fastapi import APIRouter, HTTPException

from geocv.contracts.run_config import ComparisonRunConfig, CVRunConfig

from ..adapters.io import LoadError
from ..models.v1.cv_models import (
    CompareRequest,
    CompareResponse,
    CVRequest,
    CVResponse,
    StrategiesResponse,
)
from ..services.cv_service import available_options, run_comparison, run_cross_validation

router = APIRouter()


def _http_error(e: Exception) -> HTTPException:
    if isinstance(e, LoadError):
        return HTTPException(status_code=400, detail=f"Data load failed: {e}")
    if isinstance(e, ValueError):
        return HTTPException(status_code=400, detail=str(e))
    return HTTPException(status_code=500, detail=str(e))


@router.get("/crossval/strategies", response_model=StrategiesResponse)
def strategies_endpoint():
    return StrategiesResponse(**available_options())


@router.post("/crossval", response_model=CVResponse)
def crossval_endpoint(req: CVRequest):
    try:
        cfg = CVRunConfig(data=req.data, grouping=req.grouping, model=req.model, eval=req.eval)
        return CVResponse(**run_cross_validation(cfg))
    except Exception as e:
        raise _http_error(e)


@router.post("/crossval/compare", response_model=CompareResponse)
def compare_endpoint(req: CompareRequest):
    try:
        cfg = ComparisonRunConfig(data=req.data, groupings=req.groupings, model=req.model, eval=req.eval)
        return CompareResponse(**run_comparison(cfg))
    except Exception as e:
        raise _http_error(e)
