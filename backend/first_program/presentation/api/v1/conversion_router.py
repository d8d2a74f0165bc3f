from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from first_program.core.di.service_locator import ServiceLocator


router = APIRouter(prefix="/api/v1/conversion", tags=["conversion"])


class ConversionRequest(BaseModel):
    value: float = Field(..., allow_inf_nan=False, description="Finite floating-point value to truncate to a 32-bit integer")


class ConversionResponse(BaseModel):
    original_value: float
    converted_value: Optional[int] = None
    is_successful: bool
    error_message: Optional[str] = None


@router.post("/float-to-int", response_model=ConversionResponse)
def convert_float_to_int(req: ConversionRequest):
    # Out-of-range values come back as is_successful=false, not as an HTTP error
    try:
        usecase = ServiceLocator.convert_float_to_int_usecase()
        result = usecase.execute(req.value)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Conversion failed: {e}")
    return ConversionResponse(
        original_value=result.original_value,
        converted_value=result.converted_value,
        is_successful=result.is_successful,
        error_message=result.error_message,
    )
