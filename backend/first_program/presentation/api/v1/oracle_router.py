from datetime import datetime
from typing import List

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from first_program.core.di.service_locator import ServiceLocator


router = APIRouter(prefix="/api/v1/oracle", tags=["oracle"])


class OracleRequest(BaseModel):
    question: str = Field(..., description="Question for the Magic 8-Ball")


class OracleResponseModel(BaseModel):
    question: str
    answer: str
    response_time: datetime


class OracleAnswersResponse(BaseModel):
    answers: List[str]
    total: int


@router.post("/ask", response_model=OracleResponseModel)
def ask_oracle(req: OracleRequest):
    try:
        usecase = ServiceLocator.ask_oracle_usecase()
        resp = usecase.execute(req.question)
        return OracleResponseModel(question=resp.question, answer=resp.answer, response_time=resp.response_time)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Oracle failed: {e}")


@router.get("/answers", response_model=OracleAnswersResponse)
def list_answers():
    answers = ServiceLocator.ask_oracle_usecase().all_answers()
    return OracleAnswersResponse(answers=list(answers), total=len(answers))
