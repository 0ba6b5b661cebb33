# backend/model.py
from pydantic import BaseModel, Field
from typing import Optional, Literal, Union

GenerationStatus = Literal["idle", "loading", "success", "error"]


class GenerateRequest(BaseModel):
    # base64 thuần hoặc data URL "data:image/png;base64,..."
    image: Optional[str] = None
    prompt: Optional[str] = None


class GeneratedCode(BaseModel):
    generated_code: str = Field(alias="generatedCode")

    model_config = {"populate_by_name": True}


class ApiError(BaseModel):
    code: int
    message: str


class GenerateSuccess(BaseModel):
    success: Literal[True] = True
    data: GeneratedCode


class GenerateFailure(BaseModel):
    success: Literal[False] = False
    error: ApiError


GenerateEnvelope = Union[GenerateSuccess, GenerateFailure]


def success_envelope(code: str) -> dict:
    return GenerateSuccess(data=GeneratedCode(generated_code=code)).model_dump(by_alias=True)


def failure_envelope(code: int, message: str) -> dict:
    return GenerateFailure(error=ApiError(code=code, message=message)).model_dump()
