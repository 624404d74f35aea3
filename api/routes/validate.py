"""Validate endpoint for program bracket checking."""

from fastapi import APIRouter
from pydantic import BaseModel
from typing import Any, Dict, List

from bfpp.loader import sanitize
from bfpp.runtime.brackets import check_brackets
from bfpp.runtime.errors import CapacityError
from bfpp.runtime.state import DEFAULT_MAX_CODE_LENGTH

router = APIRouter()


class ValidateRequest(BaseModel):
    """Request body for program validation."""
    code: str


class ValidateResponse(BaseModel):
    """Response body for program validation."""
    valid: bool
    instruction_count: int = 0
    loop_count: int = 0
    errors: List[Dict[str, Any]] = []


def validate_program(code: str) -> ValidateResponse:
    """Validate program source: capacity, then bracket matching."""
    program = sanitize(code)
    errors: List[Dict[str, Any]] = []

    if len(program) > DEFAULT_MAX_CODE_LENGTH:
        errors.append(CapacityError(DEFAULT_MAX_CODE_LENGTH, len(program)).to_dict())
    else:
        error = check_brackets(program)
        if error is not None:
            errors.append(error.to_dict())

    return ValidateResponse(
        valid=len(errors) == 0,
        instruction_count=len(program),
        loop_count=program.count("["),
        errors=errors,
    )


@router.post("/validate", response_model=ValidateResponse)
def validate_program_endpoint(request: ValidateRequest):
    """Check that every loop in a program is closed."""
    return validate_program(request.code)
