# authserver/api/auth.py

from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException, Request, status, Depends
from ..core.service import AuthService
from ..core.outcomes import LoginOutcome, RegisterOutcome


router = APIRouter(prefix="/api/auth", tags=["auth"])


class Credentials(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class Message(BaseModel):
    message: str


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


@router.post("/register", response_model=Message)
def register(credentials: Credentials, service: AuthService = Depends(get_auth_service)):
    outcome = service.register(credentials.username, credentials.password)
    if outcome is RegisterOutcome.USERNAME_TAKEN:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.message)
    return {"message": outcome.message}


@router.post("/login", response_model=Message)
def login(credentials: Credentials, service: AuthService = Depends(get_auth_service)):
    outcome = service.login(credentials.username, credentials.password)
    if outcome is LoginOutcome.INVALID_CREDENTIALS:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=outcome.message)
    return {"message": outcome.message}
