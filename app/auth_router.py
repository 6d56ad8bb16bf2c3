import structlog
from fastapi import APIRouter
from pydantic import BaseModel

from app.auth import check_credentials, issue_token
from app.exceptions import UnauthorizedError

logger = structlog.get_logger()

router = APIRouter()


class LoginRequest(BaseModel):
    username: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


@router.post("/login", response_model=TokenResponse)
async def login(data: LoginRequest) -> TokenResponse:
    if not check_credentials(data.username, data.password):
        logger.warning("login_rejected", username=data.username)
        raise UnauthorizedError("Invalid credentials")

    logger.info("login_succeeded", username=data.username)
    return TokenResponse(access_token=issue_token(data.username))
