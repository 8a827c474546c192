"""
Admin session endpoints: login, logout and status
These routes are not guarded; they are how a session is obtained
"""
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from qds.core.config import settings
from qds.core.database import get_db
from qds.core.security import (
    AdminContext, close_admin_session, get_admin_context, open_admin_session, password_matches,
)
from qds.schemas.auth import AdminStatusResponse, LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin Auth"])


def _login_result(status_code: int, success: bool, message: str) -> JSONResponse:
    body = LoginResponse(success=success, message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, request: Request, db: Session = Depends(get_db)):
    """Exchange the shared admin password for a session cookie"""
    if not settings.ADMIN_PASSWORD:
        logger.error("Admin login attempted but ADMIN_PASSWORD is not configured")
        return _login_result(
            status.HTTP_500_INTERNAL_SERVER_ERROR, False, "Server configuration error"
        )

    if not password_matches(payload.password, settings.ADMIN_PASSWORD):
        logger.info("Rejected admin login from %s", request.client.host if request.client else "-")
        return _login_result(status.HTTP_401_UNAUTHORIZED, False, "Invalid password")

    open_admin_session(db, request)
    logger.info("Admin session opened")
    return _login_result(status.HTTP_200_OK, True, "Login successful")


@router.post("/logout", response_model=LoginResponse)
def logout(request: Request, db: Session = Depends(get_db)):
    close_admin_session(db, request)
    return LoginResponse(success=True, message="Logout successful")


@router.get("/status", response_model=AdminStatusResponse)
def admin_status(context: AdminContext = Depends(get_admin_context)):
    """Whether the caller holds a live admin session"""
    return AdminStatusResponse(is_admin=context.is_admin)
