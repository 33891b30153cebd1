from fastapi import APIRouter, Depends
from admin_panel.core.dependencies import get_auth_service, get_current_token, get_current_user_id
from admin_panel.modules.auth.schemas import LoginRequest, TokenResponse
from admin_panel.modules.auth.service import AuthService
from admin_panel.modules.panel import registry as panel_registry
from typing import Dict

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    login_data: LoginRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    return service.login(login_data)


@router.post("/logout", status_code=200)
async def logout(
    token: str = Depends(get_current_token),
    current_user: Dict = Depends(get_current_user_id),
    service: AuthService = Depends(get_auth_service)
):
    """Logout, invalidate token and drop the operator's panel state"""
    panel_registry.discard(current_user["id"])
    service.logout(token)
    return {"message": "Logged out successfully"}


@router.get("/me")
async def get_current_user(current_user: Dict = Depends(get_current_user_id)):
    """Get current authenticated operator"""
    return current_user
