from fastapi import APIRouter, Depends, HTTPException, Query, status
from admin_panel.core.dependencies import get_current_user_id, get_user_service
from admin_panel.modules.users.schemas import (
    CreateUserRequest, CreateUserResponse, NewProfileData, RecentUser, GeneratedPasswordResponse
)
from admin_panel.modules.users.service import UserService, DUPLICATE_USER_MESSAGE
from typing import List, Dict

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=CreateUserResponse, status_code=201)
async def create_user(
    request: CreateUserRequest,
    user_data: Dict = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """Create a confirmed account. A password is generated when none is supplied."""
    generated_password = None
    password = request.password
    if not password:
        generated_password = service.generate_password()
        password = generated_password

    result = service.create_user_with_email(
        request.email,
        password,
        NewProfileData(
            first_name=request.first_name,
            last_name=request.last_name,
            phone_number=request.phone_number,
            role=request.role
        )
    )
    if result.error == DUPLICATE_USER_MESSAGE:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.error)
    if result.error and result.error.startswith("Failed to create user"):
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error)
    if result.error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    return CreateUserResponse(user=result.user, generated_password=generated_password)


@router.get("/recent", response_model=List[RecentUser])
async def list_recent_users(
    user_data: Dict = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    """Last created users (empty when the read fails)"""
    return service.get_recent_users()


@router.get("/generate-password", response_model=GeneratedPasswordResponse)
async def generate_password(
    length: int = Query(12, ge=6, le=128),
    user_data: Dict = Depends(get_current_user_id),
    service: UserService = Depends(get_user_service)
):
    return GeneratedPasswordResponse(password=service.generate_password(length))
