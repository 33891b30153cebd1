from fastapi import APIRouter, Depends
from admin_panel.core.dependencies import get_current_user_id, get_profile_service
from admin_panel.modules.profiles.schemas import ProfileUpdate, ProfileResponse
from admin_panel.modules.profiles.service import ProfileService
from typing import List, Dict

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("", response_model=List[ProfileResponse])
async def list_profiles(
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """List all profiles, newest first"""
    return service.get_user_profiles()


@router.patch("/{profile_id}", response_model=ProfileResponse)
async def update_profile(
    profile_id: str,
    profile_data: ProfileUpdate,
    user_data: Dict = Depends(get_current_user_id),
    service: ProfileService = Depends(get_profile_service)
):
    """Update the supplied profile fields"""
    return service.update_user_profile(profile_id, profile_data)
