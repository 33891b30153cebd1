from fastapi import APIRouter, Depends, HTTPException
from admin_panel.core.dependencies import get_current_user_id, get_added_email_service
from admin_panel.modules.added_emails.schemas import AddedEmailCreate, AddedEmailResponse, AddEmailResult
from admin_panel.modules.added_emails.service import AddedEmailService
from typing import List, Dict

router = APIRouter(prefix="/added-emails", tags=["added-emails"])


@router.get("", response_model=List[AddedEmailResponse])
async def list_added_emails(
    user_data: Dict = Depends(get_current_user_id),
    service: AddedEmailService = Depends(get_added_email_service)
):
    """All tracked emails, newest first"""
    return service.get_all_added_emails()


@router.post("", response_model=AddEmailResult, status_code=201)
async def add_email(
    email_data: AddedEmailCreate,
    user_data: Dict = Depends(get_current_user_id),
    service: AddedEmailService = Depends(get_added_email_service)
):
    result = service.add_email_to_added_email(
        email_data.email,
        email_data.first_name,
        email_data.last_name
    )
    if not result.success:
        raise HTTPException(status_code=400, detail=result.error or "Failed to add email")
    return result
