from fastapi import APIRouter, Depends
from admin_panel.core.dependencies import (
    get_current_user_id, get_user_service, get_profile_service, get_added_email_service
)
from admin_panel.modules.added_emails.service import AddedEmailService
from admin_panel.modules.panel import registry
from admin_panel.modules.panel.controller import UserManagementPanel
from admin_panel.modules.panel.schemas import (
    PanelView, TabChange, FieldBlur, PasswordModeChange, CustomPasswordUpdate,
    CreateUserFormUpdate, AddEmailFormUpdate, CopyResult
)
from admin_panel.modules.profiles.schemas import ProfileUpdate
from admin_panel.modules.profiles.service import ProfileService
from admin_panel.modules.users.service import UserService
from typing import Dict

router = APIRouter(prefix="/panel", tags=["panel"])


async def get_panel(
    user_data: Dict = Depends(get_current_user_id),
    user_service: UserService = Depends(get_user_service),
    profile_service: ProfileService = Depends(get_profile_service),
    added_email_service: AddedEmailService = Depends(get_added_email_service)
) -> UserManagementPanel:
    """Operator's panel, bound to this request's credentials and mounted on first use"""
    panel = registry.get_or_create(
        user_data["id"],
        lambda: UserManagementPanel(user_service, profile_service, added_email_service)
    )
    panel.bind(user_service, profile_service, added_email_service)
    if not panel.mounted:
        await panel.mount()
    return panel


@router.get("", response_model=PanelView)
async def get_panel_view(panel: UserManagementPanel = Depends(get_panel)):
    return panel.view()


@router.post("/tab", response_model=PanelView)
async def change_tab(body: TabChange, panel: UserManagementPanel = Depends(get_panel)):
    """Switch tab; profiles and added emails are re-fetched on entry"""
    await panel.set_active_tab(body.tab)
    return panel.view()


@router.patch("/form", response_model=PanelView)
async def update_form(body: CreateUserFormUpdate, panel: UserManagementPanel = Depends(get_panel)):
    panel.update_form(**body.model_dump(exclude_unset=True))
    return panel.view()


@router.post("/form/blur", response_model=PanelView)
async def blur_field(body: FieldBlur, panel: UserManagementPanel = Depends(get_panel)):
    panel.blur(body.field)
    return panel.view()


@router.post("/password/mode", response_model=PanelView)
async def set_password_mode(body: PasswordModeChange, panel: UserManagementPanel = Depends(get_panel)):
    panel.set_password_mode(body.mode)
    return panel.view()


@router.put("/password/custom", response_model=PanelView)
async def set_custom_password(body: CustomPasswordUpdate, panel: UserManagementPanel = Depends(get_panel)):
    panel.set_custom_password(body.password)
    return panel.view()


@router.post("/password/generate", response_model=PanelView)
async def regenerate_password(panel: UserManagementPanel = Depends(get_panel)):
    panel.regenerate_password()
    return panel.view()


@router.post("/password/copy", response_model=CopyResult)
async def copy_password(panel: UserManagementPanel = Depends(get_panel)):
    """Copy the generated password to the host clipboard"""
    return CopyResult(copied=await panel.copy_password())


@router.post("/submit", response_model=PanelView)
async def submit_create_user(panel: UserManagementPanel = Depends(get_panel)):
    await panel.submit()
    return panel.view()


@router.post("/profiles/edit/cancel", response_model=PanelView)
async def cancel_profile_edit(panel: UserManagementPanel = Depends(get_panel)):
    panel.cancel_edit()
    return panel.view()


@router.patch("/profiles/edit", response_model=PanelView)
async def update_profile_edit(body: ProfileUpdate, panel: UserManagementPanel = Depends(get_panel)):
    panel.update_edit_buffer(**body.model_dump(exclude_unset=True))
    return panel.view()


@router.post("/profiles/{profile_id}/edit", response_model=PanelView)
async def start_profile_edit(profile_id: str, panel: UserManagementPanel = Depends(get_panel)):
    panel.start_edit(profile_id)
    return panel.view()


@router.post("/profiles/{profile_id}/save", response_model=PanelView)
async def save_profile(profile_id: str, panel: UserManagementPanel = Depends(get_panel)):
    await panel.save_profile(profile_id)
    return panel.view()


@router.patch("/added-emails/form", response_model=PanelView)
async def update_add_email_form(body: AddEmailFormUpdate, panel: UserManagementPanel = Depends(get_panel)):
    panel.update_add_email_form(**body.model_dump(exclude_unset=True))
    return panel.view()


@router.post("/added-emails", response_model=PanelView)
async def add_email(panel: UserManagementPanel = Depends(get_panel)):
    await panel.add_email()
    return panel.view()
