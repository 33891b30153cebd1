"""
User management panel: view-model plus the handlers that drive it.

Each handler runs to completion before the next event is processed, so the
state needs no locking. List reads are re-done on navigation instead of being
cached, and a failed read is shown as an empty list.
"""

import asyncio
import logging
from fastapi import HTTPException
from admin_panel.config.settings import settings
from admin_panel.core.clipboard import copy_to_clipboard
from admin_panel.core.validation import (
    is_valid_email, is_valid_name, is_valid_password, MIN_NAME_LENGTH, MIN_PASSWORD_LENGTH
)
from admin_panel.modules.added_emails.service import AddedEmailService
from admin_panel.modules.panel.schemas import (
    PanelState, PanelView, PanelTab, PasswordMode, MessageType, StatusMessage, FormField,
    FieldErrors, CreateUserForm, TouchedFields, AddEmailForm
)
from admin_panel.modules.profiles.schemas import ProfileUpdate
from admin_panel.modules.profiles.service import ProfileService
from admin_panel.modules.users.schemas import NewProfileData
from admin_panel.modules.users.service import UserService
from typing import Callable, Optional

logger = logging.getLogger(__name__)

EDITABLE_PROFILE_FIELDS = {"email", "role", "first_name", "last_name", "phone_number", "school"}


def email_error(email: str) -> str:
    if not email:
        return "Email is required"
    if not is_valid_email(email):
        return "Invalid email format"
    return ""


def name_error(name: str, label: str) -> str:
    if not name:
        return f"{label} is required"
    if not is_valid_name(name):
        return f"{label} must be at least {MIN_NAME_LENGTH} characters"
    return ""


def password_error(password: str) -> str:
    if not password:
        return "Password is required"
    if not is_valid_password(password):
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return ""


def _error_text(exc: Exception, fallback: str) -> str:
    if isinstance(exc, HTTPException):
        return str(exc.detail) or fallback
    return str(exc) or fallback


class UserManagementPanel:
    def __init__(
        self,
        user_service: UserService,
        profile_service: ProfileService,
        added_email_service: AddedEmailService,
        copy: Callable[[str], bool] = copy_to_clipboard,
        form_reset_delay: Optional[float] = None,
        copied_flag_delay: Optional[float] = None,
    ):
        self.user_service = user_service
        self.profile_service = profile_service
        self.added_email_service = added_email_service
        self.copy = copy
        self.form_reset_delay = settings.form_reset_delay_seconds if form_reset_delay is None else form_reset_delay
        self.copied_flag_delay = settings.copied_flag_seconds if copied_flag_delay is None else copied_flag_delay
        self.state = PanelState()
        self.mounted = False
        self.form_reset_task: Optional[asyncio.Task] = None
        self.copied_reset_task: Optional[asyncio.Task] = None

    def bind(
        self,
        user_service: UserService,
        profile_service: ProfileService,
        added_email_service: AddedEmailService
    ) -> None:
        """Swap in service handles carrying the current request's credentials"""
        self.user_service = user_service
        self.profile_service = profile_service
        self.added_email_service = added_email_service

    # --- navigation -------------------------------------------------------

    async def mount(self) -> None:
        self.mounted = True
        self.regenerate_password()
        await self.refresh_recent_users()
        await self._load_tab(self.state.active_tab)

    async def set_active_tab(self, tab: PanelTab) -> None:
        if tab == self.state.active_tab:
            return
        self.state.active_tab = tab
        await self._load_tab(tab)

    async def _load_tab(self, tab: PanelTab) -> None:
        if tab == PanelTab.PROFILES:
            await self.refresh_profiles()
        elif tab == PanelTab.ADDED_EMAILS:
            await self.refresh_added_emails()

    async def refresh_recent_users(self) -> None:
        result = self.user_service.fetch_recent_users()
        if not result.ok:
            logger.warning(f"Recent users unavailable: {result.error}")
        self.state.recent_users = result.rows_or_empty()

    async def refresh_profiles(self) -> None:
        self.state.loading_profiles = True
        try:
            result = self.profile_service.fetch_profiles()
            if not result.ok:
                logger.warning(f"Profiles unavailable: {result.error}")
            self.state.profiles = result.rows_or_empty()
        finally:
            self.state.loading_profiles = False

    async def refresh_added_emails(self) -> None:
        self.state.loading_added_emails = True
        try:
            result = self.added_email_service.fetch_added_emails()
            if not result.ok:
                logger.warning(f"Added emails unavailable: {result.error}")
            self.state.added_emails = result.rows_or_empty()
        finally:
            self.state.loading_added_emails = False

    # --- create user form -------------------------------------------------

    def field_errors(self) -> FieldErrors:
        form = self.state.form
        touched = self.state.touched
        return FieldErrors(
            email=email_error(form.email) if touched.email else "",
            first_name=name_error(form.first_name, "First name") if touched.first_name else "",
            last_name=name_error(form.last_name, "Last name") if touched.last_name else "",
            custom_password=password_error(self.state.custom_password) if touched.custom_password else "",
        )

    def can_submit(self) -> bool:
        form = self.state.form
        if email_error(form.email):
            return False
        if name_error(form.first_name, "First name") or name_error(form.last_name, "Last name"):
            return False
        if self.state.password_mode == PasswordMode.CUSTOM:
            return not password_error(self.state.custom_password)
        return True

    def update_form(self, **fields) -> None:
        values = {k: v for k, v in fields.items() if v is not None}
        self.state.form = CreateUserForm(**{**self.state.form.model_dump(), **values})

    def blur(self, field: FormField) -> None:
        setattr(self.state.touched, FormField(field).value, True)

    def set_password_mode(self, mode: PasswordMode) -> None:
        self.state.password_mode = mode

    def set_custom_password(self, password: str) -> None:
        self.state.custom_password = password

    def regenerate_password(self) -> str:
        self.state.generated_password = self.user_service.generate_password()
        self.state.copied_password = False
        return self.state.generated_password

    async def copy_password(self) -> bool:
        copied = await asyncio.to_thread(self.copy, self.state.generated_password)
        if copied:
            self.state.copied_password = True
            self._cancel(self.copied_reset_task)
            self.copied_reset_task = asyncio.get_running_loop().create_task(self._reset_copied_later())
        return copied

    async def _reset_copied_later(self) -> None:
        await asyncio.sleep(self.copied_flag_delay)
        self.state.copied_password = False

    def clear_form(self) -> None:
        self.state.form = CreateUserForm()
        self.state.custom_password = ""
        self.state.touched = TouchedFields()
        self.state.submitted = False
        self.state.password_mode = PasswordMode.AUTO
        self.regenerate_password()

    async def submit(self) -> bool:
        """Create the account from the form. Returns True when the account was created."""
        state = self.state
        state.submitted = True
        state.touched = TouchedFields(
            email=True,
            first_name=True,
            last_name=True,
            custom_password=state.password_mode == PasswordMode.CUSTOM,
        )
        if not self.can_submit():
            return False

        state.loading = True
        state.message = None
        form = state.form
        password = state.generated_password if state.password_mode == PasswordMode.AUTO else state.custom_password
        try:
            result = self.user_service.create_user_with_email(
                form.email,
                password,
                NewProfileData(
                    first_name=form.first_name,
                    last_name=form.last_name,
                    phone_number=form.phone_number,
                    role=form.role,
                )
            )
            if result.error:
                state.message = StatusMessage(text=result.error, type=MessageType.ERROR)
                return False

            state.message = StatusMessage(
                text=f"User {form.email} created successfully! The user can now log in with their email and chosen password.",
                type=MessageType.SUCCESS,
            )
            await self.refresh_recent_users()
            self._schedule_form_reset()
            return True
        except Exception as e:
            logger.error(f"Unexpected error creating user {form.email}: {e}")
            state.message = StatusMessage(text=_error_text(e, "Failed to create user"), type=MessageType.ERROR)
            return False
        finally:
            state.loading = False
            state.submitted = False

    def _schedule_form_reset(self) -> None:
        self._cancel(self.form_reset_task)
        self.form_reset_task = asyncio.get_running_loop().create_task(self._reset_form_later())

    async def _reset_form_later(self) -> None:
        await asyncio.sleep(self.form_reset_delay)
        self.clear_form()

    @staticmethod
    def _cancel(task: Optional[asyncio.Task]) -> None:
        if task is not None and not task.done():
            task.cancel()

    # --- profile editing --------------------------------------------------

    def start_edit(self, profile_id: str) -> bool:
        profile = next((p for p in self.state.profiles if p.id == profile_id), None)
        if profile is None:
            return False
        self.state.editing_profile_id = profile_id
        self.state.edit_profile_data = ProfileUpdate(**profile.model_dump(include=EDITABLE_PROFILE_FIELDS))
        return True

    def update_edit_buffer(self, **fields) -> bool:
        if self.state.editing_profile_id is None:
            return False
        current = self.state.edit_profile_data.model_dump(exclude_unset=True)
        self.state.edit_profile_data = ProfileUpdate(**{**current, **fields})
        return True

    def cancel_edit(self) -> None:
        self.state.editing_profile_id = None
        self.state.edit_profile_data = ProfileUpdate()

    async def save_profile(self, profile_id: Optional[str] = None) -> bool:
        """Write the edit buffer, then patch the local list in place (no re-fetch).

        Only the profile currently being edited can be saved.
        """
        editing_id = self.state.editing_profile_id
        if editing_id is None:
            return False
        if profile_id is not None and profile_id != editing_id:
            self.state.message = StatusMessage(
                text=f"Profile {profile_id} is not being edited",
                type=MessageType.ERROR,
            )
            return False
        profile_id = editing_id
        buffer = self.state.edit_profile_data
        try:
            self.profile_service.update_user_profile(profile_id, buffer)
        except Exception as e:
            self.state.message = StatusMessage(text=_error_text(e, "Failed to update profile"), type=MessageType.ERROR)
            return False

        edited = buffer.model_dump(exclude_unset=True)
        if edited.get("email"):
            edited["email"] = edited["email"].lower()
        self.state.profiles = [
            p.model_copy(update=edited) if p.id == profile_id else p
            for p in self.state.profiles
        ]
        self.cancel_edit()
        self.state.message = StatusMessage(text="Profile updated successfully!", type=MessageType.SUCCESS)
        return True

    # --- added emails -----------------------------------------------------

    def update_add_email_form(self, **fields) -> None:
        values = {k: v for k, v in fields.items() if v is not None}
        self.state.add_email_form = AddEmailForm(**{**self.state.add_email_form.model_dump(), **values})

    async def add_email(self) -> bool:
        state = self.state
        form = state.add_email_form
        if not form.email:
            state.message = StatusMessage(text="Email is required", type=MessageType.ERROR)
            return False

        state.adding_email = True
        try:
            result = self.added_email_service.add_email_to_added_email(
                form.email,
                form.first_name,
                form.last_name
            )
            if not result.success:
                state.message = StatusMessage(text=result.error or "Failed to add email", type=MessageType.ERROR)
                return False
            state.message = StatusMessage(text=f"Email {form.email} added successfully!", type=MessageType.SUCCESS)
            state.add_email_form = AddEmailForm()
            await self.refresh_added_emails()
            return True
        except Exception as e:
            state.message = StatusMessage(text=_error_text(e, "Failed to add email"), type=MessageType.ERROR)
            return False
        finally:
            state.adding_email = False

    # --- rendering --------------------------------------------------------

    def view(self) -> PanelView:
        return PanelView(
            **self.state.model_dump(),
            errors=self.field_errors(),
            can_submit=self.can_submit(),
        )
