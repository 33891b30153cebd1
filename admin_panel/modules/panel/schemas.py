from enum import Enum
from pydantic import BaseModel, Field
from typing import Optional, List
from admin_panel.modules.profiles.schemas import ProfileRole, ProfileResponse, ProfileUpdate
from admin_panel.modules.users.schemas import RecentUser
from admin_panel.modules.added_emails.schemas import AddedEmailResponse


class PanelTab(str, Enum):
    CREATE = "create"
    PROFILES = "profiles"
    ADDED_EMAILS = "addedEmails"


class PasswordMode(str, Enum):
    AUTO = "auto"
    CUSTOM = "custom"


class MessageType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class FormField(str, Enum):
    EMAIL = "email"
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    CUSTOM_PASSWORD = "custom_password"


class StatusMessage(BaseModel):
    text: str
    type: MessageType


class CreateUserForm(BaseModel):
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    role: ProfileRole = ProfileRole.LEARNER


class CreateUserFormUpdate(BaseModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    role: Optional[ProfileRole] = None


class TouchedFields(BaseModel):
    email: bool = False
    first_name: bool = False
    last_name: bool = False
    custom_password: bool = False


class AddEmailForm(BaseModel):
    email: str = ""
    first_name: str = ""
    last_name: str = ""


class AddEmailFormUpdate(BaseModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class FieldErrors(BaseModel):
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    custom_password: str = ""


class PanelState(BaseModel):
    active_tab: PanelTab = PanelTab.CREATE

    # Create user
    form: CreateUserForm = Field(default_factory=CreateUserForm)
    touched: TouchedFields = Field(default_factory=TouchedFields)
    submitted: bool = False
    password_mode: PasswordMode = PasswordMode.AUTO
    generated_password: str = ""
    custom_password: str = ""
    copied_password: bool = False
    loading: bool = False
    message: Optional[StatusMessage] = None
    recent_users: List[RecentUser] = Field(default_factory=list)

    # Profiles
    profiles: List[ProfileResponse] = Field(default_factory=list)
    loading_profiles: bool = False
    editing_profile_id: Optional[str] = None
    edit_profile_data: ProfileUpdate = Field(default_factory=ProfileUpdate)

    # Added emails
    added_emails: List[AddedEmailResponse] = Field(default_factory=list)
    loading_added_emails: bool = False
    add_email_form: AddEmailForm = Field(default_factory=AddEmailForm)
    adding_email: bool = False


class PanelView(PanelState):
    errors: FieldErrors = Field(default_factory=FieldErrors)
    can_submit: bool = False


class TabChange(BaseModel):
    tab: PanelTab


class FieldBlur(BaseModel):
    field: FormField


class PasswordModeChange(BaseModel):
    mode: PasswordMode


class CustomPasswordUpdate(BaseModel):
    password: str


class CopyResult(BaseModel):
    copied: bool
