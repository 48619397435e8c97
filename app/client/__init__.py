# Form client package

from app.client.forms import AccountForm, LoginForm, PasswordChangeForm, ProfileForm
from app.client.notifications import Notification, NotificationKind, Notifier
from app.client.submission import (
    FormSubmission,
    SubmissionOutcome,
    SubmissionState,
    create_client,
)

__all__ = [
    "AccountForm",
    "LoginForm",
    "PasswordChangeForm",
    "ProfileForm",
    "Notification",
    "NotificationKind",
    "Notifier",
    "FormSubmission",
    "SubmissionOutcome",
    "SubmissionState",
    "create_client",
]
