"""
Mock Authentication

Derives a demo user from an email address. The password is required but
never checked, and the token is decorative: nothing verifies it.
"""
import re
import time
from typing import Any, Dict, Optional

from app.services.seed_data import DEFAULT_TENANT_ID

_NON_ALNUM = re.compile(r"[^a-z0-9]", re.IGNORECASE | re.ASCII)
_WORD_START = re.compile(r"\b\w", re.ASCII)


def local_part(email: str) -> str:
    return email.split("@")[0]


def derive_user_id(email: str) -> str:
    """Local part with every non-alphanumeric character removed"""
    return _NON_ALNUM.sub("", local_part(email))


def derive_display_name(email: str) -> str:
    """Local part with separators turned to spaces and each word capitalised"""
    spaced = _NON_ALNUM.sub(" ", local_part(email))
    return _WORD_START.sub(lambda m: m.group(0).upper(), spaced)


def derive_role(email: str) -> str:
    return "admin" if "admin" in email else "student"


def issue_token(user_id: str, now_ms: Optional[int] = None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"token_{user_id}_{now_ms}"


def login(email: str) -> Dict[str, Any]:
    """Build the login response payload for an email address"""
    user_id = derive_user_id(email)
    user = {
        "id": user_id,
        "email": email,
        "name": derive_display_name(email),
        "role": derive_role(email),
        "tenantId": DEFAULT_TENANT_ID,
    }
    return {"success": True, "user": user, "token": issue_token(user_id)}
