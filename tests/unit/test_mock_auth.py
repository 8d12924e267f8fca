"""
Unit tests for mock authentication

Tests user id, display name, role and token derivation from an email.
"""
import re

from app.services.mock_auth import (
    derive_display_name,
    derive_role,
    derive_user_id,
    issue_token,
    login,
)


class TestDerivations:
    """Test the email-based derivations"""

    def test_user_id_strips_non_alphanumerics(self):
        assert derive_user_id("john.doe-99@example.com") == "johndoe99"

    def test_user_id_preserves_case(self):
        assert derive_user_id("Jane_Smith@example.com") == "JaneSmith"

    def test_display_name_title_cases_words(self):
        assert derive_display_name("john.doe@example.com") == "John Doe"

    def test_display_name_keeps_inner_capitals(self):
        assert derive_display_name("mcDonald.x@example.com") == "McDonald X"

    def test_role_admin_anywhere_in_email(self):
        assert derive_role("admin@school.edu") == "admin"
        assert derive_role("jane@admin.school.edu") == "admin"
        assert derive_role("jane@school.edu") == "student"

    def test_email_without_at_sign_uses_whole_string(self):
        assert derive_user_id("plain.user") == "plainuser"

    def test_non_ascii_letters_are_separators(self):
        """Only ASCII letters and digits survive, even under case folding"""
        email = "\u212aelvin.\u017fam@example.com"
        assert derive_user_id(email) == "elvinam"
        assert derive_display_name(email) == " Elvin Am"
        assert derive_user_id("jos\u00e9@example.com") == "jos"

    def test_token_format(self):
        assert issue_token("johndoe", now_ms=1700000000000) == "token_johndoe_1700000000000"


class TestLogin:
    """Test the login payload"""

    def test_login_payload(self):
        result = login("admin.jane@example.com")

        assert result["success"] is True
        assert result["user"] == {
            "id": "adminjane",
            "email": "admin.jane@example.com",
            "name": "Admin Jane",
            "role": "admin",
            "tenantId": "stanford",
        }
        assert re.fullmatch(r"token_adminjane_\d+", result["token"])
