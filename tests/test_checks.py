# tests/test_checks.py
"""Unit tests for group and scope checks."""
import pytest

from cognito_context import (
    AuthError,
    AuthErrorKind,
    build_user_context,
    has_any_scope,
    has_scope,
    require_groups,
    require_scopes,
    user_in_any_group,
    user_in_group,
)


@pytest.fixture
def user():
    return build_user_context({
        "sub": "abc",
        "cognito:groups": ["admins"],
        "scope": "write read",
    })


class TestPredicates:
    def test_group_checks(self, user):
        assert user_in_group(user, "admins") is True
        assert user_in_group(user, "Admins") is False
        assert user_in_any_group(user, ["editors", "admins"]) is True
        assert user_in_any_group(user, ["editors", "guests"]) is False
        assert user_in_any_group(user, []) is False

    def test_scope_checks(self, user):
        assert has_scope(user, "write") is True
        assert has_any_scope(user, ["delete", "read"]) is True
        assert has_any_scope(user, ["delete", "update"]) is False


class TestRequireGroups:
    def test_single_name(self, user):
        assert require_groups(user, "admins") is user

    def test_any_of(self, user):
        assert require_groups(user, ["editors", "admins"]) is user

    def test_empty_requirement_passes(self, user):
        assert require_groups(user, []) is user

    def test_missing_group_is_forbidden(self, user):
        with pytest.raises(AuthError) as excinfo:
            require_groups(user, "editors")
        assert excinfo.value.kind is AuthErrorKind.FORBIDDEN
        assert excinfo.value.status_code == 403


class TestRequireScopes:
    def test_any_of(self, user):
        assert require_scopes(user, ("delete", "read")) is user

    def test_empty_requirement_passes(self, user):
        assert require_scopes(user, []) is user

    def test_missing_scope_is_forbidden(self, user):
        with pytest.raises(AuthError) as excinfo:
            require_scopes(user, ["delete"])
        assert excinfo.value.is_forbidden

    def test_chaining(self, user):
        assert require_scopes(require_groups(user, "admins"), "write") is user
