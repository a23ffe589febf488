import pytest

from climatebuddy.modules.accounts import Profile, ProfileUpdateInput
from climatebuddy.modules.auth import LoginInput, SignupInput
from climatebuddy.modules.auth.service import RESET_LINK_SENT
from climatebuddy.modules.common import ErrorCode
from climatebuddy.modules.sessions import Session

VALID_SIGNUP = {
    "name": "Ann",
    "email": "ann@x.com",
    "password": "Abcdefg1",
    "confirm_password": "Abcdefg1",
    "agree_to_terms": True,
}


def signup_input(**overrides) -> SignupInput:
    return SignupInput(**{**VALID_SIGNUP, **overrides})


@pytest.mark.asyncio
async def test_signup_returns_public_user_and_token(auth_service):
    result = await auth_service.signup(signup_input())

    assert result.success is True
    assert result.error is None
    assert result.user.email == "ann@x.com"
    assert result.user.name == "Ann"
    assert result.user.subscription == "free"
    assert result.token
    assert result.message == "Account created successfully"
    assert not hasattr(result.user, "password")
    assert not hasattr(result.user, "password_hash")


@pytest.mark.asyncio
async def test_repeated_signup_is_rejected(auth_service):
    first = await auth_service.signup(signup_input())
    second = await auth_service.signup(signup_input())

    assert first.success is True
    assert second.success is False
    assert second.error == "An account with this email already exists"
    assert second.user is None and second.token is None


@pytest.mark.asyncio
async def test_duplicate_email_is_case_insensitive_and_checked_before_password(auth_service):
    await auth_service.signup(signup_input())

    result = await auth_service.signup(
        signup_input(email="ANN@X.com", password="short", confirm_password="other")
    )

    assert result.success is False
    assert result.error == "An account with this email already exists"
    assert result.code is ErrorCode.VALIDATION


@pytest.mark.asyncio
async def test_seeded_email_counts_as_registered(auth_service):
    result = await auth_service.signup(signup_input(email="Demo@ClimateBuddy.com"))

    assert result.error == "An account with this email already exists"


@pytest.mark.asyncio
async def test_signup_then_login_with_same_credentials(auth_service):
    created = await auth_service.signup(signup_input())
    result = await auth_service.login(LoginInput(email="ann@x.com", password="Abcdefg1"))

    assert result.success is True
    assert result.token
    assert result.token != created.token
    assert result.user.id == created.user.id
    assert result.message == "Login successful"


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"name": ""}, "All fields are required"),
        ({"email": ""}, "All fields are required"),
        ({"password": ""}, "All fields are required"),
        ({"email": "ann-at-x.com"}, "Please enter a valid email address"),
        ({"email": "ann@x"}, "Please enter a valid email address"),
        (
            {"password": "short", "confirm_password": "short"},
            "Password must be at least 8 characters long",
        ),
        (
            {"password": "alllowercase1", "confirm_password": "alllowercase1"},
            "Password must contain at least one uppercase letter, one lowercase letter, and one number",
        ),
        (
            {"password": "NoDigitsHere", "confirm_password": "NoDigitsHere"},
            "Password must contain at least one uppercase letter, one lowercase letter, and one number",
        ),
        ({"confirm_password": "Abcdefg2"}, "Passwords do not match"),
        ({"agree_to_terms": False}, "You must agree to the terms and conditions"),
    ],
)
@pytest.mark.asyncio
async def test_signup_validation_failures(auth_service, container, overrides, expected):
    before = await container.accounts.count()

    result = await auth_service.signup(signup_input(**overrides))

    assert result.success is False
    assert result.error == expected
    assert result.code is ErrorCode.VALIDATION
    assert await container.accounts.count() == before


@pytest.mark.asyncio
async def test_signup_accepts_policy_compliant_password(auth_service):
    result = await auth_service.signup(
        signup_input(password="Valid123", confirm_password="Valid123")
    )

    assert result.success is True


@pytest.mark.asyncio
async def test_new_account_gets_default_profile_and_next_id(auth_service):
    result = await auth_service.signup(signup_input())

    assert result.user.id == "5"
    assert result.user.avatar.startswith("https://images.unsplash.com/photo-")
    profile = await auth_service.get_user_profile(result.user.id)
    assert profile == Profile(
        age_group="adult",
        knowledge_level="beginner",
        language="en",
        location="Unknown",
        points=0,
        level=1,
        achievements=[],
    )


@pytest.mark.asyncio
async def test_passwords_are_stored_as_bcrypt_hashes(auth_service, container):
    await auth_service.signup(signup_input())

    account = await container.accounts.get_by_email("ann@x.com")
    assert account.password_hash != "Abcdefg1"
    assert account.password_hash.startswith("$2")
    seeded = await container.accounts.get_by_email("demo@climatebuddy.com")
    assert seeded.password_hash != "Demo1234"


@pytest.mark.asyncio
async def test_login_requires_both_fields(auth_service):
    result = await auth_service.login(LoginInput(email="demo@climatebuddy.com", password=""))

    assert result.success is False
    assert result.error == "Email and password are required"
    assert result.code is ErrorCode.VALIDATION


@pytest.mark.asyncio
async def test_wrong_password_and_unknown_email_are_indistinguishable(auth_service):
    wrong_password = await auth_service.login(
        LoginInput(email="demo@climatebuddy.com", password="Wrong1234")
    )
    unknown_email = await auth_service.login(
        LoginInput(email="nobody@climatebuddy.com", password="Demo1234")
    )

    assert wrong_password.success is False
    assert unknown_email.success is False
    assert wrong_password.error == unknown_email.error == "Invalid email or password"
    assert wrong_password.code is unknown_email.code is ErrorCode.UNAUTHORIZED


@pytest.mark.asyncio
async def test_unknown_email_still_runs_a_password_check(auth_service, container, monkeypatch):
    hasher = container.account_service._hasher
    checked = []
    original = hasher.verify

    def verify(password, password_hash):
        checked.append(password)
        return original(password, password_hash)

    monkeypatch.setattr(hasher, "verify", verify)

    await auth_service.login(LoginInput(email="nobody@climatebuddy.com", password="Demo1234"))
    await auth_service.login(LoginInput(email="demo@climatebuddy.com", password="Wrong1234"))

    assert checked == ["Demo1234", "Wrong1234"]


@pytest.mark.asyncio
async def test_login_updates_last_login(auth_service, clock):
    result = await auth_service.login(
        LoginInput(email="DEMO@climatebuddy.com", password="Demo1234")
    )

    assert result.success is True
    assert result.user.id == "1"
    assert result.user.last_login == clock.now


@pytest.mark.asyncio
async def test_validate_token_after_issue(auth_service):
    login = await auth_service.login(LoginInput(email="sarah@example.com", password="Password123"))

    result = await auth_service.validate_token(login.token)

    assert result.success is True
    assert result.user.email == "sarah@example.com"
    assert result.token == login.token


@pytest.mark.asyncio
async def test_token_is_valid_until_expiry_instant(auth_service, clock):
    login = await auth_service.login(LoginInput(email="sarah@example.com", password="Password123"))

    clock.advance(hours=24)

    assert (await auth_service.validate_token(login.token)).success is True


@pytest.mark.asyncio
async def test_expired_token_is_removed(auth_service, container, clock):
    login = await auth_service.login(LoginInput(email="sarah@example.com", password="Password123"))

    clock.advance(hours=24, seconds=1)
    expired = await auth_service.validate_token(login.token)
    again = await auth_service.validate_token(login.token)

    assert expired.success is False
    assert expired.error == "Token expired"
    assert expired.code is ErrorCode.UNAUTHORIZED
    assert again.success is False
    assert again.error == "Invalid token"
    assert await container.sessions.get_by_token(login.token) is None


@pytest.mark.asyncio
async def test_logout_revokes_token(auth_service):
    login = await auth_service.login(LoginInput(email="sarah@example.com", password="Password123"))

    logout = await auth_service.logout(login.token)
    result = await auth_service.validate_token(login.token)

    assert logout.success is True
    assert logout.message == "Logged out successfully"
    assert result.success is False
    assert result.error == "Invalid token"


@pytest.mark.asyncio
async def test_logout_of_unknown_token_succeeds(auth_service):
    result = await auth_service.logout("not-a-token")

    assert result.success is True


@pytest.mark.asyncio
async def test_sessions_are_independent(auth_service):
    credentials = LoginInput(email="sarah@example.com", password="Password123")
    first = await auth_service.login(credentials)
    second = await auth_service.login(credentials)

    await auth_service.logout(first.token)

    assert (await auth_service.validate_token(first.token)).success is False
    assert (await auth_service.validate_token(second.token)).success is True


@pytest.mark.asyncio
async def test_orphaned_session_reports_missing_user(auth_service, container, clock):
    await container.sessions.add(
        Session(user_id="999", token="orphan", created_at=clock.now, expires_at=clock.now)
    )

    result = await auth_service.validate_token("orphan")

    assert result.success is False
    assert result.error == "User not found"
    assert result.code is ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_forgot_password_does_not_reveal_registration(auth_service):
    known = await auth_service.forgot_password("demo@climatebuddy.com")
    unknown = await auth_service.forgot_password("nobody@climatebuddy.com")

    assert known.success is True and unknown.success is True
    assert known.message == unknown.message == RESET_LINK_SENT


@pytest.mark.asyncio
async def test_forgot_password_requires_email(auth_service):
    result = await auth_service.forgot_password("")

    assert result.success is False
    assert result.error == "Email is required"


@pytest.mark.asyncio
async def test_update_profile_merges_fields(auth_service):
    result = await auth_service.update_user_profile(
        "2", ProfileUpdateInput(points=400, location="Oslo, Norway")
    )

    assert result.success is True
    assert result.message == "Profile updated successfully"
    profile = await auth_service.get_user_profile("2")
    assert profile.points == 400
    assert profile.location == "Oslo, Norway"
    assert profile.level == 2
    assert profile.achievements == ["first_action"]


@pytest.mark.asyncio
async def test_returned_profile_is_a_copy(auth_service):
    profile = await auth_service.get_user_profile("2")
    profile.points = 9999
    profile.achievements.append("mutated")

    stored = await auth_service.get_user_profile("2")

    assert stored.points == 340
    assert stored.achievements == ["first_action"]


@pytest.mark.asyncio
async def test_update_profile_of_unknown_user(auth_service):
    result = await auth_service.update_user_profile("999", ProfileUpdateInput(points=1))

    assert result.success is False
    assert result.error == "User not found"
    assert result.code is ErrorCode.NOT_FOUND


@pytest.mark.asyncio
async def test_get_profile_of_unknown_user_is_none(auth_service):
    assert await auth_service.get_user_profile("999") is None


def test_demo_credentials_are_first_three_seed_accounts(auth_service):
    credentials = auth_service.get_demo_credentials()

    assert [item.email for item in credentials] == [
        "demo@climatebuddy.com",
        "sarah@example.com",
        "alex@student.edu",
    ]
    assert credentials[0].password == "Demo1234"


@pytest.mark.asyncio
async def test_unexpected_faults_become_generic_errors(auth_service, container, monkeypatch):
    async def boom(*args, **kwargs):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(container.sessions, "get_by_token", boom)
    monkeypatch.setattr(container.account_service, "authenticate", boom)

    validate = await auth_service.validate_token("anything")
    login = await auth_service.login(LoginInput(email="demo@climatebuddy.com", password="Demo1234"))

    assert validate.success is False
    assert validate.error == "An unexpected error occurred"
    assert validate.code is ErrorCode.INTERNAL
    assert login.success is False
    assert login.error == "An unexpected error occurred. Please try again."


@pytest.mark.asyncio
async def test_get_profile_swallows_faults_into_none(auth_service, container, monkeypatch):
    async def boom(*args, **kwargs):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(container.account_service, "get_profile", boom)

    assert await auth_service.get_user_profile("1") is None
