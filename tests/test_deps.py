import pytest

from app.core.deps import (
    MSG_ADMINS_ONLY,
    MSG_API_KEY,
    MSG_TOKEN_INVALID,
    MSG_TOKEN_REQUIRED,
    authenticate,
    check_api_key,
    ensure_admin,
    extract_bearer,
    is_gated_path,
    is_public_path,
    verify_token,
)
from app.core.errors import AuthenticationError, AuthorizationError
from app.core.security import Claims, create_access_token

from conftest import API_KEY, JWT_SECRET, make_settings


def _token(payload, minutes=30):
    return create_access_token(payload, JWT_SECRET, minutes)


class TestApiKey:
    def test_valid_key_passes(self):
        check_api_key(API_KEY, make_settings())

    @pytest.mark.parametrize("provided", [None, "", "otra-key", API_KEY + " "])
    def test_missing_or_wrong_key(self, provided):
        with pytest.raises(AuthenticationError) as exc:
            check_api_key(provided, make_settings())
        assert exc.value.message == MSG_API_KEY
        assert exc.value.status_code == 401

    def test_bypass_mode_skips_check(self):
        check_api_key(None, make_settings(env="test"))


class TestPublicPaths:
    @pytest.mark.parametrize(
        "path",
        ["/prisma/post/page", "/prisma/post/public/5", "/post/page", "/prisma/login", "/prisma/upform", "/prisma/home"],
    )
    def test_public(self, path):
        assert is_public_path(path, "/prisma")

    @pytest.mark.parametrize(
        "path",
        ["/prisma/post", "/prisma/post/page/extra", "/prisma/post/public", "/prisma/post/e/1", "/prisma/users"],
    )
    def test_not_public(self, path):
        assert not is_public_path(path, "/prisma")


class TestBearer:
    def test_extracts_second_token(self):
        assert extract_bearer("Bearer abc.def") == "abc.def"

    @pytest.mark.parametrize("value", [None, "", "InvalidFormat", "Bearer ", "Bearer  abc"])
    def test_missing_token(self, value):
        # Con doble espacio el segundo elemento es "" => no hay token
        assert extract_bearer(value) is None


class TestVerifyToken:
    def test_valid_token_returns_claims(self):
        token = _token({"userId": 7, "userName": "ana", "email": "ana@x.com", "is_admin": False})
        claims = verify_token(f"Bearer {token}", make_settings())
        assert claims.user_id == 7
        assert claims.user_name == "ana"

    def test_missing_header(self):
        with pytest.raises(AuthenticationError) as exc:
            verify_token(None, make_settings())
        assert exc.value.message == MSG_TOKEN_REQUIRED

    @pytest.mark.parametrize(
        "token",
        [
            "invalid_token_xyz",
            create_access_token({"userId": 1}, "otro-secreto", 30),
            create_access_token({"userId": 1}, JWT_SECRET, -1),
            create_access_token({"email": "sin-id@x.com"}, JWT_SECRET, 30),
        ],
    )
    def test_invalid_tokens(self, token):
        with pytest.raises(AuthenticationError) as exc:
            verify_token(f"Bearer {token}", make_settings())
        assert exc.value.message == MSG_TOKEN_INVALID


class TestEnsureAdmin:
    def test_admin_passes(self):
        claims = Claims(user_id=1, user_name="a", email="a@x.com", is_admin=True)
        assert ensure_admin(claims) is claims

    @pytest.mark.parametrize(
        "claims",
        [None, Claims(user_id=1, user_name="u", email="u@x.com", is_admin=False)],
    )
    def test_non_admin_forbidden(self, claims):
        with pytest.raises(AuthorizationError) as exc:
            ensure_admin(claims)
        assert exc.value.message == MSG_ADMINS_ONLY
        assert exc.value.status_code == 403


class TestGatedPaths:
    @pytest.mark.parametrize("path", ["/prisma", "/prisma/post", "/prisma/users/1"])
    def test_api_paths_are_gated(self, path):
        assert is_gated_path(path, "/prisma")

    @pytest.mark.parametrize("path", ["/db/ping", "/docs", "/openapi.json", "/prismas", "/otra"])
    def test_outside_api(self, path):
        assert not is_gated_path(path, "/prisma")

    def test_without_prefix_everything_but_health_is_gated(self):
        assert is_gated_path("/post", "")
        assert not is_gated_path("/db/ping", "")


class TestAuthenticate:
    def _headers(self, token=None, key=API_KEY):
        h = {"x-api-key": key}
        if token:
            h["authorization"] = f"Bearer {token}"
        return h

    def test_api_key_before_token(self):
        token = _token({"userId": 1})
        with pytest.raises(AuthenticationError) as exc:
            authenticate("/prisma/post", self._headers(token, key="otra"), make_settings())
        assert exc.value.message == MSG_API_KEY

    def test_public_path_has_no_identity(self):
        assert authenticate("/prisma/post/public/3", self._headers(), make_settings()) is None

    def test_protected_path_needs_token(self):
        with pytest.raises(AuthenticationError) as exc:
            authenticate("/prisma/post/e/3", self._headers(), make_settings())
        assert exc.value.message == MSG_TOKEN_REQUIRED

    def test_protected_path_returns_claims(self):
        token = _token({"userId": 5, "is_admin": True})
        claims = authenticate("/prisma/users", self._headers(token), make_settings())
        assert claims.user_id == 5
        assert claims.is_admin is True

    def test_bypass_without_token(self):
        assert authenticate("/prisma/users", {}, make_settings(env="test")) is None

    def test_bypass_ignores_bad_token(self):
        headers = {"authorization": "Bearer basura"}
        assert authenticate("/prisma/users", headers, make_settings(env="test")) is None
