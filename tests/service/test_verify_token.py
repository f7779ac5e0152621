from base64 import b64encode

import pytest

from bikerent.service.verify_token import AdminTokenVerifier, TokenVerificationError


def token(text):
    return b64encode(text.encode()).decode()


class TestAdminTokenVerifier:

    def test_valid_token(self):
        assert AdminTokenVerifier(["admin_1"]).verify_token(token("admin_1:1700000000000")) == "admin_1"

    def test_unknown_admin(self):
        with pytest.raises(TokenVerificationError):
            AdminTokenVerifier(["admin_1"]).verify_token(token("admin_2:1700000000000"))

    def test_not_base64(self):
        with pytest.raises(TokenVerificationError):
            AdminTokenVerifier(["admin_1"]).verify_token("not base64!")

    def test_not_a_string(self):
        with pytest.raises(TypeError):
            AdminTokenVerifier(["admin_1"]).verify_token(1234)
