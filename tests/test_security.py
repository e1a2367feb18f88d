"""Unit tests for storefront.core.security: token issue/verify, expiry, bearer parsing, passwords."""

import time
import unittest
from datetime import timedelta

import jwt

from storefront.core.security import (
    InvalidTokenError,
    JWTConfig,
    TokenExpiredError,
    create_access_token,
    create_refresh_token,
    decode_token,
    extract_bearer_token,
    hash_password,
    is_token_expired,
    verify_password,
)

CONFIG = JWTConfig(
    secret="unit-test-secret",
    issuer="Storefront API",
    audience="storefront-app-users",
)


def _tamper_signature(token: str) -> str:
    """Flip one character in the middle of the signature segment."""
    header, payload, signature = token.split(".")
    i = len(signature) // 2
    replacement = "A" if signature[i] != "A" else "B"
    return ".".join([header, payload, signature[:i] + replacement + signature[i + 1:]])


class TestAccessToken(unittest.TestCase):
    def test_round_trip_recovers_user_id(self) -> None:
        token = create_access_token(CONFIG, "507f1f77bcf86cd799439011")
        claims = decode_token(CONFIG, token)
        self.assertEqual(claims["userId"], "507f1f77bcf86cd799439011")
        self.assertEqual(claims["iss"], "Storefront API")
        self.assertEqual(claims["aud"], "storefront-app-users")
        self.assertNotIn("role", claims)
        self.assertNotIn("email", claims)

    def test_optional_claims(self) -> None:
        token = create_access_token(CONFIG, "u1", role="admin", email="admin@example.com")
        claims = decode_token(CONFIG, token)
        self.assertEqual(claims["role"], "admin")
        self.assertEqual(claims["email"], "admin@example.com")

    def test_default_expiry_uses_config(self) -> None:
        config = JWTConfig(secret="s", issuer="i", audience="a", access_ttl=timedelta(hours=2))
        claims = decode_token(config, create_access_token(config, "u1"))
        self.assertAlmostEqual(claims["exp"] - claims["iat"], 2 * 3600, delta=1)

    def test_expires_in_override(self) -> None:
        claims = decode_token(CONFIG, create_access_token(CONFIG, "u1", expires_in="1h"))
        self.assertAlmostEqual(claims["exp"] - claims["iat"], 3600, delta=1)

    def test_empty_user_id_rejected(self) -> None:
        with self.assertRaises(ValueError):
            create_access_token(CONFIG, "")
        with self.assertRaises(ValueError):
            create_refresh_token(CONFIG, "  ")

    def test_zero_lifetime_is_expired(self) -> None:
        token = create_access_token(CONFIG, "u1", expires_in=0)
        self.assertTrue(is_token_expired(token))
        with self.assertRaises(TokenExpiredError):
            decode_token(CONFIG, token)

    def test_tampered_signature_rejected(self) -> None:
        token = create_access_token(CONFIG, "u1")
        with self.assertRaises(InvalidTokenError) as ctx:
            decode_token(CONFIG, _tamper_signature(token))
        self.assertNotIsInstance(ctx.exception, TokenExpiredError)

    def test_wrong_secret_rejected(self) -> None:
        other = JWTConfig(secret="another-secret", issuer=CONFIG.issuer, audience=CONFIG.audience)
        with self.assertRaises(InvalidTokenError):
            decode_token(CONFIG, create_access_token(other, "u1"))

    def test_wrong_issuer_or_audience_rejected(self) -> None:
        wrong_iss = JWTConfig(secret=CONFIG.secret, issuer="Someone Else", audience=CONFIG.audience)
        wrong_aud = JWTConfig(secret=CONFIG.secret, issuer=CONFIG.issuer, audience="other-app")
        for config in (wrong_iss, wrong_aud):
            with self.subTest(config=config):
                with self.assertRaises(InvalidTokenError):
                    decode_token(CONFIG, create_access_token(config, "u1"))

    def test_missing_exp_rejected(self) -> None:
        token = jwt.encode(
            {"userId": "u1", "iss": CONFIG.issuer, "aud": CONFIG.audience},
            CONFIG.secret,
            algorithm="HS256",
        )
        with self.assertRaises(InvalidTokenError):
            decode_token(CONFIG, token)

    def test_malformed_token_rejected(self) -> None:
        with self.assertRaises(InvalidTokenError):
            decode_token(CONFIG, "invalid.token.here")


class TestRefreshToken(unittest.TestCase):
    def test_tagged_with_refresh_type_and_30_days(self) -> None:
        claims = decode_token(CONFIG, create_refresh_token(CONFIG, "u1"))
        self.assertEqual(claims["userId"], "u1")
        self.assertEqual(claims["type"], "refresh")
        self.assertAlmostEqual(claims["exp"] - claims["iat"], 30 * 24 * 3600, delta=1)


class TestIsTokenExpired(unittest.TestCase):
    def test_fresh_token_not_expired(self) -> None:
        self.assertFalse(is_token_expired(create_access_token(CONFIG, "u1")))

    def test_unverified_signature_still_read(self) -> None:
        token = create_access_token(CONFIG, "u1")
        self.assertFalse(is_token_expired(_tamper_signature(token)))

    def test_missing_or_garbage_exp(self) -> None:
        no_exp = jwt.encode({"userId": "u1"}, "s", algorithm="HS256")
        bad_exp = jwt.encode({"userId": "u1", "exp": "soon"}, "s", algorithm="HS256")
        self.assertTrue(is_token_expired(no_exp))
        self.assertTrue(is_token_expired(bad_exp))
        self.assertTrue(is_token_expired("not-a-jwt"))

    def test_past_exp(self) -> None:
        token = jwt.encode({"exp": int(time.time()) - 10}, "s", algorithm="HS256")
        self.assertTrue(is_token_expired(token))


class TestExtractBearerToken(unittest.TestCase):
    def test_valid_header(self) -> None:
        self.assertEqual(extract_bearer_token("Bearer abc.def.ghi"), "abc.def.ghi")

    def test_other_shapes(self) -> None:
        for value in (
            None,
            "",
            "abc.def.ghi",
            "Basic dXNlcjpwYXNz",
            "bearer abc.def.ghi",
            "Bearer",
            "Bearer ",
            "Bearer abc def",
            "Bearer  abc",
        ):
            with self.subTest(value=value):
                self.assertIsNone(extract_bearer_token(value))


class TestPasswords(unittest.TestCase):
    def test_hash_and_verify(self) -> None:
        hashed = hash_password("secret123", rounds=4)
        self.assertNotEqual(hashed, "secret123")
        self.assertTrue(verify_password("secret123", hashed))
        self.assertFalse(verify_password("secret124", hashed))

    def test_salted(self) -> None:
        self.assertNotEqual(hash_password("secret123", rounds=4), hash_password("secret123", rounds=4))

    def test_garbage_hash(self) -> None:
        self.assertFalse(verify_password("secret123", "not-a-bcrypt-hash"))


if __name__ == "__main__":
    unittest.main()
