import uuid
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from vidshare.core import security
from vidshare.core.config import Settings
from vidshare.core.exceptions import InvalidOrExpiredToken
from vidshare.models import User


@pytest.fixture
def settings():
    return Settings(_env_file=None, SECRET_KEY="unit-secret", BCRYPT_ROUNDS=4)


@pytest.fixture
def user():
    return User(id=uuid.uuid4(), email="alice@x.com", hashed_password="x", role="creator")


def test_password_hash_is_salted_and_verifiable():
    first = security.get_password_hash("pw123", rounds=4)
    second = security.get_password_hash("pw123", rounds=4)

    assert first != second
    assert first != "pw123"
    assert security.verify_password("pw123", first, rounds=4)
    assert not security.verify_password("wrong", first, rounds=4)


def test_token_round_trip_carries_identity(settings, user):
    token = security.create_access_token(user, settings)
    data = security.decode_access_token(token, settings)

    assert data.id == str(user.id)
    assert data.email == "alice@x.com"
    assert data.role == "creator"


def test_token_expires_after_24_hours(settings, user):
    token = security.create_access_token(user, settings)
    claims = jwt.get_unverified_claims(token)
    lifetime = claims["exp"] - datetime.now(timezone.utc).timestamp()

    assert timedelta(hours=23, minutes=59).total_seconds() < lifetime <= timedelta(hours=24).total_seconds()


def test_expired_token_is_rejected(settings, user):
    expired = jwt.encode(
        {
            "sub": str(user.id),
            "id": str(user.id),
            "email": user.email,
            "role": user.role,
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )
    with pytest.raises(InvalidOrExpiredToken):
        security.decode_access_token(expired, settings)


def test_token_signed_with_another_key_is_rejected(settings, user):
    other = Settings(_env_file=None, SECRET_KEY="someone-else")
    token = security.create_access_token(user, other)
    with pytest.raises(InvalidOrExpiredToken):
        security.decode_access_token(token, settings)


def test_token_missing_claims_is_rejected(settings):
    token = jwt.encode(
        {"sub": "abc", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
    )
    with pytest.raises(InvalidOrExpiredToken):
        security.decode_access_token(token, settings)
