import sys
from pathlib import Path

import bcrypt
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timesheets.core.security import DirectoryVerifier, decode_access_token, issue_access_token
from timesheets.data.seed import SEED_USERS


@pytest.fixture()
def verifier():
    return DirectoryVerifier(SEED_USERS, shared_password="password123")


def test_known_email_with_shared_password_succeeds(verifier):
    user = verifier.verify("saqib@example.com", "password123")
    assert user is not None
    assert (user.id, user.email, user.name) == ("1", "saqib@example.com", "Saqib")


@pytest.mark.parametrize(
    "email, password",
    [
        ("saqib@example.com", "wrong"),
        ("nobody@example.com", "password123"),
        ("saqib@example.com", ""),
        ("", "password123"),
    ],
)
def test_bad_credentials_are_rejected(verifier, email, password):
    assert verifier.verify(email, password) is None


def test_password_hash_takes_precedence():
    hashed = bcrypt.hashpw(b"s3cret", bcrypt.gensalt(rounds=4)).decode("utf-8")
    verifier = DirectoryVerifier(SEED_USERS, shared_password="password123", password_hash=hashed)

    assert verifier.verify("test@example.com", "s3cret").id == "2"
    assert verifier.verify("test@example.com", "password123") is None


def test_get_user_by_id(verifier):
    assert verifier.get_user("2").email == "test@example.com"
    assert verifier.get_user("3") is None


def test_access_token_round_trips_subject(verifier):
    user = verifier.get_user("1")
    token, expires_in = issue_access_token(user, secret="secret", ttl_minutes=5)
    payload = decode_access_token(token, secret="secret")

    assert expires_in == 300
    assert payload.sub == "1"
    assert payload.email == "saqib@example.com"


def test_access_token_with_wrong_secret_is_rejected(verifier):
    token, _ = issue_access_token(verifier.get_user("1"), secret="secret", ttl_minutes=5)
    with pytest.raises(ValueError, match="Invalid token"):
        decode_access_token(token, secret="other")


def test_expired_access_token_is_rejected(verifier):
    token, _ = issue_access_token(verifier.get_user("1"), secret="secret", ttl_minutes=-1)
    with pytest.raises(ValueError):
        decode_access_token(token, secret="secret")
