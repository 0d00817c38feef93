import bcrypt
import pytest
from unittest.mock import AsyncMock
from sqlalchemy.exc import IntegrityError, OperationalError

from src.adapter.services.identity_store import SqlIdentityStore
from src.domain.entities import Identity


def make_store(uow, **overrides):
    options = {"bcrypt_rounds": 4}
    options.update(overrides)
    return SqlIdentityStore(uow, **options)


def hashed(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(4)).decode("utf-8")


@pytest.mark.asyncio
async def test_create_new_identity(sql_uow):
    store = make_store(sql_uow)

    result = await store.create("jane@x.com", "JanePass123!", "Jane")

    assert result.is_ok()
    created = result.value
    assert created.already_exists is False
    assert created.identity.id
    assert created.identity.display_name == "Jane"
    assert created.identity.password_hash != "JanePass123!"
    assert bcrypt.checkpw(b"JanePass123!", created.identity.password_hash.encode("utf-8"))

    exists = await store.exists("jane@x.com")
    assert exists.is_ok()
    assert exists.value is True


@pytest.mark.asyncio
async def test_exists_is_exact_match(sql_uow):
    store = make_store(sql_uow)
    await store.create("jane@x.com", "JanePass123!", "Jane")

    result = await store.exists("other@x.com")

    assert result.is_ok()
    assert result.value is False


@pytest.mark.asyncio
async def test_create_existing_email_with_matching_password(sql_uow):
    store = make_store(sql_uow)
    first = await store.create("jane@x.com", "JanePass123!", "Jane")

    second = await store.create("jane@x.com", "JanePass123!", "Jane Again")

    assert second.is_ok()
    assert second.value.already_exists is True
    assert second.value.identity.id == first.value.identity.id
    assert second.value.identity.last_sign_in_at is not None


@pytest.mark.asyncio
async def test_create_existing_email_with_other_password(sql_uow):
    store = make_store(sql_uow)
    await store.create("jane@x.com", "JanePass123!", "Jane")

    result = await store.create("jane@x.com", "SomethingElse1", "Jane")

    assert result.is_err()
    assert result.error.code == "DUPLICATE_IDENTITY"


@pytest.mark.asyncio
async def test_create_disabled(sql_uow):
    store = make_store(sql_uow, signup_enabled=False)

    result = await store.create("jane@x.com", "JanePass123!", "Jane")

    assert result.is_err()
    assert result.error.code == "SIGNUP_DISABLED"
    exists = await store.exists("jane@x.com")
    assert exists.value is False


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["not-an-email", "jane@", "@x.com"])
async def test_create_invalid_email(sql_uow, email):
    store = make_store(sql_uow)

    result = await store.create(email, "JanePass123!", "Jane")

    assert result.is_err()
    assert result.error.code == "INVALID_EMAIL"


@pytest.mark.asyncio
async def test_create_weak_password(sql_uow):
    store = make_store(sql_uow, min_password_length=8)

    result = await store.create("jane@x.com", "short", "Jane")

    assert result.is_err()
    assert result.error.code == "WEAK_PASSWORD"
    assert "8" in result.error.message


@pytest.mark.asyncio
async def test_create_with_unreadable_stored_hash(mock_uow):
    existing = Identity(
        email="jane@x.com", display_name="Jane", password_hash="not-a-bcrypt-hash"
    )
    mock_uow.identities.get_by_email = AsyncMock(return_value=existing)
    store = make_store(mock_uow)

    result = await store.create("jane@x.com", "JanePass123!", "Jane")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIAL"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_create_lost_insert_race(mock_uow):
    winner = Identity(
        email="jane@x.com", display_name="Jane", password_hash=hashed("JanePass123!")
    )
    mock_uow.identities.get_by_email = AsyncMock(side_effect=[None, winner])
    mock_uow.identities.create = AsyncMock(
        side_effect=IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))
    )
    mock_uow.identities.update = AsyncMock(side_effect=lambda identity: identity)
    store = make_store(mock_uow)

    result = await store.create("jane@x.com", "JanePass123!", "Jane")

    assert result.is_ok()
    assert result.value.already_exists is True
    assert result.value.identity is winner
    mock_uow.rollback.assert_awaited_once()


@pytest.mark.asyncio
async def test_store_failures_are_normalized(mock_uow):
    failure = OperationalError("SELECT", {}, Exception("database is locked"))
    mock_uow.identities.get_by_email = AsyncMock(side_effect=failure)
    store = make_store(mock_uow)

    exists = await store.exists("jane@x.com")
    created = await store.create("jane@x.com", "JanePass123!", "Jane")

    assert exists.error.code == "IDENTITY_STORE_UNAVAILABLE"
    assert created.error.code == "IDENTITY_STORE_UNAVAILABLE"


@pytest.mark.asyncio
async def test_create_accepts_short_password_without_minimum(sql_uow):
    store = SqlIdentityStore(sql_uow, bcrypt_rounds=4)

    result = await store.create("jane@x.com", "p1", "Jane")

    assert result.is_ok()
    assert result.value.already_exists is False
