"""
Test Generic Soft-Delete Repository
"""

import pytest
from sqlalchemy import inspect

from conftest import make_hotel, make_user
from viaggia.db.models import Hotel, User
from viaggia.db.session import seed_roles
from viaggia.repositories.base import SoftDeletable
from viaggia.repositories.sqlalchemy.generic_repo import SQLAlchemyRepository


@pytest.fixture
def repo(db_session):
    return SQLAlchemyRepository(db_session, User)


def test_entities_are_soft_deletable():
    """Every mapped entity exposes the active flag"""
    user = make_user()
    assert isinstance(user, SoftDeletable)
    assert user.is_active is True


def test_repository_requires_model(db_session):
    """A bare generic repository needs an entity class"""
    with pytest.raises(TypeError):
        SQLAlchemyRepository(db_session)


@pytest.mark.asyncio
async def test_add_then_get(repo, db_session):
    """Entity read back from the database equals the one added, column by column"""
    user = await repo.add(
        make_user(name="Ana", cpf="123.456.789-00", company_name="Ana Tours")
    )

    assert await repo.save_changes() is True
    assert user.id is not None

    columns = [attr.key for attr in inspect(User).column_attrs]
    added = {key: getattr(user, key) for key in columns}
    db_session.expunge_all()

    found = await repo.get_by_id(user.id)
    assert found is not None
    assert found is not user
    assert {key: getattr(found, key) for key in columns} == added


@pytest.mark.asyncio
async def test_save_changes_after_plain_commit(repo, db_session):
    """Work committed elsewhere on the session is not reported again"""
    await seed_roles(db_session)

    assert await repo.save_changes() is False



@pytest.mark.asyncio
async def test_add_none_raises(repo):
    """Adding None is a programming error"""
    with pytest.raises(ValueError):
        await repo.add(None)


@pytest.mark.asyncio
async def test_update_none_raises(repo):
    """Updating None is a programming error"""
    with pytest.raises(ValueError):
        await repo.update(None)


@pytest.mark.asyncio
async def test_add_is_staged_until_save(repo, db_session):
    """Nothing reaches the database before save_changes"""
    await repo.add(make_user())
    await db_session.rollback()

    assert await repo.get_all(include_inactive=True) == []


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none(repo):
    """Missing ID is not an error"""
    assert await repo.get_by_id(999) is None
    assert await repo.exists(999) is False


@pytest.mark.asyncio
async def test_soft_delete_hides_from_default_reads(repo):
    """Soft-deleted row is kept but excluded unless include_inactive"""
    user = await repo.add(make_user())
    await repo.save_changes()

    assert await repo.soft_delete(user.id) is True
    assert await repo.save_changes() is True

    assert await repo.get_by_id(user.id) is None
    assert await repo.get_all() == []
    assert await repo.exists(user.id) is False

    hidden = await repo.get_by_id(user.id, include_inactive=True)
    assert hidden is not None
    assert hidden.is_active is False
    assert await repo.exists(user.id, include_inactive=True) is True
    assert len(await repo.get_all(include_inactive=True)) == 1


@pytest.mark.asyncio
async def test_soft_delete_missing_returns_false(repo):
    """Missing ID stages nothing"""
    assert await repo.soft_delete(999) is False
    assert await repo.save_changes() is False


@pytest.mark.asyncio
async def test_soft_delete_is_staged_until_save(repo, db_session):
    """A soft delete that is rolled back leaves the row active"""
    user = await repo.add(make_user())
    await repo.save_changes()

    await repo.soft_delete(user.id)
    await db_session.rollback()
    db_session.expunge_all()

    found = await repo.get_by_id(user.id)
    assert found is not None
    assert found.is_active is True


@pytest.mark.asyncio
async def test_get_all_mixed_active_flags(repo):
    """One active and one inactive row"""
    await repo.add(make_user(1, id=1))
    await repo.add(make_user(2, id=2, is_active=False))
    await repo.save_changes()

    active = await repo.get_all()
    assert [u.id for u in active] == [1]

    everything = await repo.get_all(include_inactive=True)
    assert [u.id for u in everything] == [1, 2]


@pytest.mark.asyncio
async def test_reactivate(repo):
    """Reactivated row is visible again"""
    user = await repo.add(make_user(is_active=False))
    await repo.save_changes()
    assert await repo.get_by_id(user.id) is None

    assert await repo.reactivate(user.id) is True
    assert await repo.save_changes() is True
    assert await repo.get_by_id(user.id) is not None


@pytest.mark.asyncio
async def test_reactivate_missing_returns_false(repo):
    """Missing ID cannot be reactivated"""
    assert await repo.reactivate(42) is False


@pytest.mark.asyncio
async def test_update_tracked_entity(repo):
    """Changes on a tracked entity are written by save_changes"""
    user = await repo.add(make_user())
    await repo.save_changes()

    user.name = "Renamed"
    updated = await repo.update(user)

    assert updated is user
    assert await repo.save_changes() is True


@pytest.mark.asyncio
async def test_update_detached_entity(repo, db_session):
    """A detached entity is merged into the session"""
    user = await repo.add(make_user())
    await repo.save_changes()
    db_session.expunge_all()

    user.phone_number = "+55 48 99999-0000"
    merged = await repo.update(user)
    assert merged is not user
    assert await repo.save_changes() is True

    db_session.expunge_all()
    found = await repo.get_by_id(user.id)
    assert found.phone_number == "+55 48 99999-0000"


@pytest.mark.asyncio
async def test_save_changes_without_work(repo):
    """Empty unit of work reports no rows written"""
    assert await repo.save_changes() is False


@pytest.mark.asyncio
async def test_for_model_shares_unit_of_work(repo, db_session):
    """Repository for another entity joins the same session"""
    hotels = repo.for_model(Hotel)
    assert hotels.session is db_session
    assert hotels.model is Hotel

    await repo.add(make_user())
    await hotels.add(make_hotel())

    # One commit covers both entities
    assert await repo.save_changes() is True
    assert len(await repo.get_all()) == 1
    assert len(await hotels.get_all()) == 1
    assert await hotels.save_changes() is False


@pytest.mark.asyncio
async def test_for_model_soft_delete(repo):
    """Soft delete through a derived repository"""
    hotels = repo.for_model(Hotel)
    hotel = await hotels.add(make_hotel())
    await hotels.save_changes()

    assert await hotels.soft_delete(hotel.id) is True
    await repo.save_changes()

    assert await hotels.get_by_id(hotel.id) is None
    assert (await hotels.get_by_id(hotel.id, include_inactive=True)).is_active is False
