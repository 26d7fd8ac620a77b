"""
Test Reservation Repository
"""

from datetime import datetime

import pytest

from conftest import PRICE, STAY_END, STAY_START, make_user
from viaggia.common.errors import ValidationError
from viaggia.db.models import Companion, Reservation
from viaggia.repositories.sqlalchemy.reservation_repo import SQLAlchemyReservationRepository


@pytest.fixture
def repo(db_session):
    return SQLAlchemyReservationRepository(db_session)


def reservation(user_id, hotel_id, **overrides):
    data = {
        "user_id": user_id,
        "hotel_id": hotel_id,
        "start_date": STAY_START,
        "end_date": STAY_END,
        "total_price": PRICE,
        "number_of_guests": 2,
    }
    data.update(overrides)
    return Reservation(**data)


@pytest.mark.asyncio
async def test_list_by_hotel_and_user(repo, hotel, user, db_session):
    """Listings eagerly load hotel and user"""
    other = make_user(2)
    db_session.add(other)
    await db_session.commit()

    await repo.add(reservation(user.id, hotel.id))
    await repo.add(reservation(other.id, hotel.id))
    await repo.add(reservation(user.id, hotel.id, is_active=False))
    await repo.save_changes()
    db_session.expunge_all()

    by_hotel = await repo.list_by_hotel(hotel.id)
    assert len(by_hotel) == 2
    assert {r.user.email for r in by_hotel} == {"user1@example.com", "user2@example.com"}

    by_user = await repo.list_by_user(user.id)
    assert len(by_user) == 1
    assert by_user[0].hotel.name == "Hotel 1"
    assert by_user[0].status == "Pending"

    assert len(await repo.list_by_user(user.id, include_inactive=True)) == 2


@pytest.mark.asyncio
async def test_companions(repo, hotel, user, db_session):
    """Companions are listed and eagerly loaded"""
    booking = await repo.add(reservation(user.id, hotel.id))
    await repo.save_changes()

    companions = repo.for_model(Companion)
    await companions.add(
        Companion(
            reservation_id=booking.id,
            name="Carla",
            cpf="222.333.444-55",
            birth_date=datetime(1990, 5, 17),
        )
    )
    await companions.add(
        Companion(
            reservation_id=booking.id,
            name="Removed",
            cpf="000.000.000-00",
            birth_date=datetime(1985, 1, 1),
            is_active=False,
        )
    )
    await repo.save_changes()

    assert [c.name for c in await repo.list_companions(booking.id)] == ["Carla"]
    assert len(await repo.list_companions(booking.id, include_inactive=True)) == 2

    db_session.expunge_all()
    loaded = await repo.get_with_companions(booking.id)
    assert [c.name for c in loaded.companions] == ["Carla"]


@pytest.mark.asyncio
async def test_nights(hotel, user):
    """Stay length in whole nights"""
    booking = reservation(user.id, hotel.id)
    assert booking.nights == 3

    same_day = reservation(
        user.id,
        hotel.id,
        start_date=datetime(2025, 7, 1, 8, 0),
        end_date=datetime(2025, 7, 1, 20, 0),
    )
    assert same_day.nights == 1

    backwards = reservation(user.id, hotel.id, start_date=STAY_END, end_date=STAY_START)
    with pytest.raises(ValidationError):
        backwards.nights


@pytest.mark.asyncio
async def test_get_with_companions_reloads_in_same_session(repo, hotel, user):
    """Companions soft-deleted after a first read are hidden on the next one"""
    booking = await repo.add(reservation(user.id, hotel.id))
    await repo.save_changes()
    companions = repo.for_model(Companion)
    carla = await companions.add(
        Companion(
            reservation_id=booking.id,
            name="Carla",
            cpf="222.333.444-55",
            birth_date=datetime(1990, 5, 17),
        )
    )
    await repo.save_changes()

    assert len((await repo.get_with_companions(booking.id)).companions) == 1

    await companions.soft_delete(carla.id)
    await repo.save_changes()

    assert (await repo.get_with_companions(booking.id)).companions == []
