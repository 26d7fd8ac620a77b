"""
Test Commodity Repositories
"""

from decimal import Decimal

import pytest
import pytest_asyncio

from viaggia.db.models import Commodity, CustomCommodity
from viaggia.repositories.sqlalchemy.commodity_repo import (
    SQLAlchemyCommodityRepository,
    SQLAlchemyCustomCommodityRepository,
)


@pytest.fixture
def repo(db_session):
    return SQLAlchemyCommodityRepository(db_session)


@pytest.fixture
def custom_repo(db_session):
    return SQLAlchemyCustomCommodityRepository(db_session)


@pytest_asyncio.fixture
async def commodity(repo, hotel) -> Commodity:
    entity = await repo.add(
        Commodity(
            hotel_id=hotel.id,
            has_breakfast=True,
            is_breakfast_paid=True,
            breakfast_price=Decimal("35.00"),
            is_pet_friendly=True,
        )
    )
    await repo.save_changes()
    return entity


def custom(commodity, name, **overrides):
    return CustomCommodity(
        commodity_id=commodity.id,
        hotel_id=commodity.hotel_id,
        name=name,
        **overrides,
    )


@pytest.mark.asyncio
async def test_get_by_hotel_id(repo, commodity, custom_repo, db_session):
    """Amenities come with hotel and active custom services"""
    await custom_repo.add(custom(commodity, "Room service 24h"))
    await custom_repo.add(custom(commodity, "Old shuttle", is_active=False))
    await custom_repo.save_changes()
    db_session.expunge_all()

    loaded = await repo.get_by_hotel_id(commodity.hotel_id)
    assert loaded is not None
    assert loaded.has_breakfast is True
    assert loaded.breakfast_price == Decimal("35.00")
    assert loaded.is_pet_friendly is True
    assert loaded.hotel.name == "Hotel 1"
    assert [c.name for c in loaded.custom_commodities] == ["Room service 24h"]

    assert await repo.get_by_hotel_id(commodity.hotel_id + 1) is None


@pytest.mark.asyncio
async def test_get_by_hotel_name(repo, commodity):
    """Lookup through the hotel's name"""
    found = await repo.get_by_hotel_name("HOTEL 1")
    assert found is not None
    assert found.id == commodity.id
    assert await repo.get_by_hotel_name("Nowhere Inn") is None


@pytest.mark.asyncio
async def test_get_by_hotel_name_inactive_hotel(repo, commodity, hotel):
    """Amenities of an inactive hotel are hidden by default"""
    await repo.for_model(type(hotel)).soft_delete(hotel.id)
    await repo.save_changes()

    assert await repo.get_by_hotel_name("Hotel 1") is None
    assert await repo.get_by_hotel_name("Hotel 1", include_inactive=True) is not None


@pytest.mark.asyncio
async def test_soft_deleted_commodity(repo, commodity):
    """Inactive amenity record is hidden"""
    await repo.soft_delete(commodity.id)
    await repo.save_changes()

    assert await repo.get_by_hotel_id(commodity.hotel_id) is None
    assert await repo.get_by_hotel_id(commodity.hotel_id, include_inactive=True) is not None


@pytest.mark.asyncio
async def test_list_custom_commodities(custom_repo, commodity, db_session):
    """Custom services by amenity record and by hotel"""
    await custom_repo.add(custom(commodity, "Bike rental", is_paid=True, price=Decimal("20.00")))
    await custom_repo.add(custom(commodity, "Late checkout", is_active=False))
    await custom_repo.save_changes()
    db_session.expunge_all()

    by_commodity = await custom_repo.list_by_commodity(commodity.id)
    assert [c.name for c in by_commodity] == ["Bike rental"]
    assert by_commodity[0].hotel.name == "Hotel 1"
    assert by_commodity[0].price == Decimal("20.00")

    assert len(await custom_repo.list_by_hotel(commodity.hotel_id)) == 1
    assert len(await custom_repo.list_by_hotel(commodity.hotel_id, include_inactive=True)) == 2


@pytest.mark.asyncio
async def test_get_by_hotel_id_reloads_in_same_session(repo, commodity, custom_repo):
    """Custom services soft-deleted after a first read are hidden on the next one"""
    service = await custom_repo.add(custom(commodity, "Room service 24h"))
    await custom_repo.save_changes()

    assert len((await repo.get_by_hotel_id(commodity.hotel_id)).custom_commodities) == 1

    await custom_repo.soft_delete(service.id)
    await custom_repo.save_changes()

    assert (await repo.get_by_hotel_id(commodity.hotel_id)).custom_commodities == []
