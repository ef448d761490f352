import pytest

from app.seed import SAMPLE_LISTINGS, create_sample_properties


@pytest.mark.asyncio
async def test_seed_inserts_once(client):
    assert create_sample_properties() == len(SAMPLE_LISTINGS)
    assert create_sample_properties() == 0

    listing = (await client.get("/api/properties")).json()
    assert len(listing) == len(SAMPLE_LISTINGS)
    anam = next(p for p in listing if p["title"].startswith("안암역"))
    assert anam["monthly_rent"] == 450_000
    assert anam["maintenance_fee"] is None
