import pytest
from protean import current_domain
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()


@pytest.fixture(autouse=True)
def catalogue(_ctx):
    """The default demo catalogue, seeded fresh for every test."""
    from storefront.catalogue.listing import list_products
    from storefront.catalogue.registration import seed_catalogue

    seed_catalogue()
    return {product.id: product for product in list_products()}
