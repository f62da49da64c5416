import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def checkout_bed():
    from checkout.domain import checkout

    bed = DomainFixture(checkout)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(checkout_bed):
    with checkout_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _default_engine():
    """Every test starts and ends with the default transition engine."""
    from checkout.state_machine import reset_transition_engine

    reset_transition_engine()
    yield
    reset_transition_engine()
