import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Selects the config environment and the in-memory channel adapters.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ["EMAIL_ADAPTER"] = "fake"
    os.environ["SMS_ADAPTER"] = "fake"


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def reservations_bed():
    from reservations.domain import reservations

    bed = DomainFixture(reservations)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(reservations_bed):
    with reservations_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _channels():
    """Fresh fake adapters for every test."""
    from reservations.channel import reset_channels

    reset_channels()
    yield
    reset_channels()


@pytest.fixture()
def email_adapter():
    from reservations.channel import get_channel
    from reservations.reservation.reservation import NotificationChannel

    return get_channel(NotificationChannel.EMAIL.value)


@pytest.fixture()
def sms_adapter():
    from reservations.channel import get_channel
    from reservations.reservation.reservation import NotificationChannel

    return get_channel(NotificationChannel.SMS.value)
