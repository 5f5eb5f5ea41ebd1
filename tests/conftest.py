import pytest

from notifykit import BaseMediator, BaseObservable, BasePublisher


@pytest.fixture
def journal():
    """Shared, ordered record of deliveries across receivers."""
    return []


@pytest.fixture
def observable():
    return BaseObservable()


@pytest.fixture
def publisher():
    return BasePublisher()


@pytest.fixture
def mediator():
    return BaseMediator()
