from typing import Iterator, List

import pytest
from fastapi.testclient import TestClient

from userlist_api.app.main import create_app
from userlist_api.app.services.user_service import UserService

SAMPLE_NAMES: List[str] = ["Alice", "Adam", "Bob", "Carl"]


@pytest.fixture
def sample_names() -> List[str]:
    return list(SAMPLE_NAMES)


@pytest.fixture
def service(sample_names) -> UserService:
    return UserService.from_source(sample_names)


@pytest.fixture
def large_service() -> UserService:
    # 26 letters x 7 names each, already grouped by first letter.
    names = [f"{chr(ord('A') + i)}name{j}" for i in range(26) for j in range(7)]
    return UserService.from_source(names)


@pytest.fixture
def client(sample_names) -> Iterator[TestClient]:
    with TestClient(create_app(source=sample_names)) as c:
        yield c
