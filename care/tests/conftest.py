import pytest
from rest_framework.test import APIClient

from care.models import Role, User
from care.tokens import issue_token


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make(username: str, role: Role = Role.USER, password: str = 'pw123'):
        user = User.objects.create_user(username=username, password=password, role=role)
        return user, issue_token(user)
    return _make


@pytest.fixture
def client_for():
    """Return an APIClient sending ``Authorization: Bearer <token>``."""
    def _client(token: str) -> APIClient:
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        return client
    return _client
