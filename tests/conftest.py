"""
Pytest configuration and shared fixtures for the test suite.
"""

from typing import Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from domain.entities.movie import Director, Genre, Movie
from domain.entities.user import User
from infrastructure.security.password_hasher import PasswordHasher
from presentation.api.app import create_app
from shared.config.settings import (
    ApiConfig,
    AuthConfig,
    CatalogConfig,
    DatabaseConfig,
    Settings,
)
from shared.container import Container

TEST_SECRET = "test-secret-key-for-jwt-signing-0123456789"

# Cheap argon2 parameters keep the suite fast
FAST_ARGON2 = {"time_cost": 1, "memory_cost": 8192, "parallelism": 1}


# ============================================================================
# Builders
# ============================================================================

def make_movie(
    title: str = "Inception",
    genre_name: str = "Science Fiction",
    director_name: str = "Christopher Nolan",
    movie_id: Optional[str] = None,
) -> Movie:
    return Movie.create(
        title=title,
        description=f"{title} description",
        genre=Genre(name=genre_name, description=f"{genre_name} description"),
        director=Director(
            name=director_name,
            bio=f"{director_name} bio",
            birth_year=1970,
            death_year=None,
        ),
        image_url=f"https://example.com/{title.lower().replace(' ', '-')}.png",
        movie_id=movie_id,
    )


def make_user(
    username: str = "alice01",
    password_hash: str = "hashed_pwd_123",
    email: str = "a@b.com",
    favorites: Optional[set] = None,
) -> User:
    user = User.create(username=username, password_hash=password_hash, email=email)
    if favorites:
        user.favorite_movies = set(favorites)
    return user


# ============================================================================
# Component fixtures
# ============================================================================

@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(**FAST_ARGON2)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'test.db'}"),
        auth=AuthConfig(
            jwt_secret_key=TEST_SECRET,
            access_token_expire_minutes=60,
            argon2_time_cost=FAST_ARGON2["time_cost"],
            argon2_memory_cost=FAST_ARGON2["memory_cost"],
            argon2_parallelism=FAST_ARGON2["parallelism"],
        ),
        catalog=CatalogConfig(),
        api=ApiConfig(),
        log_level="DEBUG",
        log_dir=None,
    )


@pytest_asyncio.fixture
async def container(settings) -> Container:
    c = Container(settings)
    await c.init()
    return c


# ============================================================================
# API fixtures
# ============================================================================

@pytest.fixture
def app(container):
    return create_app(container)


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def movie(container) -> Movie:
    m = make_movie()
    await container.movie_repository().save(m)
    return m


@pytest_asyncio.fixture
async def auth_headers(client) -> dict:
    """Register alice01 and return headers carrying its access token."""
    resp = await client.post(
        "/users",
        json={"Username": "alice01", "Password": "pw", "Email": "a@b.com"},
    )
    assert resp.status_code == 201
    login = await client.post(
        "/login", json={"Username": "alice01", "Password": "pw"}
    )
    assert login.status_code == 200
    return {"Authorization": f"Bearer {login.json()['token']}"}
