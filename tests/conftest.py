"""Shared test fixtures: a small User / Post / PostUser model graph."""

from typing import Annotated, Optional

import pytest

from valschema.metadata import MetadataStorage
from valschema.metadata.constraints import (
    is_defined,
    is_email,
    is_optional,
    is_string,
    max_length,
    validate_nested,
)


# === Models ===


class User:
    id: Annotated[str, is_defined(), is_string()]
    email: Annotated[str, is_email()]
    tags: Annotated[list[str], is_optional(), max_length(20, each=True)]


class Post:
    user: Annotated[Optional[User], is_optional(), validate_nested()]


class PostUser:
    post: Annotated[Optional[Post], is_optional(), validate_nested()]
    user: Annotated[Optional[User], is_optional(), validate_nested()]


# === Fixtures ===


@pytest.fixture
def storage() -> MetadataStorage:
    """A fresh storage holding User, Post and PostUser."""
    store = MetadataStorage()
    for cls in (User, Post, PostUser):
        store.register(cls)
    return store


@pytest.fixture
def user_model() -> type:
    return User

