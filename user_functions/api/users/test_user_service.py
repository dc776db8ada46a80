# user_functions/api/users/test_user_service.py
from datetime import timedelta

import pytest

from user_functions.api.users.services import UserService
from user_functions.core.exceptions import DeletionForbiddenError, UserNotFoundError


@pytest.fixture
def user_service(user_store):
    return UserService(user_store)


def test_get_user_returns_id_and_stored_fields(user_service, users_collection):
    user_id = user_service.create_user("Minsu", "m@x.com")

    user = user_service.get_user("Minsu")

    assert user['id'] == user_id
    assert user['name'] == "Minsu"
    assert user['email'] == "m@x.com"
    assert user['createdAt'].endswith("Z")


def test_get_user_not_found(user_service):
    with pytest.raises(UserNotFoundError):
        user_service.get_user("Nobody")


def test_update_user_merges_fields(user_service, users_collection):
    user_id = user_service.create_user("Minsu", "m@x.com")
    created_at = users_collection.docs[user_id]['createdAt']

    user_service.update_user("Minsu", {"email": "new@x.com"})

    stored = users_collection.docs[user_id]
    assert stored['email'] == "new@x.com"
    assert stored['name'] == "Minsu"
    assert stored['createdAt'] == created_at


def test_delete_user_age_guard(user_service, users_collection):
    user_id = user_service.create_user("Minsu", "m@x.com")
    created_at = users_collection.docs[user_id]['createdAt']

    with pytest.raises(DeletionForbiddenError):
        user_service.delete_user("Minsu", now=created_at + timedelta(seconds=59))
    assert user_id in users_collection.docs

    user_service.delete_user("Minsu", now=created_at + timedelta(seconds=60))
    assert user_id not in users_collection.docs


def test_delete_user_without_created_at_is_refused(user_service, users_collection):
    users_collection.docs['legacy'] = {'name': "Legacy", 'email': "l@x.com"}

    with pytest.raises(DeletionForbiddenError):
        user_service.delete_user("Legacy")
    assert 'legacy' in users_collection.docs


def test_delete_user_with_unreadable_created_at_is_refused(user_service, users_collection):
    users_collection.docs['odd'] = {'name': "Odd", 'email': "o@x.com", 'createdAt': "not a date"}

    with pytest.raises(DeletionForbiddenError):
        user_service.delete_user("Odd")


def test_get_user_keeps_extra_and_null_fields(user_service, users_collection):
    users_collection.docs['x'] = {'name': "N", 'email': None, 'city': "Seoul"}

    assert user_service.get_user("N") == {'id': 'x', 'name': "N", 'email': None, 'city': "Seoul"}


@pytest.mark.parametrize("created_at", [0, ""])
def test_delete_user_with_empty_created_at_is_refused(user_service, users_collection, created_at):
    users_collection.docs['empty'] = {'name': "Empty", 'email': "e@x.com", 'createdAt': created_at}

    with pytest.raises(DeletionForbiddenError):
        user_service.delete_user("Empty")
    assert 'empty' in users_collection.docs
