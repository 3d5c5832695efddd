import pytest

from inkwell.core.access import AccessEvaluator
from inkwell.exceptions import AuthenticationError, AuthorizationError
from inkwell.models import Permission
from inkwell.repositories import DocumentRepository, ShareRepository, UserRepository


@pytest.fixture
def users(db):
    repo = UserRepository(db)
    created = {
        name: repo.create(
            email=f"{name}@example.com",
            hashed_password="x",
            first_name=name.title(),
            last_name="Test"
        )
        for name in ("author", "viewer", "editor", "stranger")
    }
    db.commit()
    return created


@pytest.fixture
def document(db, users):
    document = DocumentRepository(db).create(
        title="Plan",
        content="secret",
        is_public=False,
        author_id=users["author"].id
    )
    shares = ShareRepository(db)
    shares.upsert(document.id, users["viewer"].id, Permission.VIEW, users["author"].id)
    shares.upsert(document.id, users["editor"].id, Permission.EDIT, users["author"].id)
    db.commit()
    return document


@pytest.fixture
def access(db):
    return AccessEvaluator(ShareRepository(db))


def test_private_document_visibility(access, users, document):
    assert access.can_view(users["author"].id, document)
    assert access.can_view(users["viewer"].id, document)
    assert access.can_view(users["editor"].id, document)
    assert not access.can_view(users["stranger"].id, document)
    assert not access.can_view(None, document)


def test_edit_requires_author_or_edit_share(access, users, document):
    assert access.can_edit(users["author"].id, document)
    assert access.can_edit(users["editor"].id, document)
    assert not access.can_edit(users["viewer"].id, document)
    assert not access.can_edit(users["stranger"].id, document)
    assert not access.can_edit(None, document)


def test_only_author_manages(access, users, document):
    assert access.can_manage(users["author"].id, document)
    assert not access.can_manage(users["editor"].id, document)
    assert not access.can_manage(users["viewer"].id, document)
    assert not access.can_manage(None, document)


def test_public_document_grants_view_only(db, access, users, document):
    document.is_public = True
    db.commit()

    assert access.can_view(None, document)
    assert access.can_view(users["stranger"].id, document)
    assert not access.can_edit(users["stranger"].id, document)
    assert not access.can_edit(None, document)


def test_permission_for(access, users, document):
    assert access.permission_for(users["viewer"].id, document) == Permission.VIEW
    assert access.permission_for(users["editor"].id, document) == Permission.EDIT
    assert access.permission_for(users["author"].id, document) is None
    assert access.permission_for(users["stranger"].id, document) is None
    assert access.permission_for(None, document) is None


def test_require_view_distinguishes_anonymous_from_forbidden(access, users, document):
    with pytest.raises(AuthenticationError):
        access.require_view(None, document)
    with pytest.raises(AuthorizationError):
        access.require_view(users["stranger"].id, document)
    access.require_view(users["viewer"].id, document)


def test_require_edit_and_manage(access, users, document):
    with pytest.raises(AuthorizationError):
        access.require_edit(users["viewer"].id, document)
    with pytest.raises(AuthorizationError):
        access.require_manage(users["editor"].id, document)
    with pytest.raises(AuthenticationError):
        access.require_edit(None, document)
    access.require_edit(users["editor"].id, document)
    access.require_manage(users["author"].id, document)


def test_decisions_follow_share_changes(db, access, users, document):
    """The same evaluator sees grants change between calls"""
    shares = ShareRepository(db)
    assert access.can_view(users["stranger"].id, document) is False

    shares.upsert(document.id, users["stranger"].id, Permission.VIEW, users["author"].id)
    db.commit()
    assert access.can_view(users["stranger"].id, document)
    assert not access.can_edit(users["stranger"].id, document)

    shares.upsert(document.id, users["stranger"].id, Permission.EDIT, users["author"].id)
    db.commit()
    assert access.can_edit(users["stranger"].id, document)

    shares.delete_by_document_and_user(document.id, users["stranger"].id)
    db.commit()
    assert not access.can_view(users["stranger"].id, document)
