"""
Tests for the authentication and CSRF switches.

Both are off by default (demo posture); each test turns them on explicitly.
"""

import logging

from test_fixtures import (
    engine,
    session_factory,
    db_session,
    client,
    add_books,
    build_client,
    make_settings,
)
from main import create_app


def test_defaults_disable_both_protections():
    s = make_settings()
    assert s.auth_enabled is False
    assert s.csrf_protection_enabled is False
    assert s.disabled_protections() == ["authentication", "csrf"]


def test_disabled_protections_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="northwind.main"):
        create_app(make_settings(), init_db=lambda: None)

    messages = " ".join(r.getMessage() for r in caplog.records)
    assert "AUTHENTICATION protection is DISABLED" in messages
    assert "CSRF protection is DISABLED" in messages


def test_default_permits_unauthenticated_writes(client, db_session):
    add_books(db_session, [{"ID": 1, "title": "T1", "stock": 1}])

    assert client.get("/NorthWindService/Products").status_code == 200
    assert client.patch("/CatalogService/Books(1)", json={"stock": 2}).status_code == 200


# =============================================================================
# AUTHENTICATION
# =============================================================================


def test_auth_enabled_requires_credentials(session_factory):
    secured = build_client(
        session_factory, auth_enabled=True, auth_username="alice", auth_password="s3cret"
    )

    r = secured.get("/NorthWindService/Products")
    assert r.status_code == 401
    assert r.json()["error"]["code"] == "UNAUTHORIZED"
    assert r.headers["WWW-Authenticate"] == "Basic"

    bad = secured.get("/NorthWindService/Products", auth=("alice", "wrong"))
    assert bad.status_code == 401

    ok = secured.get("/NorthWindService/Products", auth=("alice", "s3cret"))
    assert ok.status_code == 200


def test_auth_enabled_leaves_health_check_open(session_factory):
    secured = build_client(session_factory, auth_enabled=True)
    assert secured.get("/health-check").status_code == 200


# =============================================================================
# CSRF
# =============================================================================


def test_csrf_enabled_rejects_write_without_token(session_factory, db_session):
    add_books(db_session, [{"ID": 1, "title": "T1", "stock": 1}])
    protected = build_client(session_factory, csrf_protection_enabled=True)

    r = protected.patch("/CatalogService/Books(1)", json={"stock": 2})

    assert r.status_code == 403
    assert r.json()["error"]["code"] == "CSRF_TOKEN_INVALID"
    assert r.headers["X-CSRF-Token"] == "Required"


def test_csrf_fetch_then_write(session_factory, db_session):
    add_books(db_session, [{"ID": 1, "title": "T1", "stock": 1}])
    protected = build_client(session_factory, csrf_protection_enabled=True)

    fetched = protected.get("/CatalogService/Books(1)", headers={"X-CSRF-Token": "Fetch"})
    token = fetched.headers["X-CSRF-Token"]

    wrong = protected.patch(
        "/CatalogService/Books(1)", json={"stock": 2}, headers={"X-CSRF-Token": "nope"}
    )
    assert wrong.status_code == 403

    r = protected.patch(
        "/CatalogService/Books(1)", json={"stock": 2}, headers={"X-CSRF-Token": token}
    )
    assert r.status_code == 200
    assert r.json()["stock"] == 2


def test_csrf_does_not_affect_reads(session_factory):
    protected = build_client(session_factory, csrf_protection_enabled=True)
    r = protected.get("/NorthWindService/Products")
    assert r.status_code == 200
    assert "X-CSRF-Token" not in r.headers
