"""
Tests for the authentication dependency guarding every job route.
"""

import uuid
from datetime import timedelta

import pytest
from jose import JWTError

from app.core.security import create_access_token, decode_token

JOBS = "/api/job"

ROUTES = [
    ("post", f"{JOBS}/create"),
    ("get", f"{JOBS}/all"),
    ("get", f"{JOBS}/myjobs"),
    ("put", f"{JOBS}/update/1"),
]


class TestAuthenticationRequired:

    @pytest.mark.parametrize("method,path", ROUTES)
    def test_missing_token_rejected(self, client, method, path):
        response = client.request(method, path, json={})

        assert response.status_code == 401
        assert response.json() == {"message": "Could not validate credentials"}
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.parametrize("method,path", ROUTES)
    def test_garbage_token_rejected(self, client, method, path):
        response = client.request(method, path, json={}, headers={"Authorization": "Bearer not-a-jwt"})

        assert response.status_code == 401

    def test_expired_token_rejected(self, client, user_a):
        token = create_access_token({"sub": str(user_a.id)}, expires_delta=timedelta(minutes=-1))

        response = client.get(f"{JOBS}/all", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_unknown_user_rejected(self, client, db_session):
        token = create_access_token({"sub": str(uuid.uuid4())})

        response = client.get(f"{JOBS}/all", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_without_subject_rejected(self, client, db_session):
        token = create_access_token({"role": "recruiter"})

        response = client.get(f"{JOBS}/myjobs", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_inactive_user_forbidden(self, client, user_factory, token_headers):
        user = user_factory(is_active=False)

        response = client.get(f"{JOBS}/all", headers=token_headers(user))

        assert response.status_code == 403
        assert response.json() == {"message": "User account is inactive"}

    def test_nothing_written_when_unauthenticated(self, client, db_session, headers_a):
        client.post(f"{JOBS}/create", json={"title": "Sneaky"})

        assert client.get(f"{JOBS}/all", headers=headers_a).json() == []


class TestTokens:

    def test_round_trip_subject(self):
        subject = str(uuid.uuid4())

        payload = decode_token(create_access_token({"sub": subject}))

        assert payload["sub"] == subject
        assert "exp" in payload

    def test_tampered_token_raises(self):
        token = create_access_token({"sub": str(uuid.uuid4())})

        with pytest.raises(JWTError):
            decode_token(token[:-2] + ("AA" if not token.endswith("AA") else "BB"))


class TestPublicEndpoints:

    def test_health_needs_no_token(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
