"""
Adversarial tests for credential enumeration prevention.

An attacker probing /login must not learn whether an email is registered.
Unknown email and wrong password must produce byte-identical responses.
"""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.adversarial


@pytest.fixture(autouse=True)
def registered_user(client: TestClient) -> None:
    response = client.post(
        "/registro",
        json={"correo": "victim@example.com", "telefono": "5551234567", "password": "Pass123@"},
    )
    assert response.status_code == 201


class TestEnumerationAttacks:
    """Login failures must not reveal which credential was wrong."""

    @pytest.mark.parametrize(
        "correo,password",
        [
            ("victim@example.com", "Wrong123@"),
            ("nobody@example.com", "Pass123@"),
            ("nobody@example.com", "Wrong123@"),
            ("VICTIM@example.com", "Pass123@"),
            ("victim@example.com", "pass123@"),
        ],
    )
    def test_failures_are_identical(self, client: TestClient, correo: str, password: str) -> None:
        """Every failing combination returns the same status and body."""
        response = client.post("/login", json={"correo": correo, "password": password})

        assert response.status_code == 401
        assert response.content == '{"error":"Correo o contraseña incorrectos"}'.encode()

    def test_phone_is_not_a_login_identifier(self, client: TestClient) -> None:
        """Logging in with the phone instead of the email fails generically."""
        response = client.post("/login", json={"correo": "5551234567", "password": "Pass123@"})

        assert response.status_code == 401

    def test_registration_conflict_message_does_not_echo_input(self, client: TestClient) -> None:
        """Duplicate responses carry a fixed message, not the submitted value."""
        response = client.post(
            "/registro",
            json={"correo": "victim@example.com", "telefono": "5559999999", "password": "Pass123@"},
        )

        assert response.status_code == 409
        assert "victim@example.com" not in response.text
