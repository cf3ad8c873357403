"""Validação de payloads — email, "falsy" e ordem das checagens."""

import pytest

from app.core.errors import ValidationError
from app.services.validation import (
    MSG_CAMPOS_OBRIGATORIOS,
    MSG_EMAIL_INVALIDO,
    MSG_EMUSO_INVALIDO,
    REQUIRED_FIELDS,
    is_absent,
    is_valid_email,
    validate_create,
    validate_update,
)


@pytest.mark.parametrize("email", ["a@b.co", "suporte@empresa.com.br", "x.y+z@sub.dominio.io"])
def test_valid_emails(email):
    assert is_valid_email(email) is True


@pytest.mark.parametrize("email", [
    "a@b", "a b@c.com", "@b.com", "", "a@b.com\n", "a@@b.com", "a@b .com", None, 123,
])
def test_invalid_emails(email):
    assert is_valid_email(email) is False


@pytest.mark.parametrize("value", [None, "", 0, 0.0, False, float("nan")])
def test_falsy_values_are_absent(value):
    assert is_absent(value) is True


@pytest.mark.parametrize("value", ["0", " ", 1, -1, [], {}, True])
def test_truthy_values_are_present(value):
    assert is_absent(value) is False


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_create_requires_every_field(make_chave, field):
    data = make_chave(**{field: ""})
    with pytest.raises(ValidationError) as exc:
        validate_create(data)
    assert exc.value.message == MSG_CAMPOS_OBRIGATORIOS


def test_create_missing_key_counts_as_absent(make_chave):
    data = make_chave()
    del data["valorhash"]
    with pytest.raises(ValidationError, match=MSG_CAMPOS_OBRIGATORIOS):
        validate_create(data)


def test_create_presence_is_checked_before_email(make_chave):
    with pytest.raises(ValidationError) as exc:
        validate_create(make_chave(email="invalido", nome=""))
    assert exc.value.message == MSG_CAMPOS_OBRIGATORIOS


def test_create_email_is_checked_before_emuso(make_chave):
    with pytest.raises(ValidationError) as exc:
        validate_create(make_chave(email="invalido", emuso="X"))
    assert exc.value.message == MSG_EMAIL_INVALIDO


def test_create_rejects_unknown_emuso(make_chave):
    with pytest.raises(ValidationError) as exc:
        validate_create(make_chave(emuso="s"))
    assert exc.value.message == MSG_EMUSO_INVALIDO


def test_create_accepts_full_payload(make_chave):
    validate_create(make_chave(emuso="S"))


def test_update_has_no_presence_check():
    validate_update({"email": "a@b.co", "emuso": "N"})


def test_update_without_email_is_invalid_email():
    with pytest.raises(ValidationError) as exc:
        validate_update({"emuso": "N"})
    assert exc.value.message == MSG_EMAIL_INVALIDO


def test_update_without_emuso_fails_enum():
    with pytest.raises(ValidationError) as exc:
        validate_update({"email": "a@b.co"})
    assert exc.value.message == MSG_EMUSO_INVALIDO
