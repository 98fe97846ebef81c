import base64
import sys
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from safezone.credentials import DeviceSignature, JwtClaims, PasswordHash
from safezone.hexadecimal import HexParseError


def test_device_signature_renders_hex():
    assert str(DeviceSignature(0x60A344)) == "0000000000000000000000000060A344"


def test_device_signature_from_hex():
    assert DeviceSignature.from_hex("A00000060A344") == DeviceSignature(0xA00000060A344)


def test_device_signature_hex_round_trip():
    signature = DeviceSignature(0x0123456789ABCDEF0123456789ABCDEF)
    assert DeviceSignature.from_hex(str(signature)) == signature


def test_device_signature_bad_hex():
    with pytest.raises(HexParseError):
        DeviceSignature.from_hex("xyz")


def test_device_signature_bytes_native_order():
    signature = DeviceSignature(0x60A344)
    data = signature.to_bytes()
    assert len(data) == 16
    assert int.from_bytes(data, sys.byteorder) == 0x60A344


def test_device_signature_bytes_round_trip():
    signature = DeviceSignature((1 << 128) - 1)
    assert DeviceSignature.from_bytes(signature.to_bytes()) == signature


def test_device_signature_range():
    with pytest.raises(ValueError):
        DeviceSignature(1 << 128)


def test_password_hash_sql_round_trip():
    digest = bytes(range(64))
    assert PasswordHash.from_sql(digest).to_sql() == digest


def test_password_hash_wrong_length():
    with pytest.raises(ValueError, match="Cannot convert to PasswordHash"):
        PasswordHash.from_sql(bytes(63))


def test_password_hash_base64_without_padding():
    digest = bytes(range(64))
    text = str(PasswordHash(digest))
    assert "=" not in text
    assert base64.b64decode(text + "==") == digest


def test_jwt_claims_expire_in_fifteen_days():
    session_id = uuid.uuid4()
    claims = JwtClaims.new(session_id)
    expected = datetime.now(timezone.utc) + timedelta(days=15)
    assert claims.session_id == session_id
    assert abs(claims.exp - expected.timestamp()) < 5


def test_jwt_claims_dict_round_trip():
    claims = JwtClaims.new(uuid.uuid4())
    assert JwtClaims.from_dict(claims.to_dict()) == claims


def test_jwt_claims_missing_field():
    with pytest.raises(ValueError):
        JwtClaims.from_dict({"session_id": str(uuid.uuid4())})


def test_jwt_claims_bad_uuid():
    with pytest.raises(ValueError):
        JwtClaims.from_dict({"session_id": "nope", "exp": 1})