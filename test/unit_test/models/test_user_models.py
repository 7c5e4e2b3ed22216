import pytest
from pydantic import ValidationError

from khet_mitra.models.aadhaar import AadhaarInfo
from khet_mitra.models.user import LoginRequest, User, UserPublic, mask_aadhaar


def test_login_request_normalizes_aadhaar_and_name():
    request = LoginRequest(name="  Sita Devi ", aadhaar="1234 5678 9012")
    assert request.name == "Sita Devi"
    assert request.aadhaar == "123456789012"


@pytest.mark.parametrize("aadhaar", ["12345678901", "1234567890123", "1234abcd9012", ""])
def test_login_request_rejects_invalid_aadhaar(aadhaar):
    with pytest.raises(ValidationError):
        LoginRequest(name="Sita", aadhaar=aadhaar)


@pytest.mark.parametrize("name", ["", "A", "  B  "])
def test_login_request_rejects_short_name(name):
    with pytest.raises(ValidationError):
        LoginRequest(name=name, aadhaar="123456789012")


def test_mask_aadhaar_keeps_last_four_digits():
    assert mask_aadhaar("1234 5678 9012") == "XXXX XXXX 9012"
    assert mask_aadhaar("") == ""


def test_public_user_never_exposes_full_aadhaar():
    user = User(name="Sita", aadhaar="123456789012")
    data = UserPublic.from_user(user).model_dump()
    assert "aadhaar" not in data
    assert data["masked_aadhaar"] == "XXXX XXXX 9012"
    assert data["photo"] == ""
    assert data["location"] == ""
    assert data["language"] == "en"


def test_user_reads_mongo_id():
    user = User.model_validate({"_id": "abc", "name": "Sita", "aadhaar": "123456789012"})
    assert user.id == "abc"
    assert user.model_dump(by_alias=True)["_id"] == "abc"


def test_aadhaar_info_strips_spaces():
    info = AadhaarInfo(name=" Ravi Kumar ", aadhaar_number="9876 5432 1098")
    assert info.name == "Ravi Kumar"
    assert info.aadhaar_number == "987654321098"


def test_aadhaar_info_accepts_missing_values():
    info = AadhaarInfo(name=None, aadhaar_number=None)
    assert info.name == ""
    assert info.aadhaar_number == ""
