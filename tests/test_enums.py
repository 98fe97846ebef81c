import pytest

from safezone.enums import Category, DeviceOs, UserRole, ViolationKind


@pytest.mark.parametrize("member", list(Category))
def test_category_json_round_trip(member):
    assert Category.from_json(member.to_json()) is member


@pytest.mark.parametrize("member", list(Category))
def test_category_sql_round_trip(member):
    assert Category.from_sql(member.to_sql()) is member


@pytest.mark.parametrize("value", [1, 2, 3, 4])
def test_category_json_values(value):
    assert Category.from_sql(value).to_json() == value


@pytest.mark.parametrize("value", [0, 5, -1, True, "1", 1.0])
def test_category_from_json_rejects(value):
    with pytest.raises(ValueError):
        Category.from_json(value)


def test_category_invalid_message():
    with pytest.raises(ValueError, match="invalid value for User role: 9"):
        Category.from_json(9)


def test_category_from_sql_rejects():
    with pytest.raises(ValueError, match="Unrecognized UserRole variant"):
        Category.from_sql(0)


@pytest.mark.parametrize("member", list(DeviceOs))
def test_device_os_json_round_trip(member):
    assert DeviceOs.from_json(member.to_json()) is member


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Android", DeviceOs.ANDROID),
        ("android", DeviceOs.ANDROID),
        ("Windows", DeviceOs.WINDOWS),
        ("windows", DeviceOs.WINDOWS),
        ("Linux", DeviceOs.LINUX),
        ("linux", DeviceOs.LINUX),
    ],
)
def test_device_os_aliases(text, expected):
    assert DeviceOs.from_json(text) is expected


@pytest.mark.parametrize("value", ["ANDROID", "macos", 1, None])
def test_device_os_rejects(value):
    with pytest.raises(ValueError):
        DeviceOs.from_json(value)


def test_device_os_sql_values():
    assert DeviceOs.ANDROID.to_sql() == 1
    assert DeviceOs.WINDOWS.to_sql() == 2
    assert DeviceOs.LINUX.to_sql() == 3


def test_user_role_json_reads_from_zero():
    assert UserRole.from_json(0) is UserRole.SECURITY_GUARD
    assert UserRole.from_json(1) is UserRole.SECURITY_HEAD
    assert UserRole.from_json(2) is UserRole.SYSTEM_ADMIN


def test_user_role_json_writes_from_one():
    assert UserRole.SECURITY_GUARD.to_json() == 1
    assert UserRole.SECURITY_HEAD.to_json() == 2
    assert UserRole.SYSTEM_ADMIN.to_json() == 3


def test_user_role_rejects_out_of_range():
    with pytest.raises(ValueError, match="invalid value for User role: 3"):
        UserRole.from_json(3)


@pytest.mark.parametrize("member", list(UserRole))
def test_user_role_sql_round_trip(member):
    assert UserRole.from_sql(member.to_sql()) is member


def test_user_role_from_sql_rejects():
    with pytest.raises(ValueError, match="Unrecognized UserRole variant"):
        UserRole.from_sql(4)


def test_violation_kind_json_reads_from_zero():
    assert ViolationKind.from_json(0) is ViolationKind.FACEMASK_PROTOCOL
    assert ViolationKind.from_json(1) is ViolationKind.FOOT_TRAFFIC


def test_violation_kind_json_writes_from_one():
    assert ViolationKind.FACEMASK_PROTOCOL.to_json() == 1
    assert ViolationKind.FOOT_TRAFFIC.to_json() == 2


def test_violation_kind_rejects():
    with pytest.raises(ValueError, match="invalid value for violation kind: 2"):
        ViolationKind.from_json(2)


@pytest.mark.parametrize("member", list(ViolationKind))
def test_violation_kind_sql_round_trip(member):
    assert ViolationKind.from_sql(member.to_sql()) is member


def test_violation_kind_from_sql_rejects():
    with pytest.raises(ValueError, match="ViolationKind UserRole variant"):
        ViolationKind.from_sql(3)