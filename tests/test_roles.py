from clinic.access.account import Account
from clinic.access.roles import Operation, Role, menu_entries, permitted_operations


def test_every_role_can_change_own_password() -> None:
    for role in Role:
        assert Operation.CHANGE_PASSWORD in permitted_operations(role)


def test_capability_table() -> None:
    assert permitted_operations(Role.ADMIN) == (
        Operation.CREATE_ACCOUNT,
        Operation.DELETE_ACCOUNT,
        Operation.LIST_ACCOUNTS,
        Operation.CHANGE_PASSWORD,
    )
    assert permitted_operations(Role.NURSE) == (
        Operation.REGISTER_PATIENT,
        Operation.VIEW_BASIC_RECORD,
        Operation.CHANGE_PASSWORD,
    )
    assert permitted_operations(Role.DOCTOR) == (
        Operation.LIST_PATIENTS,
        Operation.VIEW_FULL_RECORD,
        Operation.ADD_DIAGNOSIS,
        Operation.ADD_MEDICAL_NOTE,
        Operation.ADD_PRESCRIPTION,
        Operation.ADD_CHARGE,
        Operation.CHANGE_PASSWORD,
    )
    assert permitted_operations(Role.PHARMACIST) == (
        Operation.VIEW_FULL_RECORD,
        Operation.ADD_PRESCRIPTION,
        Operation.ADD_CHARGE,
        Operation.CHANGE_PASSWORD,
    )
    assert permitted_operations(Role.ACCOUNTS) == (
        Operation.VIEW_LEDGER,
        Operation.ADD_PAYMENT,
        Operation.SET_LEDGER_STATUS,
        Operation.CHANGE_PASSWORD,
    )


def test_every_operation_is_reachable_by_some_role() -> None:
    reachable = {operation for role in Role for operation in permitted_operations(role)}
    assert reachable == set(Operation)


def test_only_admin_manages_accounts_and_only_accounts_takes_payments() -> None:
    for role in Role:
        operations = permitted_operations(role)
        assert (Operation.CREATE_ACCOUNT in operations) == (role is Role.ADMIN)
        assert (Operation.DELETE_ACCOUNT in operations) == (role is Role.ADMIN)
        assert (Operation.ADD_PAYMENT in operations) == (role is Role.ACCOUNTS)
        assert (Operation.SET_LEDGER_STATUS in operations) == (role is Role.ACCOUNTS)


def test_menu_labels_follow_role_wording() -> None:
    pharmacist = dict(menu_entries(Role.PHARMACIST))
    doctor = dict(menu_entries(Role.DOCTOR))
    assert pharmacist[Operation.ADD_PRESCRIPTION] == "Record medication dispensed"
    assert doctor[Operation.ADD_PRESCRIPTION] == "Prescribe medication"


def test_role_labels() -> None:
    assert Role.ACCOUNTS.label == "Accounts Manager"
    assert Role.ADMIN.label == "Admin"


def test_account_password_check_and_change() -> None:
    account = Account("nico", "old", Role.NURSE)
    assert account.check_password("old")
    assert not account.check_password("OLD")
    assert not account.check_password("")
    account.set_password("new")
    assert account.check_password("new")
    assert not account.check_password("old")
    assert account.view().username == "nico"
