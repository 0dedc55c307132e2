import pytest

from coursekit.passwords import (
    PasswordHistory,
    PwStatus,
    check_cases,
    diff_pass,
    validate_password,
    validate_password_weak,
)

STRONG = "Abcdef1@"
OTHER_STRONG = "Zyxwvu9#"


def test_status_values():
    history = PasswordHistory([STRONG, "", ""])
    assert int(validate_password_weak(STRONG, OTHER_STRONG)) == 0
    assert int(validate_password_weak(STRONG, STRONG)) == 1
    assert int(validate_password("Abcdef1#", history)) == 2


def test_check_cases_accepts_all_classes():
    assert check_cases(STRONG) is True


@pytest.mark.parametrize(
    "text",
    ["abcdef1@", "ABCDEF1@", "Abcdefg@", "Abcdefg1", "Abcdef1!", ""],
)
def test_check_cases_rejects_missing_class(text):
    assert check_cases(text) is False


def test_check_cases_ignores_non_ascii_letters():
    assert check_cases("Ébcdef1@".lower()) is False


def test_diff_pass():
    assert diff_pass(STRONG, STRONG) is False
    assert diff_pass(STRONG, STRONG + "x") is True
    assert diff_pass(STRONG, OTHER_STRONG) is True


def test_weak_validation_accepts_strong_new_password():
    assert validate_password_weak(STRONG, OTHER_STRONG) is PwStatus.OK


def test_weak_validation_rejects_short():
    assert validate_password_weak("Ab1@xyz", "") is PwStatus.WEAK


def test_weak_validation_rejects_same_as_current():
    assert validate_password_weak(STRONG, STRONG) is PwStatus.WEAK


def test_weak_validation_rejects_missing_class():
    assert validate_password_weak("abcdefgh1@", "") is PwStatus.WEAK


def test_history_defaults_to_empty_entries():
    assert list(PasswordHistory()) == ["", "", ""]


def test_history_rejects_wrong_size():
    with pytest.raises(ValueError):
        PasswordHistory(["only"])


def test_history_push_shifts_entries():
    history = PasswordHistory(["one", "two", "three"])
    history.push("zero")
    assert list(history) == ["zero", "one", "two"]
    assert len(history) == 3


def test_history_push_truncates_long_entries():
    history = PasswordHistory()
    history.push("A" * 2000)
    assert history[0] == "A" * 1023


def test_validate_accepts_and_records():
    history = PasswordHistory()
    assert validate_password(STRONG, history) is PwStatus.OK
    assert list(history) == [STRONG, "", ""]
    assert validate_password(OTHER_STRONG, history) is PwStatus.OK
    assert list(history) == [OTHER_STRONG, STRONG, ""]


def test_validate_weak_leaves_history_untouched():
    history = PasswordHistory([STRONG, "", ""])
    assert validate_password(STRONG, history) is PwStatus.WEAK
    assert list(history) == [STRONG, "", ""]


def test_validate_rejects_single_replacement():
    history = PasswordHistory([STRONG, "", ""])
    assert validate_password("Abcdef1#", history) is PwStatus.SIMILAR
    assert list(history) == [STRONG, "", ""]


def test_validate_rejects_single_insertion():
    history = PasswordHistory([STRONG, "", ""])
    assert validate_password("Abcdef1@x", history) is PwStatus.SIMILAR


def test_validate_rejects_single_deletion():
    history = PasswordHistory(["Abcdefg1@", "", ""])
    assert validate_password("Abcdfg1@", history) is PwStatus.SIMILAR


def test_validate_rejects_similar_to_older_entry():
    history = PasswordHistory([OTHER_STRONG, "", STRONG])
    assert validate_password("Abcdef2@", history) is PwStatus.SIMILAR
    assert list(history) == [OTHER_STRONG, "", STRONG]


def test_validate_rejects_repeat_of_older_entry():
    history = PasswordHistory([OTHER_STRONG, STRONG, ""])
    assert validate_password(STRONG, history) is PwStatus.SIMILAR


def test_validate_accepts_two_changes():
    history = PasswordHistory([STRONG, "", ""])
    assert validate_password("Xbcdef2@", history) is PwStatus.OK
    assert history[0] == "Xbcdef2@"
    assert history[1] == STRONG


def test_validate_accepts_insertion_plus_change():
    history = PasswordHistory([STRONG, "", ""])
    assert validate_password("Abxcdef1#", history) is PwStatus.OK