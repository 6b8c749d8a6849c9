from autopointing.strings import find_string_list_id, find_string_list_id_nocase

WORK_NAMES = ("touch", "touchs", "wait")
MODE_NAMES = ("each", "anyone")


def test_exact_match_found():
    for name in WORK_NAMES:
        assert find_string_list_id(name, WORK_NAMES) == WORK_NAMES.index(name)


def test_exact_match_is_case_sensitive():
    assert find_string_list_id("TOUCH", WORK_NAMES) == -1


def test_missing_name():
    assert find_string_list_id("click", WORK_NAMES) == -1


def test_empty_list():
    assert find_string_list_id("touch", []) == -1
    assert find_string_list_id_nocase("touch", []) == -1


def test_first_occurrence_wins():
    names = ["a", "b", "a"]
    assert find_string_list_id("a", names) == 0


def test_nocase_match():
    assert find_string_list_id_nocase("ANYONE", MODE_NAMES) == MODE_NAMES.index("anyone")
    assert find_string_list_id_nocase("Each", MODE_NAMES) == MODE_NAMES.index("each")


def test_nocase_missing():
    assert find_string_list_id_nocase("random", MODE_NAMES) == -1


def test_accepts_generator():
    assert find_string_list_id("wait", (n for n in WORK_NAMES)) == WORK_NAMES.index("wait")