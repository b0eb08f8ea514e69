from galleryfeed.common.strings.splitters import csv_to_list, csv_to_unique_list


def test_csv_to_list_none():
    assert csv_to_list(None) == []


def test_csv_to_list_list_input():
    assert csv_to_list([" a ", "b", "", "  "]) == ["a", "b"]


def test_csv_to_list_string_input():
    assert csv_to_list(" a, b ,c ,, d ") == ["a", "b", "c", "d"]


def test_csv_to_unique_list_keeps_first_occurrence():
    assert csv_to_unique_list("beach, blonde,beach ,, blonde") == ["beach", "blonde"]


def test_csv_to_unique_list_is_case_sensitive():
    assert csv_to_unique_list("Beach,beach") == ["Beach", "beach"]


def test_csv_to_unique_list_blank():
    assert csv_to_unique_list(" , ,") == []
