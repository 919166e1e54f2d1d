import pytest

from dsakit.stack_problems import (
    binary_string,
    is_valid_parentheses,
    make_good,
    next_greater_elements,
    remove_duplicates,
    remove_stars,
    reverse_string,
    simplify_path,
    sort_stack,
    sort_stack_recursive,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("{[(}]}", False),
        ("()[]{}", True),
        ("{[()]}", True),
        ("(", False),
        ("((", False),
        ("))", False),
        ("", True),
    ],
)
def test_is_valid_parentheses(text, expected):
    assert is_valid_parentheses(text) is expected


def test_reverse_string_round_trip():
    text = "Hello, World!"
    reversed_text = reverse_string(text)
    assert reverse_string(reversed_text) == text
    assert reversed_text[0] == text[-1]
    assert sorted(reversed_text) == sorted(text)


def test_reverse_string_empty():
    assert reverse_string("") == ""


@pytest.mark.parametrize("num", [0, 1, 2, 13, 255, 1024])
def test_binary_string_round_trip(num):
    assert int(binary_string(num), 2) == num


def test_binary_string_no_leading_zero():
    assert binary_string(13).startswith("1")


def test_binary_string_negative():
    with pytest.raises(ValueError):
        binary_string(-1)


def test_next_greater_elements_example():
    assert next_greater_elements([4, 5, 2, 25]) == [5, 25, 25, -1]


def test_next_greater_elements_last_is_minus_one():
    nums = [3, 1, 2]
    result = next_greater_elements(nums)
    assert len(result) == len(nums)
    assert result[-1] == -1


def test_next_greater_elements_descending():
    assert next_greater_elements([9, 7, 5]) == [-1, -1, -1]


def test_sort_stack_largest_on_top():
    data = [1, 2, 3, 4, 5]
    assert sort_stack(data) == sorted(data)
    assert data == [1, 2, 3, 4, 5]


def test_sort_stack_mixed():
    data = [-1, 25, -2, 31, 99, 9, 9]
    assert sort_stack(data) == sorted(data)


def test_sort_stack_recursive_smallest_on_top():
    data = [100, 22225, -222, 1, 9, 9]
    assert sort_stack_recursive(data) == sorted(data, reverse=True)


def test_sort_stack_empty():
    assert sort_stack([]) == []
    assert sort_stack_recursive([]) == []


def test_simplify_path_example():
    assert simplify_path("/a//b////c/d//././/..") == "/a/b/c"


def test_simplify_path_root():
    assert simplify_path("/../") == "/"


def test_simplify_path_empty():
    assert simplify_path("") == ""


def test_remove_duplicates_example():
    assert remove_duplicates("abbaca") == "ca"


def test_remove_duplicates_has_no_adjacent_pairs():
    result = remove_duplicates("aabccbdde")
    assert all(a != b for a, b in zip(result, result[1:]))


def test_remove_stars_invariants():
    text = "abc*de*f"
    result = remove_stars(text)
    assert "*" not in result
    assert len(result) == len(text) - 2 * text.count("*")


def test_remove_stars_leading_star_kept():
    assert remove_stars("*a") == "*a"


def test_make_good_cancels_pairs():
    text = "AaBbCcDdEeff"
    assert make_good(text) == text[-2:]


def test_make_good_same_case_kept():
    assert make_good("aa") == "aa"
    assert make_good("abBA") == ""