import pytest

from backend.talent_search.pagination import page_window, pagination_controls


@pytest.mark.parametrize("total_pages", range(1, 8))
def test_small_totals_show_every_page(total_pages):
    for current_page in range(1, total_pages + 1):
        assert page_window(current_page, total_pages) == list(range(1, total_pages + 1))


def test_first_page_of_ten():
    assert page_window(1, 10) == [1, 2, 3, 4, 5, ..., 10]


def test_last_page_of_ten():
    assert page_window(10, 10) == [1, ..., 6, 7, 8, 9, 10]


def test_middle_page_has_ellipsis_on_both_sides():
    assert page_window(10, 20) == [1, ..., 8, 9, 10, 11, 12, ..., 20]


def test_near_start_and_end_windows():
    assert page_window(3, 10) == [1, 2, 3, 4, 5, ..., 10]
    assert page_window(4, 10) == [1, 2, 3, 4, 5, 6, ..., 10]
    assert page_window(8, 10) == [1, ..., 6, 7, 8, 9, 10]


def test_window_is_stable_for_same_input():
    assert page_window(7, 30) == page_window(7, 30)


@pytest.mark.parametrize("total_pages", range(8, 41))
def test_window_shape_for_every_current_page(total_pages):
    for current_page in range(1, total_pages + 1):
        window = page_window(current_page, total_pages)
        numbers = [marker for marker in window if marker is not ...]

        assert window[0] == 1
        assert window[-1] == total_pages
        assert current_page in numbers
        assert numbers == sorted(set(numbers))
        assert len(window) <= 9
        for near in range(max(1, current_page - 2), min(total_pages, current_page + 2) + 1):
            assert near in numbers
        for before, after in zip(window, window[1:]):
            assert not (before is ... and after is ...)
            if before is ... or after is ...:
                continue
            assert after == before + 1


def test_ellipsis_marks_skipped_range():
    window = page_window(10, 20)
    for index, marker in enumerate(window):
        if marker is ...:
            assert window[index + 1] - window[index - 1] > 1


def test_custom_neighbor_radius():
    assert page_window(5, 20, neighbors=1) == [1, ..., 4, 5, 6, ..., 20]


def test_controls_disable_prev_on_first_page():
    controls = pagination_controls(1, 10)
    labels = [control.label for control in controls]

    assert labels == ["Prev", "1", "2", "3", "4", "5", "...", "10", "Next"]
    assert controls[0].disabled
    assert not controls[-1].disabled
    assert controls[1].is_current
    assert controls[6].disabled
    assert controls[6].page is None


def test_controls_disable_next_on_last_page():
    controls = pagination_controls(10, 10)

    assert not controls[0].disabled
    assert controls[0].page == 9
    assert controls[-1].disabled
    assert [control.label for control in controls if control.is_current] == ["10"]


def test_controls_single_page():
    controls = pagination_controls(1, 1)

    assert [control.label for control in controls] == ["Prev", "1", "Next"]
    assert controls[0].disabled
    assert controls[-1].disabled
