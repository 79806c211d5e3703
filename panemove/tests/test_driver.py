import pytest

from panemove.errors import \
    NoNeighborError, ReservedRegionInactiveError, InvalidDirectionError, LayoutError
from panemove.layout import Direction


class TestSelect:
    def test_select_right_and_back(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        left.set_cursor(5, 3)
        right.set_cursor(5, 3)
        assert driver.select_in_direction(Direction.RIGHT) is right
        assert window_set.selected_window() is right
        assert driver.select_in_direction(Direction.LEFT) is left
        assert window_set.selected_window() is left

    def test_cursor_decides(self, left_and_stacked, make_driver):
        window_set, left, top, bottom = left_and_stacked
        driver = make_driver(window_set)
        left.set_cursor(0, 20)
        assert driver.select_in_direction(Direction.RIGHT) is bottom
        assert driver.select_in_direction(Direction.LEFT) is left
        assert driver.select_in_direction(Direction.RIGHT, 1) is top

    def test_cursor_below_split_line(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        left.set_cursor(0, 20)
        lower_left = window_set.split_window_below(left)
        window_set.select_window(lower_left)
        assert driver.select_in_direction(Direction.RIGHT) is right

    def test_no_neighbor(self, window_set, make_driver):
        driver = make_driver(window_set)
        with pytest.raises(NoNeighborError) as e:
            driver.select_in_direction(Direction.RIGHT)
        assert e.value.direction == Direction.RIGHT
        assert str(e.value) == 'No window right from selected window'

    def test_create_window(self, window_set, make_driver):
        driver = make_driver(window_set, create_window=True)
        origin = window_set.selected_window()
        new = driver.select_in_direction(Direction.RIGHT)
        assert new is not origin
        assert window_set.selected_window() is new
        assert window_set.windows() == [origin, new]

    def test_create_window_instead_of_inactive_minibuffer(self, window_set, make_driver):
        driver = make_driver(window_set, create_window=True)
        origin = window_set.selected_window()
        new = driver.select_in_direction(Direction.DOWN)
        assert window_set.windows() == [origin, new]
        assert window_set.edges_of(new) == (0, 12, 80, 24)

    def test_inactive_minibuffer(self, window_set, make_driver):
        driver = make_driver(window_set)
        with pytest.raises(ReservedRegionInactiveError):
            driver.select_in_direction(Direction.DOWN)

    def test_active_minibuffer(self, window_set, make_driver):
        driver = make_driver(window_set)
        window = window_set.selected_window()
        window_set.activate_minibuffer()
        window_set.select_window(window)
        assert driver.select_in_direction(Direction.DOWN) is window_set.minibuffer_window
        assert driver.select_in_direction(Direction.UP) is window

    def test_wrap_around(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set, wrap_around=True)
        assert driver.select_in_direction(Direction.LEFT) is right
        assert driver.select_in_direction(Direction.DOWN) is right

    def test_wrap_around_reaches_active_minibuffer(self, window_set, make_driver):
        driver = make_driver(window_set, wrap_around=True)
        window = window_set.selected_window()
        window_set.activate_minibuffer()
        window_set.select_window(window)
        assert driver.select_in_direction(Direction.UP) is window_set.minibuffer_window

    def test_invalid_direction(self, window_set, make_driver):
        driver = make_driver(window_set)
        with pytest.raises(InvalidDirectionError):
            driver.select_in_direction('right')


class TestDelete:
    def test_delete_other(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        driver.delete_in_direction(Direction.RIGHT)
        assert window_set.windows() == [left]
        assert window_set.selected_window() is left

    def test_delete_origin(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        driver.delete_in_direction(Direction.RIGHT, 4)
        assert window_set.windows() == [right]
        assert window_set.selected_window() is right

    def test_delete_and_kill_content(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        window_set.show_content(right, 'b')
        driver.delete_in_direction(Direction.RIGHT, kill_content=True)
        assert window_set.buffers == ['a']
        assert window_set.windows() == [left]

    def test_no_neighbor(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        with pytest.raises(NoNeighborError):
            driver.delete_in_direction(Direction.LEFT)
        assert window_set.windows() == [left, right]

    def test_minibuffer_is_targeted(self, window_set, make_driver):
        driver = make_driver(window_set)
        # The minibuffer is found, but it can not be deleted
        with pytest.raises(LayoutError):
            driver.delete_in_direction(Direction.DOWN)

    def test_content_survives_refused_delete(self, window_set, make_driver):
        driver = make_driver(window_set)
        window_set.activate_minibuffer()
        with pytest.raises(LayoutError):
            driver.delete_in_direction(Direction.UP, 1, kill_content=True)
        assert window_set.buffers == ['a']
        assert window_set.windows()[0].buffer() == 'a'


class TestSwapStates:
    def test_swap(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        window_set.show_content(right, 'b')
        assert driver.swap_states_in_direction(Direction.RIGHT) is right
        assert left.buffer() == 'b'
        assert right.buffer() == 'a'
        assert window_set.selected_window() is right

    def test_minibuffer_is_no_neighbor(self, window_set, make_driver):
        driver = make_driver(window_set)
        with pytest.raises(NoNeighborError):
            driver.swap_states_in_direction(Direction.DOWN)


class TestDisplay:
    def test_display_right(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        driver.display_in_direction(Direction.RIGHT)
        assert driver.last_message == '[display-right]'
        assert driver.display_content('c') is right
        assert right.buffer() == 'c'
        assert left.buffer() == 'a'
        assert window_set.selected_window() is right
        assert driver.pending_display is None

    def test_fires_once(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        driver.display_in_direction(Direction.RIGHT)
        driver.display_content('c')
        assert driver.display_content('d') is None
        assert right.buffer() == 'c'

    def test_no_select(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set, display_no_select=True)
        driver.display_in_direction(Direction.RIGHT)
        driver.display_content('c')
        assert window_set.selected_window() is left

    def test_argument_inverts_no_select(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        driver.display_in_direction(Direction.RIGHT, 4)
        driver.display_content('c')
        assert right.buffer() == 'c'
        assert window_set.selected_window() is left

        driver = make_driver(window_set, display_no_select=True)
        driver.display_in_direction(Direction.RIGHT, 4)
        driver.display_content('d')
        assert window_set.selected_window() is right

    def test_same_window(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        driver.display_in_direction(Direction.SAME_WINDOW)
        assert driver.display_content('c') is left
        assert left.buffer() == 'c'

    def test_splits_without_neighbor(self, window_set, make_driver):
        driver = make_driver(window_set)
        origin = window_set.selected_window()
        driver.display_in_direction(Direction.LEFT)
        new = driver.display_content('c')
        assert window_set.windows() == [new, origin]
        assert new.buffer() == 'c'
        assert origin.buffer() == 'a'
        assert window_set.selected_window() is new

    def test_splits_instead_of_minibuffer(self, window_set, make_driver):
        driver = make_driver(window_set)
        origin = window_set.selected_window()
        driver.display_in_direction(Direction.DOWN)
        new = driver.display_content('c')
        assert window_set.windows() == [origin, new]

    def test_last_scheduled_wins(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        driver.display_in_direction(Direction.RIGHT)
        driver.display_in_direction(Direction.SAME_WINDOW)
        assert driver.display_content('c') is left
        assert right.buffer() == 'a'

    def test_ignores_nested_input(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        driver.display_in_direction(Direction.RIGHT)
        with driver.input_interaction():
            assert driver.display_content('completions') is None
        assert driver.pending_display is not None
        assert driver.display_content('c') is right

    def test_dropped_after_unrelated_command(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        driver.call_interactively(driver.display_in_direction, Direction.RIGHT)
        assert driver.pending_display is not None
        driver.call_interactively(lambda: None)
        assert driver.pending_display is None
        assert driver.display_content('c') is None
        assert 'Dropped pending display-right.' in driver.logger.messages

    def test_consumed_by_next_command(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        driver.call_interactively(driver.display_in_direction, Direction.RIGHT)
        assert driver.call_interactively(driver.display_content, 'c') is right
        assert right.buffer() == 'c'

    def test_kept_across_nested_commands(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)

        def find_file():
            with driver.input_interaction():
                driver.call_interactively(lambda: None)
            return driver.display_content('c')

        driver.call_interactively(driver.display_in_direction, Direction.RIGHT)
        assert driver.call_interactively(find_file) is right

    def test_previous_window_deleted(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set, display_no_select=True)
        window_set.select_window(right)
        driver.display_in_direction(Direction.SAME_WINDOW)
        window_set.select_window(left)
        window_set.delete_window(right)
        assert driver.display_content('c') is left
        assert window_set.selected_window() is left

    def test_invalid_direction(self, window_set, make_driver):
        driver = make_driver(window_set)
        with pytest.raises(InvalidDirectionError):
            driver.display_in_direction('left')


class TestCallInteractively:
    def test_reports_user_errors(self, window_set, make_driver):
        driver = make_driver(window_set)
        assert driver.call_interactively(driver.select_in_direction, Direction.UP) is None
        assert driver.last_message == 'No window up from selected window'
        assert driver.logger.messages == ['No window up from selected window']

    def test_propagates_other_errors(self, window_set, make_driver):
        driver = make_driver(window_set)
        with pytest.raises(InvalidDirectionError):
            driver.call_interactively(driver.select_in_direction, 'up')

    def test_returns_result(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        assert driver.call_interactively(driver.select_in_direction, Direction.RIGHT) is right

    def test_forwards_to_layout(self, side_by_side, make_driver):
        window_set, left, right = side_by_side
        driver = make_driver(window_set)
        driver.select_pane(right)
        assert driver.selected_pane() is right
