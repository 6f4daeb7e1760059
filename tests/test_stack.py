from hwkit.stack import DATA, Stack, filtered, is_odd, main


def test_iteration_is_top_down():
    values = [1, 2, 3]
    assert list(Stack(values)) == list(reversed(values))


def test_push_adds_on_top():
    stack = Stack([1, 2])
    stack.push(3)
    assert next(iter(stack)) == 3
    assert len(stack) == 3


def test_empty_stack():
    assert list(Stack()) == []
    assert len(Stack()) == 0


def test_is_odd():
    assert is_odd(15) is True
    assert is_odd(16) is False
    assert is_odd(0) is False


def test_filtered_reverses_matches():
    stack = Stack([1, 2, 3, 4, 5])
    assert list(filtered(stack, is_odd)) == [1, 3, 5]


def test_filtered_leaves_original_untouched():
    stack = Stack([1, 2, 3])
    filtered(stack, is_odd)
    assert list(stack) == [3, 2, 1]


def test_filter_twice_restores_order():
    stack = Stack(DATA)
    assert list(filtered(filtered(stack, lambda v: True), lambda v: True)) == list(stack)


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "4 8 15 16 23 42 "
    assert lines[1] == "23 15 "