import pytest

from mmsh import Command, DanglingPipe, MalformedRedirection, Operator, SequentialIds, parse, unparse
from mmsh.command import CommandFragment, OperatorFragment
from mmsh.parser import (
    cmd_from,
    command_args,
    command_name,
    fragments_from,
    input_target,
    io_connect,
    output_target,
    parts_from,
    split_subcommands,
)


def _shape(commands):
    position = {command.id: idx for idx, command in enumerate(commands)}

    def stream(value):
        if value in position:
            return ("cmd", position[value])
        return value

    return [(c.name, c.args, stream(c.input), stream(c.output)) for c in commands]


def test_split_subcommands_keeps_operators():
    assert split_subcommands("foo | bar; baz < fizz.txt") == ["foo", "|", "bar", ";", "baz < fizz.txt"]


def test_split_subcommands_keeps_empty_fragments():
    assert split_subcommands("; a &&") == ["", ";", "a", "&&", ""]
    assert split_subcommands("a && | b") == ["a", "&&", "", "|", "b"]


def test_fragments_are_tagged():
    assert fragments_from("a * b") == [
        CommandFragment("a"),
        OperatorFragment(Operator.GLOB),
        CommandFragment("b"),
    ]


def test_parts_from_separates_redirections():
    assert parts_from("foo bar1 bar2 < baz > fizz") == ["foo", "bar1", "bar2", "<", "baz", ">", "fizz"]
    assert parts_from("cat<in>out") == ["cat", "<", "in", ">", "out"]
    assert parts_from("|") == ["|"]
    assert parts_from("   ") == []


def test_field_extractors():
    parts = ["foo", "bar1", "bar2", "bar3", "<", "baz", ">", "fizz"]
    assert command_name(parts) == "foo"
    assert command_args(parts) == "bar1 bar2 bar3"
    assert input_target(parts) == "baz"
    assert output_target(parts) == "fizz"


def test_args_stop_at_first_redirection():
    assert command_args(["sort", ">", "out", "<", "in"]) == ""
    assert command_args(["grep", "-v", "x", ">", "out"]) == "-v x"


def test_field_extractors_on_empty_parts():
    assert command_name([]) == ""
    assert command_args([]) == ""
    assert input_target([]) is None
    assert output_target(["foo"]) is None


def test_redirection_without_target():
    with pytest.raises(MalformedRedirection) as exc:
        input_target(["foo", "<"])
    assert exc.value.marker == "<"
    with pytest.raises(MalformedRedirection):
        output_target(["foo", ">"])


def test_cmd_from_builds_command():
    command = cmd_from("baz < fizz.txt", SequentialIds())
    assert command == Command(id="cmd-1", name="baz", args="", input="fizz.txt", output=None)
    assert not command.is_operator


def test_cmd_from_operator_fragment():
    command = cmd_from(OperatorFragment(Operator.PIPE), SequentialIds())
    assert command.name == "|"
    assert command.operator is Operator.PIPE
    assert command.args == ""
    assert command.input is None and command.output is None
    assert cmd_from("&&").operator is Operator.AND


def test_cmd_from_empty_fragment():
    command = cmd_from(CommandFragment(""))
    assert command.is_empty
    assert command.args == ""
    assert command.input is None and command.output is None


def test_parse_single_command():
    commands = parse("ls -la /tmp")
    assert len(commands) == 1
    command = commands[0]
    assert command.name == "ls"
    assert command.args == "-la /tmp"
    assert command.output == command.id
    assert command.input is None


def test_parse_single_command_with_input():
    (command,) = parse("sort < names.txt")
    assert command.input == "names.txt"
    assert command.output == command.id


def test_parse_pipe():
    foo, pipe, bar = parse("foo | bar")
    assert [foo.name, pipe.name, bar.name] == ["foo", "|", "bar"]
    assert foo.output == foo.id
    assert pipe.output == pipe.id
    assert pipe.input is None
    assert bar.input == foo.id
    assert bar.output == bar.id


def test_parse_full_redirection():
    (command,) = parse("foo bar1 bar2 bar3 < baz > fizz")
    assert command.name == "foo"
    assert command.args == "bar1 bar2 bar3"
    assert command.input == "baz"
    assert command.output == "fizz"


def test_parse_sequence_and_conjunction_do_not_link():
    commands = parse("a; b && c")
    assert [c.name for c in commands] == ["a", ";", "b", "&&", "c"]
    for command in commands:
        assert command.output == command.id
        assert command.input is None


def test_parse_glob_marker_does_not_link():
    a, glob, b = parse("a * b")
    assert glob.operator is Operator.GLOB
    assert b.input is None


def test_parse_pipe_chain():
    a, _, b, _, c = parse("a | b | c")
    assert b.input == a.id
    assert c.input == b.id


def test_pipe_links_command_id_not_redirected_output():
    a, _, b = parse("a > out.txt | b")
    assert a.output == "out.txt"
    assert b.input == a.id


def test_explicit_input_wins_over_pipe():
    _, _, bar = parse("foo | bar < file.txt")
    assert bar.input == "file.txt"


def test_parse_uses_injected_ids():
    commands = parse("foo | bar", id_generator=SequentialIds("x"))
    assert [c.id for c in commands] == ["x-1", "x-2", "x-3"]
    assert commands[2].input == "x-1"


def test_parse_assigns_unique_ids():
    commands = parse("a | b; c && d * e")
    assert len({c.id for c in commands}) == len(commands)


def test_parse_leading_pipe_is_dangling():
    with pytest.raises(DanglingPipe) as exc:
        parse("| foo")
    assert exc.value.side == "before"


def test_parse_trailing_pipe_is_dangling():
    with pytest.raises(DanglingPipe) as exc:
        parse("foo |")
    assert exc.value.side == "after"


def test_parse_double_pipe_is_dangling():
    with pytest.raises(DanglingPipe):
        parse("foo | | bar")


def test_io_connect_pipe_at_start():
    commands = [
        Command(id="p", name="|", operator=Operator.PIPE),
        Command(id="f", name="foo"),
    ]
    with pytest.raises(DanglingPipe) as exc:
        io_connect(commands)
    assert exc.value.position == 0


def test_io_connect_returns_new_commands():
    original = [Command(id="a", name="a"), Command(id="p", name="|", operator=Operator.PIPE), Command(id="b", name="b")]
    wired = io_connect(original)
    assert original[2].input is None
    assert original[0].output is None
    assert wired[2].input == "a"
    assert [c.id for c in wired] == ["a", "p", "b"]


def test_parse_missing_redirection_target():
    with pytest.raises(MalformedRedirection):
        parse("foo <")
    with pytest.raises(MalformedRedirection):
        parse("foo | bar >")


def test_parse_bare_operator_is_accepted():
    commands = parse(";")
    assert [c.name for c in commands] == ["", ";", ""]
    assert all(c.output == c.id for c in commands)


def test_parse_empty_string():
    (command,) = parse("")
    assert command.is_empty
    assert command.output == command.id


def test_unparse_rebuilds_command_line():
    text = "foo bar < baz > fizz | qux; quux && x"
    assert unparse(parse(text)) == "foo bar < baz > fizz | qux ; quux && x"


def test_unparse_normalizes_whitespace():
    assert unparse(parse("  foo   bar  |baz ")) == "foo bar | baz"


@pytest.mark.parametrize(
    "text",
    [
        "foo | bar",
        "a; b && c",
        "cat < in.txt | sort -r > out.txt",
        "x * y",
        "; a",
    ],
)
def test_parse_unparse_is_idempotent(text):
    first = parse(text)
    second = parse(unparse(first))
    assert _shape(second) == _shape(first)


def test_unparse_keeps_targets_that_look_like_ids():
    commands = parse("foo ; bar < cmd-1 > cmd-3", id_generator=SequentialIds())
    assert commands[2].id == "cmd-3"
    assert unparse(commands) == "foo ; bar < cmd-1 > cmd-3"


def test_wiring_marks_filled_in_streams():
    foo, _, bar = parse("foo > out.txt | bar")
    assert not foo.default_output
    assert bar.piped_input
    assert bar.default_output
