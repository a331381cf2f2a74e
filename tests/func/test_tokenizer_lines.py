import pytest  # noqa
from rovsim import LineTokenizer, Deploy, Pit, Move, Left, Right, Report, \
    Direction, Location, CommandSyntaxError, UnknownCommandError


@pytest.fixture
def tokenizer():
    return LineTokenizer()


def test_split(tokenizer):
    assert tokenizer.split("DEPLOY 1,2,NORTH") == ('DEPLOY',
                                                   ['1', '2', 'NORTH'])
    assert tokenizer.split("MOVE") == ('MOVE', [])
    assert tokenizer.split("  PIT \t 3,4  \n") == ('PIT', ['3', '4'])
    assert tokenizer.split("PIT 3 , 4") == ('PIT', ['3 ', ' 4'])
    assert tokenizer.split("") == ('', [])


def test_tokenize_all_commands(tokenizer):
    assert tokenizer.tokenize("DEPLOY 1,2,NORTH") == \
        Deploy(1, 2, Direction.NORTH)
    assert tokenizer.tokenize("PIT 5,5") == Pit(5, 5)
    assert tokenizer.tokenize("MOVE") == Move()
    assert tokenizer.tokenize("LEFT") == Left()
    assert tokenizer.tokenize("RIGHT") == Right()
    assert tokenizer.tokenize("REPORT") == Report()


def test_tokenize_trailing_newline_and_spaces(tokenizer):
    assert tokenizer.tokenize("REPORT\r\n") == Report()
    assert tokenizer.tokenize("  DEPLOY   0,9,WEST \n") == \
        Deploy(0, 9, Direction.WEST)


def test_signed_and_out_of_range_integers_are_well_formed(tokenizer):
    """
    Out of zone coordinates are a matter for the interpreter, not the
    tokenizer.
    """
    command = tokenizer.tokenize("DEPLOY -1,+12,SOUTH")
    assert command.x == -1
    assert command.y == 12
    assert command.direction is Direction.SOUTH


def test_location_is_attached(tokenizer):
    location = Location(3, "PIT 1,2", "commands.rbt")
    command = tokenizer.tokenize("PIT 1,2", location)
    assert command.location is location


@pytest.mark.parametrize("line", [
    "RIHT",
    "deploy 1,2,NORTH",
    "Move",
    "",
    "   ",
    "DEPLOYX 1,2,NORTH",
    "MOVE1",
])
def test_unknown_command(tokenizer, line):
    with pytest.raises(UnknownCommandError):
        tokenizer.tokenize(line)


@pytest.mark.parametrize("line", [
    "DEPLOY",
    "DEPLOY 0,ORTH",
    "DEPLOY 1,2",
    "DEPLOY 1,2,NORTH,4",
    "DEPLOY 1,2,north",
    "DEPLOY 1,2,NORTHWEST",
    "DEPLOY a,2,NORTH",
    "DEPLOY 1.5,2,NORTH",
    "DEPLOY 1,2,",
    "DEPLOY 1,2,NORTH extra",
    "PIT",
    "PIT 1",
    "PIT 1,2,3",
    "PIT x,y",
    "MOVE 1",
    "REPORT now",
    "LEFT 1,2",
    "DEPLOY 1 , 2 , NORTH",
    "DEPLOY 0, 9, WEST",
    "PIT 1 ,2",
])
def test_malformed_arguments(tokenizer, line):
    with pytest.raises(CommandSyntaxError) as e:
        tokenizer.tokenize(line)
    assert not isinstance(e.value, UnknownCommandError)


def test_error_message_and_hint(tokenizer):
    location = Location(7, "DEPLOY 0,ORTH", "commands.rbt")
    with pytest.raises(CommandSyntaxError) as e:
        tokenizer.tokenize("DEPLOY 0,ORTH", location)
    assert e.value.location is location
    assert "expects 3 argument(s) but got 2" in e.value.message
    assert e.value.hint == "DEPLOY INT,INT,DIRECTION"
    assert str(e.value).startswith('commands.rbt:7:"DEPLOY 0,ORTH"')

    with pytest.raises(CommandSyntaxError) as e:
        tokenizer.tokenize("PIT 1,b")
    assert "invalid argument 2 'b' for 'PIT', expected INT" \
        in e.value.message


def test_unknown_command_hint(tokenizer):
    with pytest.raises(UnknownCommandError) as e:
        tokenizer.tokenize("JUMP 1")
    assert e.value.keyword == 'JUMP'
    assert 'DEPLOY' in e.value.hint
    assert 'REPORT' in e.value.hint


def test_ignore_case_keywords():
    tokenizer = LineTokenizer(ignore_case=True)
    assert tokenizer.tokenize("deploy 1,2,NORTH") == \
        Deploy(1, 2, Direction.NORTH)
    assert tokenizer.tokenize("Report") == Report()
    # Directions stay case-sensitive.
    with pytest.raises(CommandSyntaxError):
        tokenizer.tokenize("deploy 1,2,north")


def test_command_str():
    assert str(Deploy(1, 2, Direction.EAST)) == "DEPLOY 1,2,EAST"
    assert str(Pit(3, 4)) == "PIT 3,4"
    assert str(Move()) == "MOVE"
