import pytest

from stormurl.exception import MalformedInputError
from stormurl.flags import MergeFlags, MergeOptions


@pytest.mark.flags
def test_flag_values() -> None:
    assert MergeFlags.REPLACE == 0
    assert MergeFlags.STRIP_AUTH == MergeFlags.STRIP_USER | MergeFlags.STRIP_PASS
    assert MergeFlags.STRIP_ALL == 492


@pytest.mark.flags
def test_no_flags_is_plain_replacement() -> None:
    assert MergeOptions.from_flags(MergeFlags.REPLACE) == MergeOptions()
    assert MergeOptions.from_flags(0) == MergeOptions()


@pytest.mark.flags
def test_strip_all() -> None:
    _options = MergeOptions.from_flags(MergeFlags.STRIP_ALL)
    assert all(
        [
            _options.strip_user,
            _options.strip_pass,
            _options.strip_port,
            _options.strip_path,
            _options.strip_query,
            _options.strip_fragment,
        ]
    )
    assert not _options.join_path and not _options.join_query


@pytest.mark.flags
@pytest.mark.parametrize(
    "flags",
    [
        MergeFlags.JOIN_PATH | MergeFlags.JOIN_QUERY,
        MergeFlags.STRIP_AUTH | MergeFlags.JOIN_PATH,
        MergeFlags.STRIP_PORT | MergeFlags.STRIP_QUERY | MergeFlags.STRIP_FRAGMENT,
        MergeFlags.STRIP_ALL,
        MergeFlags.REPLACE,
    ],
)
def test_flags_round_trip(flags: MergeFlags) -> None:
    assert MergeOptions.from_flags(flags).to_flags() == flags
    assert MergeOptions.from_flags(int(flags)).to_flags() == flags


@pytest.mark.flags
def test_options_passed_through() -> None:
    _options = MergeOptions(join_query=True)
    assert MergeOptions.from_flags(_options) is _options


@pytest.mark.flags
@pytest.mark.parametrize("flags", (1024, 16, -1, "1", True), ids=str)
def test_invalid_flags(flags) -> None:
    with pytest.raises(MalformedInputError):
        MergeOptions.from_flags(flags)
