import pytest

from macalerter.showcase import main

ALL_KINDS = [
    "basic", "sound", "actions", "dropdown", "reply", "icon", "content-image",
    "subtitle", "group", "sender", "json", "close-label", "ignore-dnd", "remove",
]


def test_nonexistent_arg_exits_nonzero(capsys):
    assert main(["nonexistent"]) == 1


def test_nonexistent_arg_prints_usage(capsys):
    main(["nonexistent"])
    captured = capsys.readouterr()
    combined = captured.out + captured.err
    assert "basic" in combined
    assert "sound" in combined
    assert "actions" in combined


def test_no_args_prints_usage(capsys):
    code = main([])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.err.startswith("Usage: showcase <type>")


@pytest.mark.parametrize("kind", ALL_KINDS)
def test_usage_lists_every_kind(capsys, kind):
    main(["unknown"])
    err = capsys.readouterr().err
    assert f"  {kind} " in err


def test_usage_goes_to_stderr_only(capsys):
    main(["nonexistent"])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Available notification types:" in captured.err