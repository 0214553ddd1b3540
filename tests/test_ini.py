import pytest

from sckit.ini import (
    IniAbortError,
    IniItem,
    IniParseError,
    iter_items,
    parse,
    parse_file,
    parse_string,
)


def _collect(text):
    items = []
    count = parse_string(text, items.append)
    return count, items


def _counting_values(items, section="section", key="key"):
    def on_item(item):
        assert item.section == section
        assert item.key == key
        assert item.value == f"value{len(items)}"
        items.append(item)

    return on_item


EXAMPLE_INI = (
    "# My configuration"
    "[Network] \n"
    "hostname = github.com \n"
    "port = 443 \n"
    "protocol = https \n"
    "repo = any"
)


def test_example_string():
    count, items = _collect(EXAMPLE_INI)
    assert count == 4
    assert items == [
        IniItem(2, "", "hostname", "github.com"),
        IniItem(3, "", "port", "443"),
        IniItem(4, "", "protocol", "https"),
        IniItem(5, "", "repo", "any"),
    ]


def test_example_file(tmp_path):
    path = tmp_path / "my_config.ini"
    path.write_text(EXAMPLE_INI)
    items = []
    assert parse_file(path, items.append) == 4
    assert [(i.key, i.value) for i in items] == [
        ("hostname", "github.com"),
        ("port", "443"),
        ("protocol", "https"),
        ("repo", "any"),
    ]


def test_unclosed_section():
    with pytest.raises(IniParseError) as info:
        _collect("#Sample \n[section \n")
    assert info.value.line == 2


def test_equals_and_colon():
    count, items = _collect("#Sample \n[section] \nkey = value \nkey : value ")
    assert count == 2
    assert all((i.section, i.key, i.value) == ("section", "key", "value") for i in items)
    assert [i.line for i in items] == [3, 4]


def test_no_section():
    count, items = _collect(" ;Sample \nkey = value \nkey : value ")
    assert count == 2
    assert all((i.section, i.key, i.value) == ("", "key", "value") for i in items)


def test_continuation_lines():
    ini = " ;Sample \n [section] \nkey = value0 \n      value1 \n      value2 "
    items = []
    assert parse_string(ini, _counting_values(items)) == 3
    assert len(items) == 3
    assert [i.line for i in items] == [3, 4, 5]


def test_none_string():
    assert parse_string(None, lambda item: pytest.fail("no items expected")) == 0


def test_unindented_value_is_error():
    items = []
    ini = " ;Sample \n [section] \nkey = value0 \nvalue1 \nvalue2 "
    with pytest.raises(IniParseError) as info:
        parse_string(ini, _counting_values(items))
    assert info.value.line == 4
    assert len(items) == 1

    items = []
    ini2 = " ;Sample \n [section] \nkey = value0 \n value1 \nvalue2 "
    with pytest.raises(IniParseError) as info:
        parse_string(ini2, _counting_values(items))
    assert info.value.line == 5
    assert len(items) == 2


def test_callback_abort_first_item():
    ini = " ;Sample \n [section] \nkey = value0 \n      value1 \n      value2 "
    with pytest.raises(IniAbortError) as info:
        parse_string(ini, lambda item: -1)
    assert info.value.line == 3
    assert info.value.result == -1


def test_callback_abort_second_item():
    ini = " ;Sample \n [section] \nkey = value0 \n      value1 \n      value2 "
    seen = []

    def on_item(item):
        if len(seen) == 1:
            return -1
        seen.append(item.value)
        return 0

    with pytest.raises(IniAbortError) as info:
        parse_string(ini, on_item)
    assert info.value.line == 4
    assert seen == ["value0"]


@pytest.mark.parametrize(
    "ini",
    [
        " ;Sample \n [section] \nkey = value0 #;comment\n      value1 \n      value2 ",
        " ;Sample \n [section] \nkey = value0 ;comment\n"
        "      value1 #comment\n      value2 ;#comment\n",
    ],
)
def test_file_with_comments(tmp_path, ini):
    path = tmp_path / "config.ini"
    path.write_bytes(ini.encode())
    items = []
    assert parse_file(path, _counting_values(items)) == 3
    assert [i.value for i in items] == ["value0", "value1", "value2"]


INI3 = " ;Sample \n [section] \nkey = value0 \n      value1 \n      value2 \n"


def test_file_with_bom(tmp_path):
    path = tmp_path / "config.ini"
    path.write_bytes(b"\xef\xbb\xbf" + INI3.encode())
    items = []
    assert parse_file(path, _counting_values(items)) == 3


@pytest.mark.parametrize(
    "content",
    [
        b"\xe3\xbb",
        b"\xe3\xbb\xbf" + INI3.encode(),
        b"\xef\xb3\xbf" + INI3.encode(),
        b"\xef\xbb\xb3" + INI3.encode(),
    ],
)
def test_file_with_bad_bom(tmp_path, content):
    path = tmp_path / "config.ini"
    path.write_bytes(content)
    with pytest.raises(IniParseError) as info:
        parse_file(path, lambda item: None)
    assert info.value.line == 1


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "config.ini", lambda item: None)


def test_brackets_and_semicolons_in_names():
    ini = "#Sample \n[section[test]] \nkey;; = value;; ;comment \nkey;; : value;; #comment "
    count, items = _collect(ini)
    assert count == 2
    assert all(
        (i.section, i.key, i.value) == ("section[test", "key;;", "value;;") for i in items
    )


def test_section_without_open_bracket():
    ini = "#Sample \nsection[test]] \nkey = value;; ;comment \nkey : value# #comment "
    with pytest.raises(IniParseError) as info:
        _collect(ini)
    assert info.value.line == 2


def test_comment_only_values():
    ini = (
        "#Sample \n[section] \n#comment1 \n;comment2 \n   #comment3 \n"
        "  ;comment44 \nkey#  =  ;comment \nkey#  :  #comment "
    )
    count, items = _collect(ini)
    assert count == 2
    assert all((i.section, i.key, i.value) == ("section", "key#", "") for i in items)


def test_empty_keys():
    ini = (
        "#Sample \n#[section] \n#comment1 \n;comment2 \n   #comment3 \n"
        "  ;comment44 \n  =  ;comment \n  :  #comment "
    )
    count, items = _collect(ini)
    assert count == 2
    assert all((i.section, i.key, i.value) == ("", "", "") for i in items)


def test_blank_line_inside_continuation():
    ini = " ;Sample \n [section] \nkey = value0 \n             \n      value1 "
    items = []
    assert parse_string(ini, _counting_values(items)) == 2


def test_callback_abort_returns_error():
    ini = "#Sample \n[section] \nkey = value \nkey : value "
    with pytest.raises(IniAbortError) as info:
        parse_string(ini, lambda item: -1)
    assert info.value.line == 3


def test_file_callback_abort(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text(" ;Sample \n [section] \nkey = value0 #;comment\n      value1 \n")
    with pytest.raises(IniAbortError) as info:
        parse_file(path, lambda item: -1)
    assert info.value.line == 3


@pytest.mark.parametrize(
    "text, expected",
    [
        ("key#  =  ;comment \n", 1),
        ("key#  =  ;comment \n\n", 1),
        ("key#  =  ;comment \nx=3\n", 2),
        ("\n\0", 0),
    ],
)
def test_trailing_newlines(text, expected):
    count, _ = _collect(text)
    assert count == expected


def test_long_line_is_truncated():
    _, items = _collect("k = " + "v" * 2000)
    assert items[0].value == "v" * 1019


def test_long_section_name_is_truncated():
    _, items = _collect("[" + "s" * 300 + "]\na = b")
    assert items[0].section == "s" * 255


def test_iter_items_generator():
    items = list(iter_items(["[s]", "a = 1", "  2", "b: 3"]))
    assert items == [
        IniItem(2, "s", "a", "1"),
        IniItem(3, "s", "a", "2"),
        IniItem(4, "s", "b", "3"),
    ]


def test_parse_accepts_any_iterable():
    seen = []
    assert parse(iter(["x=1", "y=2"]), lambda item: seen.append(item.key)) == 2
    assert seen == ["x", "y"]