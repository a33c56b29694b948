import pytest

from amsynth.layout import (
    Control,
    LayoutDescription,
    Resource,
    parse_ini,
    read_ini_file,
)

SAMPLE = """# skin description
[layout]
background=background.png
resources=knob_resource

; a knob strip
[knob_resource]
file=knob.png
width=50
height=40
frames=49

[amp_attack]
param_name=amp_attack
type=knob
resource=knob_resource
pos_x=10
pos_y=20
"""


def test_parse_ini_sections_and_values():
    sections = parse_ini(SAMPLE)
    assert sections["layout"]["background"] == "background.png"
    assert sections["knob_resource"]["frames"] == "49"
    assert sections["amp_attack"]["type"] == "knob"
    assert set(sections) == {"layout", "knob_resource", "amp_attack"}


def test_parse_ini_skips_comments_and_blank_lines():
    sections = parse_ini("# a=b\n; c=d\n\n[s]\nk=v\n")
    assert sections == {"s": {"k": "v"}}


def test_parse_ini_colon_separator_and_raw_keys():
    sections = parse_ini("[s]\nkey:value\nspaced = x\n")
    assert sections["s"]["key"] == "value"
    assert sections["s"]["spaced "] == " x"


def test_parse_ini_value_keeps_later_separators():
    sections = parse_ini("[s]\nurl=a=b:c\n")
    assert sections["s"]["url"] == "a=b:c"


def test_parse_ini_entries_before_section_and_bad_header():
    sections = parse_ini("top=1\n[broken\nnext=2\n")
    assert sections[""]["top"] == "1"
    assert sections[""]["next"] == "2"


def test_from_sections_builds_controls():
    layout = LayoutDescription.from_sections(parse_ini(SAMPLE))
    assert layout.background == "background.png"
    resource = Resource(file="knob.png", width=50, height=40, frames=49)
    assert layout.controls == {
        "amp_attack": Control(type="knob", x=10, y=20, resource=resource)
    }


def test_from_file_reads_layout(tmp_path):
    path = tmp_path / "layout.ini"
    path.write_text(SAMPLE, encoding="utf-8")
    assert read_ini_file(path) == parse_ini(SAMPLE)
    layout = LayoutDescription.from_file(path)
    assert layout.controls["amp_attack"].resource.file == "knob.png"


def test_missing_file_gives_empty_layout(tmp_path):
    missing = tmp_path / "nope.ini"
    assert read_ini_file(missing) == {}
    layout = LayoutDescription.from_file(missing)
    assert layout.background == ""
    assert layout.controls == {}


def test_unknown_resource_raises():
    sections = parse_ini(SAMPLE.replace("resource=knob_resource", "resource=missing"))
    with pytest.raises(KeyError):
        LayoutDescription.from_sections(sections)


def test_unknown_resource_in_file_keeps_background(tmp_path):
    path = tmp_path / "layout.ini"
    path.write_text(SAMPLE.replace("resource=knob_resource", "resource=missing"))
    layout = LayoutDescription.from_file(path)
    assert layout.background == "background.png"
    assert layout.controls == {}


def test_missing_layout_section_raises():
    with pytest.raises(KeyError):
        LayoutDescription.from_sections({"x": {"file": "a.png"}})


def test_bad_number_raises():
    sections = parse_ini(SAMPLE.replace("width=50", "width=wide"))
    with pytest.raises(ValueError):
        LayoutDescription.from_sections(sections)


def test_number_with_trailing_text_reads_leading_digits():
    sections = parse_ini(SAMPLE.replace("pos_x=10", "pos_x=10px"))
    layout = LayoutDescription.from_sections(sections)
    assert layout.controls["amp_attack"].x == 10