import pytest

from formrender.errors import InvalidSizeFormat
from formrender.renderers import (
    RENDERERS,
    render_checkbox,
    render_file,
    render_hidden,
    render_password,
    render_radio,
    render_reset,
    render_select,
    render_submit,
    render_text,
    render_textarea,
    split_textarea_size,
)
from formrender.schemas.fields import FieldType


def test_every_field_type_has_a_renderer():
    assert set(RENDERERS) == set(FieldType)


def test_text_input_with_size_and_extra_attributes():
    html = render_text("email", "a@b.c", "30", 'onchange="go()"')
    assert html == '\t\t\t<input type="text" name="email" id="email" value="a@b.c" size="30" onchange="go()" />\n'


def test_text_input_without_size_omits_size_attribute():
    html = render_text("email")
    assert 'size="' not in html
    assert html == '\t\t\t<input type="text" name="email" id="email" value="" />\n'


def test_password_and_file_put_a_space_before_size():
    assert ' value="" size="12"' in render_password("pw", "", "12")
    assert ' value="" size="40"' in render_file("upload", "", "40")
    assert 'type="password"' in render_password("pw")
    assert 'type="file"' in render_file("upload")


def test_textarea_maps_size_to_rows_and_cols_and_value_to_content():
    html = render_textarea("bio", "hello", "5,40")
    assert html == '\t\t\t<textarea name="bio" id="bio" rows="5" cols="40">hello</textarea>\n'
    assert 'value="' not in html


def test_textarea_without_size_has_no_dimensions():
    html = render_textarea("bio")
    assert "rows=" not in html
    assert "cols=" not in html


@pytest.mark.parametrize("size", ["5", "5,", ",40", "1,2,3"])
def test_textarea_rejects_malformed_size(size):
    with pytest.raises(InvalidSizeFormat):
        render_textarea("bio", "", size)


def test_split_textarea_size_strips_whitespace():
    assert split_textarea_size(" 4 , 20 ") == ("4", "20")


def test_select_marks_only_the_matching_option():
    html = render_select("color", "r", {"r": "Red", "g": "Green"})
    assert html.startswith('\t\t\t<select name="color" id="color">\n')
    assert '<option value="r" selected="true">Red</option>' in html
    assert '<option value="g">Green</option>' in html
    assert html.index('value="r"') < html.index('value="g"')
    assert html.count("selected") == 1


def test_select_with_no_choices_renders_empty_select():
    html = render_select("color", "r", {})
    assert "<option" not in html
    assert html.endswith("\t\t\t</select>\n")


def test_select_with_duplicate_labels_selects_by_key():
    html = render_select("size", "m2", {"m1": "Medium", "m2": "Medium"})
    assert '<option value="m1">Medium</option>' in html
    assert '<option value="m2" selected="true">Medium</option>' in html


def test_radio_with_duplicate_labels_checks_by_key():
    html = render_radio("size", "m2", {"m1": "Medium", "m2": "Medium"})
    assert html.count("checked") == 1
    assert 'id="size[m1]" value="m1" />' in html
    assert 'id="size[m2]" value="m2" checked="true" />' in html


def test_checkbox_with_duplicate_labels_checks_by_key():
    html = render_checkbox("size", "m1", {"m1": "Medium", "m2": "Medium"})
    assert html.count("checked") == 1
    assert 'name="size[m1]" id="size[m1]" checked="checked" />' in html
    assert 'name="size[m2]" id="size[m2]" />' in html


def test_radio_renders_one_input_and_label_per_choice():
    html = render_radio("plan", "pro", {"free": "Free", "pro": "Pro"}, 'class="r"')
    lines = html.splitlines()
    assert len(lines) == 2
    assert lines[0] == (
        '\t\t\t<input type="radio" name="plan" id="plan[free]" class="r" value="free" />'
        '<label for="plan[free]">Free</label><br />'
    )
    assert 'id="plan[pro]" class="r" value="pro" checked="true" />' in lines[1]


def test_checkbox_uses_array_style_names():
    html = render_checkbox("tags", "b", {"a": "A", "b": "B"})
    assert 'name="tags[a]" id="tags[a]" />' in html
    assert 'name="tags[b]" id="tags[b]" checked="checked" />' in html
    assert html.count("checked") == 1
    assert '<label for="tags[b]">B</label><br />' in html


def test_radio_and_checkbox_with_no_choices_render_nothing():
    assert render_radio("plan", "x", {}) == ""
    assert render_checkbox("tags", "x", None) == ""


def test_hidden_submit_and_reset():
    assert render_hidden("token", "abc") == '\t\t\t<input type="hidden" name="token" id="token" value="abc" />\n'
    assert render_submit("go", "Send", 'class="btn"') == (
        '\t\t\t<input type="submit" name="go" id="go" value="Send" class="btn" />\n'
    )
    assert render_reset("clear", "Clear") == '\t\t\t<input type="reset" name="clear" id="clear" value="Clear" />\n'


def test_values_are_not_escaped():
    html = render_text("q", '"><script>')
    assert 'value=""><script>"' in html
