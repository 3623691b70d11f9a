import pytest

from matugen.engine import Engine, Syntax, TemplateError


def make_engine():
    engine = Engine()
    engine.add_filter("shout", lambda v: v.upper() + "!")
    engine.add_filter("join_with", lambda v, sep, tail: sep.join(v) + tail)
    engine.add_filter("boom", lambda v: 1 / 0)
    return engine


def test_nested_path():
    out = make_engine().compile("name: {{ user.name }}").render({"user": {"name": "ada"}})
    assert out == "name: ada"


def test_list_index():
    assert make_engine().compile("{{ items.1 }}").render({"items": ["a", "b"]}) == "b"


def test_filter_without_args():
    assert make_engine().compile("{{ word | shout }}").render({"word": "hi"}) == "HI!"


def test_filter_with_args():
    out = make_engine().compile('{{ xs | join_with: "-", "." }}').render({"xs": ["a", "b"]})
    assert out == "a-b."


def test_filter_arg_from_path():
    out = make_engine().compile("{{ xs | join_with: sep, sep }}").render(
        {"xs": ["a", "b"], "sep": "+"}
    )
    assert out == "a+b+"


def test_literals_render():
    assert make_engine().compile("{{ true }} {{ 3 }} {{ 2.5 }}").render({}) == "true 3 2.5"


def test_none_renders_empty():
    assert make_engine().compile("[{{ v }}]").render({"v": None}) == "[]"


@pytest.mark.parametrize(
    "data,expected",
    [({"a": True, "b": False}, "A"), ({"a": False, "b": True}, "B"), ({"a": False, "b": False}, "C")],
)
def test_if_chain(data, expected):
    source = "<* if a *>A<* else if b *>B<* else *>C<* endif *>"
    assert make_engine().compile(source).render(data) == expected


def test_not_condition():
    template = make_engine().compile("<* if not flag *>off<* endif *>")
    assert template.render({"flag": False}) == "off"
    assert template.render({"flag": True}) == ""


def test_for_list_with_loop_index():
    source = "<* for x in xs *>{{ loop.index }}={{ x }};<* endfor *>"
    assert make_engine().compile(source).render({"xs": ["a", "b"]}) == "0=a;1=b;"


def test_for_map():
    source = "<* for k, v in m *>{{ k }}:{{ v }} <* endfor *>"
    assert make_engine().compile(source).render({"m": {"a": 1, "b": 2}}) == "a:1 b:2 "


def test_with_block():
    source = "<* with user.name as n *>{{ n }}<* endwith *>"
    assert make_engine().compile(source).render({"user": {"name": "ada"}}) == "ada"


def test_whitespace_trim():
    assert make_engine().compile("x  {{- v -}}  y").render({"v": 1}) == "x1y"


def test_custom_syntax():
    engine = Engine(Syntax(expr_start="[[", expr_end="]]", block_start="[%", block_end="%]"))
    out = engine.compile("[% if on %][[ v ]][% endif %] {{ v }}").render({"on": True, "v": "z"})
    assert out == "z {{ v }}"


def test_stored_template_and_include():
    engine = make_engine()
    engine.add_template("inner", "<{{ v }}>")
    engine.add_template("outer", 'a<* include "inner" *>b')
    assert engine.render("outer", {"v": "x"}) == "a<x>b"


@pytest.mark.parametrize(
    "source,data",
    [
        ("{{ v | nope }}", {"v": "a"}),
        ("{{ missing }}", {}),
        ("{{ m.missing }}", {"m": {}}),
        ("{{ xs }}", {"xs": [1]}),
        ("{{ v | boom }}", {"v": "a"}),
        ("{{ xs.5 }}", {"xs": [1]}),
    ],
)
def test_render_errors(source, data):
    with pytest.raises(TemplateError):
        make_engine().compile(source).render(data)


@pytest.mark.parametrize(
    "source",
    ["<* if x *>open", "<* endif *>", "{{ x", "{{ x ? y }}", "<* for in *>x<* endfor *>"],
)
def test_compile_errors(source):
    with pytest.raises(TemplateError):
        make_engine().compile(source)


def test_unknown_template():
    with pytest.raises(TemplateError):
        make_engine().render("absent", {})