import pytest

from gocss.parser import (
    CSSSyntaxError,
    Rule,
    Token,
    TokenType,
    parse,
    token_type,
    tokenize,
    unmarshal,
)


def test_good_css():
    css = unmarshal(b"rule {\n\t\tstyle1: value1;\n\t\tstyle2: value2;\n}")
    assert css["rule"] == {"style1": "value1", "style2": "value2"}


def test_missing_rule():
    with pytest.raises(CSSSyntaxError, match="line 1: block is missing rule identifier"):
        unmarshal(b"{\n\t\tstyle1: value1;\n}")


def test_style_without_value():
    with pytest.raises(CSSSyntaxError, match="expected style before semicolon") as info:
        unmarshal(b"rule {\n\t\tstyle1: value1;\n\t\tstyle2:;\n}")
    assert info.value.line == 3


def test_block_ends_without_beginning():
    with pytest.raises(CSSSyntaxError, match="rule block ends without a beginning"):
        unmarshal(b"}\nrule {\n\t\tstyle1: value1;\n\t\tstyle2:;\n}")


def test_multi_rules():
    css = unmarshal(
        "rule1 {\n\t\tstyle1: value1;\n\t\tstyle2: value2;\n}\n"
        "rule2 {\n\tstyle3: value3;\n}"
    )
    assert len(css) == 2
    assert len(css["rule1"]) == 2
    assert len(css["rule2"]) == 1


def test_property_with_space():
    css = unmarshal("body {\n\t\tfont-family: 'Zil', serif;\n}")
    assert css["body"]["font-family"] == "'Zil', serif"


def test_merged_rules():
    css = unmarshal(
        "rule1 {\n\t\tstyle1: value1;\n\t\tstyle2: value2;\n}\n"
        "rule1 {\n\tstyle1: value3;\n}"
    )
    assert len(css) == 1
    assert css["rule1"] == {"style1": "value3", "style2": "value2"}


def test_real_world_css():
    css = unmarshal(
        'body {\n    background-image: url("gradient_bg.png");\n'
        "    background-repeat: repeat-x;\n}"
    )
    assert css["body"] == {
        "background-image": 'url("gradient_bg.png")',
        "background-repeat": "repeat-x",
    }


def test_selectors():
    css = unmarshal(
        ".rule {\n\t\tstyle1: value1;\n\t\tstyle2: value2;\n}\n"
        "#rule1 sad asd {\n\tstyle3: value3;\n\tstyle4: value4;\n}"
    )
    assert ".rule" in css
    assert "#rule1" in css
    assert css["#rule1"] == {"style3": "value3", "style4": "value4"}


def test_selector_group():
    css = unmarshal(".rule1 #rule2 rule3 {\n\t\tstyle1: value1;\n\t\tstyle2: value2;\n}")
    expected = {"style1": "value1", "style2": "value2"}
    assert css[".rule1"] == expected
    assert css["#rule2"] == expected
    assert css["rule3"] == expected


def test_group_merges_previous_styles_into_all_members():
    css = unmarshal("a { x: 1; }\na b { y: 2; }")
    assert css["a"] == {"x": "1", "y": "2"}
    assert css["b"] == {"x": "1", "y": "2"}


def test_many_concatenated_blocks():
    text = "".join(f"block{i} {{\n\tstyle{i}: value{i};\n}}" for i in range(100))
    css = unmarshal(text.encode())
    assert list(css) == ["block0"]
    assert len(css["block0"]) == 100
    assert css["block0"]["style99"] == "value99"


def test_keys_are_rules():
    css = unmarshal("#main { color: red; }")
    (key,) = css
    assert isinstance(key, Rule)
    assert key.type() == "id"


def test_empty_input():
    assert unmarshal(b"") == {}


@pytest.mark.parametrize(
    ("name", "expected"),
    [(".x", "class"), ("#x", "id"), ("x", "tag")],
)
def test_rule_type(name, expected):
    assert Rule(name).type() == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("{", TokenType.BLOCK_START),
        ("}", TokenType.BLOCK_END),
        (":", TokenType.STYLE_SEPARATOR),
        (";", TokenType.STATEMENT_END),
        (".", TokenType.SELECTOR),
        ("#", TokenType.SELECTOR),
        ("body", TokenType.VALUE),
    ],
)
def test_token_type(value, expected):
    assert token_type(value) is expected
    assert Token(value, 1).type() is expected


def test_token_type_names():
    assert str(token_type(":")) == "STYLE_SEPARATOR"
    assert str(token_type("{")) == "BLOCK_START"
    assert str(Token("body", 1).type()) == "VALUE"
    assert str(TokenType.RULE_NAME) == str(token_type("body"))
    assert str(TokenType.FIRST) == str(token_type("x"))


def test_tokenize_values_and_lines():
    tokens = list(tokenize("a {\n b: c d;\n}"))
    assert [t.value for t in tokens] == ["a", "{", "b", ":", "c d", ";", "}"]
    assert [t.line for t in tokens] == [1, 1, 2, 2, 2, 2, 3]


def test_tokenize_skips_leading_comment():
    tokens = [t.value for t in tokenize("/* note */ a { b: c; }")]
    assert tokens == ["a", "{", "b", ":", "c", ";", "}"]


def test_tokenize_selector_split():
    tokens = [t.value for t in tokenize(".x #y z {")]
    assert tokens == [".", "x", "#", "y", "z", "{"]


def test_parse_accepts_token_list():
    tokens = [Token("p", 1), Token("{", 1), Token("m", 1), Token(":", 1),
              Token("0", 1), Token(";", 1), Token("}", 1)]
    assert parse(tokens) == {"p": {"m": "0"}}


def test_semicolon_without_style_raises():
    with pytest.raises(CSSSyntaxError) as info:
        unmarshal("a {\n;\n}")
    assert info.value.line == 2
    assert isinstance(info.value, ValueError)