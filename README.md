# gocss

A small parser for simple stylesheets. It has no dependencies outside the
standard library. It reads rule blocks and returns a mapping from each rule to
its style declarations. It also has a checker for style values.

## Installation

```
pip install .
```

## Parsing a stylesheet

```python
from gocss.parser import unmarshal

css = unmarshal(b"""
.header #title body {
    color: red;
    font-family: 'Zil', serif;
}
body {
    color: blue;
}
""")

css["body"]["color"]        # 'blue'  (the later block overrides earlier styles)
css["body"]["font-family"]  # "'Zil', serif"  (kept from the earlier block)
css[".header"]["color"]     # 'red'
```

`unmarshal` accepts either `bytes` or `str`. Bytes are decoded as UTF-8, and
any invalid bytes are replaced.

Each key of the result is a `Rule`. A `Rule` is a `str` whose `type()` method
returns `"class"` for a name starting with `.`, `"id"` for a name starting
with `#`, and `"tag"` for any other name:

```python
for rule, styles in css.items():
    print(rule, rule.type(), styles)
```

The parser handles blocks as follows:

- Selectors separated by spaces before one block all receive that block's
  styles.
- When a rule appears in more than one block, its styles are merged. Where both
  blocks set the same style, the later block wins.
- A value after `:` may contain spaces. It runs up to the next `;`.

Malformed input raises `CSSSyntaxError`, a subclass of `ValueError`. Its
message starts with `line N:`, and its `line` attribute holds the line number.
It is raised in these cases:

- a block with no rule before it;
- a `;` with no style or no value before it;
- a `}` with no block open.

### Lower-level pieces

- `tokenize(text)` yields `Token` objects, each with a `value` and a `line`.
- `Token.type()` and `token_type(value)` classify a token text as a
  `TokenType`: `BLOCK_START`, `BLOCK_END`, `STYLE_SEPARATOR`,
  `STATEMENT_END`, `SELECTOR` or `VALUE`.
- `parse(tokens)` builds the rule map from any iterable of tokens.

`unmarshal(data)` is the same as `parse(tokenize(text))`.

## Checking style values

```python
from gocss.styles import css_style, StyleError

style = css_style("background-color", {"background-color": "#aabbccdd"})
str(style)    # '#aabbccdd'
style.unit    # UnitType.NONE

css_style("background-color", {"background-color": "bla"})  # raises StyleError
```

`check_color(color)` raises `StyleError` unless the colour is one of these:

- `#` followed by hexadecimal digits, at most nine characters in all;
- one of the common colour names.

`css_style(name, styles)` looks up the handler for `name` in `STYLES_TABLE`
and passes it the value from `styles`. If `name` is missing from `styles`, the
handler gets an empty string. It raises `StyleError("unknown style")` for
names that are not in the table.

`STYLES_TABLE` is a plain dict, so you can replace any entry with your own
function. The function takes the value string and returns a `Style`.

## Limitations

- Only `background-color` has a real checker. Every other style in
  `STYLES_TABLE` uses `unsupported_style`, which always raises
  `StyleError("not implemented")`.
- Comma-separated selector lists are not split into separate rules.
- Comments, at-rules and nested blocks are not understood.
- There is no command-line tool. The package is a library only.

## Running the tests

```
pip install .[test]
pytest
```