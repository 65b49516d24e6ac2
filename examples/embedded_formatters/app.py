"""Embedded formatters -- delegating <style> and expressions.

Registers a small CSS formatter and an expression formatter, plus a
deliberately broken ``js`` formatter to show the fallback policy: the
script keeps its original content and a warning is logged.

Run:
    python app.py
"""

import logging

from sveltefmt import Formatter

logging.basicConfig(level=logging.WARNING, format="%(name)s: %(message)s")


def format_css(source, options):
    """One declaration per line, rules separated by a newline."""
    pad = " " * options.tab_width
    lines = []
    for rule in source.split("}"):
        if "{" not in rule:
            continue
        selector, body = rule.split("{", 1)
        lines.append(f"{selector.strip()} {{")
        for declaration in body.split(";"):
            if not declaration.strip():
                continue
            prop, _, value = declaration.partition(":")
            lines.append(f"{pad}{prop.strip()}: {value.strip()};")
        lines.append("}")
    return "\n".join(lines)


def format_expression(source, options):
    """Collapse whitespace runs."""
    return " ".join(source.split())


def broken_js(source, options):
    raise ValueError("no JavaScript formatter installed")


formatter = Formatter(print_width=80)
formatter.add_formatter("css", format_css)
formatter.add_formatter("expression", format_expression)
formatter.add_formatter("js", broken_js)

SOURCE = """\
<script>
  let count   =   0;
</script>

<button on:click={()   =>   count += 1}>Clicked {count   *   2} times</button>

<style>
  button{color:red;padding:4px}
</style>
"""

output = formatter.format(SOURCE)


def main() -> None:
    print(output, end="")


if __name__ == "__main__":
    main()
