"""Parse errors -- what a broken component reports.

Formatting aborts on the first parse error; nothing partial is printed.
The error carries a searchable code, the ``file:line:col`` location, a
source snippet with a caret and, where one applies, a suggestion.

Colors follow the terminal: set NO_COLOR to disable or FORCE_COLOR to
force them.

Run:
    python app.py
"""

import sveltefmt
from sveltefmt import ParseError
from sveltefmt.terminal import strip_colors

BROKEN = """\
<ul>
  {#each items as item}
    <li>{item.name</li>
  {/each}
</ul>
"""

try:
    sveltefmt.format(BROKEN, filename="List.svelte")
except ParseError as exc:
    error = exc
    report = exc.format_compact()
else:
    raise AssertionError("expected a parse error")

plain_report = strip_colors(report)


def main() -> None:
    print(report)


if __name__ == "__main__":
    main()
