"""Hello World -- the smallest sveltefmt program.

Formats a component whose regions are out of order and whose markup is
crammed onto one line.

Run:
    python app.py
"""

import sveltefmt

SOURCE = """\
<style>p { color: red; }</style>
<div><span>Hello {name}!</span></div>
<script>let name = "world";</script>
"""

output = sveltefmt.format(SOURCE)


def main() -> None:
    print(output, end="")


if __name__ == "__main__":
    main()
