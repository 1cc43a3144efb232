"""Lex a small sc program and print every token."""

from sclex import lex

SOURCE = """\
var n int
n = 27
for n != 1 {
    if n / 2 * 2 == n { n = n / 2 } else { n = 3 * n + 1 }
    print(n)
}
"""

for token in lex("collatz.sc", SOURCE):
    print(repr(token))
