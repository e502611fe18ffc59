"""Lex text into tokens, then parse the token stream with a second Scanner."""

from parsingstream import MatchError, Scanner
from parsingstream.predicates import is_digit, one_of

source = "12 + 30 - 2"

lexer = Scanner(source)
tokens = []
while lexer.skip():
    number = lexer.match(is_digit)
    if number:
        tokens.append(("num", int(number)))
    else:
        tokens.append(("op", lexer.enforce_step(one_of("+-"))))

parser = Scanner(tokens)
total = parser.enforce_step(lambda t: t[0] == "num")[1]
while parser:
    _, op = parser.enforce_step(lambda t: t[0] == "op")
    _, value = parser.enforce_step(lambda t: t[0] == "num")
    total = total + value if op == "+" else total - value

print(source, "=", total)

bad = Scanner("12 * 3", source_file="<input>")
try:
    bad.match(is_digit)
    bad.skip().enforce_step(one_of("+-"))
except MatchError as err:
    print("error:", err)  # <input>:1:4 Match failed on '*'.
