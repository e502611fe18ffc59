"""Split a sentence into words with skip() and match()."""

from parsingstream import Scanner

scanner = Scanner("a fox jumped over\tthe lazy brown dog")

while scanner:
    # `skip` jumps over whitespace
    print(scanner.skip().match(str.isalpha))
