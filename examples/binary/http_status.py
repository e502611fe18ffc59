"""Scan raw bytes: elements are ints and no line tracking happens."""

from parsingstream import Scanner

SPACE = ord(" ")

scanner = Scanner(b"HTTP/1.1 404 Not Found\r\n")
version = scanner.match(lambda b: b != SPACE)
status = scanner.skip(lambda b: b == SPACE).enforce_match(lambda b: 0x30 <= b <= 0x39)
reason = scanner.skip(lambda b: b == SPACE).match_until(lambda b: b == 0x0D)

print(version, int(status), reason.decode())
