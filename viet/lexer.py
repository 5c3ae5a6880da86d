"""Tokenizer for the Viet language.

The lexer makes one forward pass over the source with a single character
of lookahead and produces ``lark.Token`` objects tagged with the token
kinds below. Newlines are significant (they separate statements) and are
emitted as ``NEWLINE`` tokens; other whitespace and ``//`` comments are
skipped. The token list always ends with an ``EOF`` token.
"""

from __future__ import annotations

import unicodedata
from typing import Dict, List, Optional

from lark import Token

from .errors import VietSyntaxError

NUMBER = 'NUMBER'
STRING = 'STRING'
BOOLEAN = 'BOOLEAN'
IDENTIFIER = 'IDENTIFIER'
NEWLINE = 'NEWLINE'
EOF = 'EOF'

ASSIGN = 'ASSIGN'
IF = 'IF'
ELSE = 'ELSE'
LOOP = 'LOOP'
FUNCTION = 'FUNCTION'
RETURN = 'RETURN'
PRINT = 'PRINT'

KEYWORDS: Dict[str, str] = {
    'gán': ASSIGN,
    'nếu': IF,
    'khác': ELSE,
    'lặp': LOOP,
    'hàm': FUNCTION,
    'trả_về': RETURN,
    'in': PRINT,
    'đúng': BOOLEAN,
    'sai': BOOLEAN,
}

# Operators and delimiters are tagged with their own text
SINGLE_CHAR_TOKENS = {'+', '-', '*', '/', '=', '(', ')', '{', '}'}
TWO_CHAR_TOKENS = {'==', '!='}

ESCAPES = {
    'n': '\n',
    't': '\t',
    '\\': '\\',
    '"': '"',
}


def is_identifier_start(c: str) -> bool:
    return c.isalpha() or c == '_'


def is_identifier_part(c: str) -> bool:
    return c.isalnum() or c == '_'


class Lexer:
    """Scans one source string. Create a new instance per string."""

    def __init__(self, source: str):
        # Vietnamese letters may arrive decomposed; compose them so that
        # each letter is a single identifier character.
        self.source = unicodedata.normalize('NFC', source)
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def peek(self, offset: int = 0) -> Optional[str]:
        index = self.pos + offset
        if index < len(self.source):
            return self.source[index]
        return None

    def advance(self) -> str:
        c = self.source[self.pos]
        self.pos += 1
        if c == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return c

    def add(self, type_: str, value: str, start: int, line: int, column: int):
        self.tokens.append(Token(type_, value, start, line, column))

    def error(self, message: str, line: int, column: int) -> VietSyntaxError:
        return VietSyntaxError(message, line, column)

    def tokenize(self) -> List[Token]:
        while self.peek() is not None:
            c = self.peek()
            if c == '\n':
                self.add(NEWLINE, '\n', self.pos, self.line, self.column)
                self.advance()
                continue
            if c.isspace():
                self.advance()
                continue
            if c == '/' and self.peek(1) == '/':
                self.skip_comment()
                continue
            if c.isdigit():
                self.read_number()
                continue
            if c == '"':
                self.read_string()
                continue
            if is_identifier_start(c):
                self.read_identifier()
                continue
            self.read_operator()
        self.add(EOF, '', self.pos, self.line, self.column)
        return self.tokens

    def skip_comment(self):
        while self.peek() is not None and self.peek() != '\n':
            self.advance()

    def read_number(self):
        start, line, column = self.pos, self.line, self.column
        while self.peek() is not None and (self.peek().isdigit() or self.peek() == '.'):
            self.advance()
        text = self.source[start:self.pos]
        try:
            float(text)
        except ValueError:
            raise self.error(f"invalid number literal {text!r}", line, column)
        self.add(NUMBER, text, start, line, column)

    def read_string(self):
        start, line, column = self.pos, self.line, self.column
        self.advance()  # opening quote
        chars: List[str] = []
        while True:
            c = self.peek()
            if c is None:
                raise self.error('unterminated string', line, column)
            if c == '"':
                self.advance()
                break
            if c == '\\':
                esc_line, esc_column = self.line, self.column
                self.advance()
                code = self.peek()
                if code is None:
                    raise self.error('unterminated string', line, column)
                if code not in ESCAPES:
                    raise self.error(f"invalid escape sequence '\\{code}'", esc_line, esc_column)
                chars.append(ESCAPES[code])
                self.advance()
                continue
            chars.append(self.advance())
        self.add(STRING, ''.join(chars), start, line, column)

    def read_identifier(self):
        start, line, column = self.pos, self.line, self.column
        while self.peek() is not None and is_identifier_part(self.peek()):
            self.advance()
        text = self.source[start:self.pos]
        self.add(KEYWORDS.get(text, IDENTIFIER), text, start, line, column)

    def read_operator(self):
        start, line, column = self.pos, self.line, self.column
        c = self.peek()
        pair = c + (self.peek(1) or '')
        if pair in TWO_CHAR_TOKENS:
            self.advance()
            self.advance()
            self.add(pair, pair, start, line, column)
            return
        if c == '!':
            raise self.error("unexpected character '!' (did you mean '!=')", line, column)
        if c in SINGLE_CHAR_TOKENS:
            self.advance()
            self.add(c, c, start, line, column)
            return
        raise self.error(f"unexpected character {c!r}", line, column)


def tokenize(source: str) -> List[Token]:
    """Convert Viet source code into a list of tokens ending with EOF."""
    return Lexer(source).tokenize()
