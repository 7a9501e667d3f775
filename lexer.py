from dataclasses import dataclass
from enum import Enum, auto

class TokenType(Enum):
    WORD = auto()
    EQUALS = auto()
    EOF = auto()

@dataclass
class Token:
    type: TokenType
    value: any
    column: int

class Lexer:
    """
    Quebra o corpo de um comando em palavras e sinais de '='.
    Uma palavra é qualquer sequência de caracteres sem espaços e sem '='.
    """
    def __init__(self, source):
        self.source = source
        self.pos = 0
        self.column = 1
        self.current_char = self.source[0] if source else None

    def advance(self):
        self.pos += 1
        self.column += 1
        if self.pos < len(self.source):
            self.current_char = self.source[self.pos]
        else:
            self.current_char = None

    def skip_whitespace(self):
        while self.current_char and self.current_char.isspace():
            self.advance()

    def word(self):
        start_pos = self.pos
        while self.current_char and not self.current_char.isspace() and self.current_char != '=':
            self.advance()
        return self.source[start_pos:self.pos]

    def tokenize(self):
        tokens = []

        while self.current_char:
            start_column = self.column

            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            if self.current_char == '=':
                self.advance()
                tokens.append(Token(TokenType.EQUALS, '=', start_column))
                continue

            tokens.append(Token(TokenType.WORD, self.word(), start_column))

        tokens.append(Token(TokenType.EOF, None, self.column))
        return tokens
