import re

from lexer import Lexer, TokenType
from errors import SilliSyntaxError, DuplicateDeclarationError, InvalidLiteralError

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")

def split_label(raw_line):
    """
    Separa o rótulo opcional do comando. O rótulo é todo o texto antes
    do primeiro ':'; o que vem depois é o corpo do comando.
    """
    if ':' in raw_line:
        label, body = raw_line.split(':', 1)
        return label.strip(), body.strip()
    return None, raw_line.strip()

class Statement:
    """
    Classe base dos comandos Silli. Cada subclasse sabe reconhecer o
    próprio corpo (matches) e executá-lo, devolvendo a próxima linha.

    O estado da execução (variáveis e rótulos) não pertence ao comando:
    ele é recebido em execute().
    """
    kind = None

    def __init__(self, line_number, raw_line, label, body):
        self.line_number = line_number
        self.raw_line = raw_line
        self.label = label
        self.body = body

    @classmethod
    def matches(cls, body):
        raise NotImplementedError

    def execute(self, state):
        raise NotImplementedError

    def next_line(self):
        return self.line_number + 1

    def error(self, error_class, message):
        raise error_class(message, self.line_number, self.raw_line)

    def __str__(self):
        return f"{self.line_number}\t| {self.raw_line}"

    def __repr__(self):
        return f"{type(self).__name__}(line={self.line_number}, body={self.body!r})"

class Blank(Statement):
    kind = "BLANK"

    @classmethod
    def matches(cls, body):
        return body == ""

    def execute(self, state):
        return self.next_line()

class Comment(Statement):
    kind = "COMMENT"

    @classmethod
    def matches(cls, body):
        return body.startswith('#')

    def execute(self, state):
        return self.next_line()

class Declaration(Statement):
    """LET <nome> = <inteiro>: declara uma variável uma única vez."""
    kind = "DECLARATION"
    keyword = "LET"

    def __init__(self, line_number, raw_line, label, body):
        super().__init__(line_number, raw_line, label, body)
        self.tokens = Lexer(body).tokenize()
        self.pos = 0
        self.var, self.value = self._parse()

    @classmethod
    def matches(cls, body):
        words = body.split()
        return bool(words) and words[0] == cls.keyword

    def _expect(self, token_type, description):
        token = self.tokens[self.pos]
        if token.type != token_type:
            found = token.value if token.value is not None else "fim da linha"
            self.error(
                SilliSyntaxError,
                f"Coluna {token.column} - Esperado {description}, encontrado '{found}'"
            )
        self.pos += 1
        return token

    def _parse(self):
        self._expect(TokenType.WORD, self.keyword)
        name = self._expect(TokenType.WORD, "nome de variável")
        if not name.value.isidentifier():
            self.error(
                SilliSyntaxError,
                f"Coluna {name.column} - Nome de variável inválido: '{name.value}'"
            )
        self._expect(TokenType.EQUALS, "'='")
        value = self._expect(TokenType.WORD, "valor")
        self._expect(TokenType.EOF, "fim da linha")
        return name.value, value.value

    def execute(self, state):
        # Uma variável só pode ser declarada uma vez
        if self.var in state.variables:
            self.error(DuplicateDeclarationError, f"A variável {self.var} já foi declarada.")

        if not INTEGER_LITERAL.fullmatch(self.value):
            self.error(InvalidLiteralError, f"A variável {self.var} deve receber um valor inteiro.")
        value = int(self.value)
        if not INT_MIN <= value <= INT_MAX:
            self.error(
                InvalidLiteralError,
                f"O valor {self.value} está fora do intervalo [{INT_MIN}, {INT_MAX}]."
            )

        state.variables[self.var] = value
        return self.next_line()
