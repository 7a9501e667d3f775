class SilliError(Exception):
    """Erro fatal de um programa Silli, sempre ligado a uma linha do código."""
    kind = "Error"

    def __init__(self, message, line_number=None, raw_line=None):
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.raw_line = raw_line

    def format(self):
        return (
            f"{self.kind} na linha {self.line_number}\n"
            f"  {self.raw_line}\n"
            f"  {self.message}"
        )

    def to_dict(self):
        return {
            "kind": self.kind,
            "line": self.line_number,
            "text": self.raw_line,
            "message": self.message,
        }

class SilliSyntaxError(SilliError):
    kind = "SyntaxError"

class DuplicateLabelError(SilliError):
    kind = "DuplicateLabel"

class SilliRuntimeError(SilliError):
    kind = "RuntimeError"

class DuplicateDeclarationError(SilliRuntimeError):
    kind = "DuplicateDeclaration"

class InvalidLiteralError(SilliRuntimeError):
    kind = "InvalidLiteral"
