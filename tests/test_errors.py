"""Tests for error reporting."""

from errors import (
    SilliError,
    SilliRuntimeError,
    SilliSyntaxError,
    DuplicateLabelError,
    DuplicateDeclarationError,
    InvalidLiteralError,
)


def test_format_has_line_text_and_message():
    error = InvalidLiteralError("A variável A deve receber um valor inteiro.", 1, "LET A = FOO")
    assert error.format() == (
        "InvalidLiteral na linha 1\n"
        "  LET A = FOO\n"
        "  A variável A deve receber um valor inteiro."
    )


def test_to_dict():
    error = DuplicateLabelError("O rótulo X já foi definido.", 2, "X: # B")
    assert error.to_dict() == {
        "kind": "DuplicateLabel",
        "line": 2,
        "text": "X: # B",
        "message": "O rótulo X já foi definido.",
    }


def test_hierarchy():
    assert issubclass(DuplicateDeclarationError, SilliRuntimeError)
    assert issubclass(InvalidLiteralError, SilliRuntimeError)
    for cls in (SilliSyntaxError, DuplicateLabelError, SilliRuntimeError):
        assert issubclass(cls, SilliError)
    assert str(SilliSyntaxError("Comando não reconhecido.", 1, "X")) == "Comando não reconhecido."
