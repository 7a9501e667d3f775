"""Interpretador Silli pela linha de comando."""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from errors import SilliError
from interpreter import Interpreter


def run_cli(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Interpretador da linguagem Silli")
    parser.add_argument("program", help="Caminho do programa ou o próprio código com -source")
    parser.add_argument("-debug", "--debug", dest="debug", action="store_true", help="Mostra o programa, os rótulos e as variáveis finais")
    parser.add_argument("-source", "--source", dest="source_mode", action="store_true", help="Trata o argumento como o texto do programa")
    args = parser.parse_args(argv)

    if args.source_mode:
        source_text = args.program
        program_name = "<string>"
    else:
        program_name = args.program
        try:
            with open(program_name, "r", encoding="utf-8") as handle:
                source_text = handle.read()
        except OSError as exc:
            print(f"Erro: não foi possível ler {program_name}: {exc}", file=sys.stderr)
            return 1

    interpreter = Interpreter(verbose=args.debug)
    try:
        program = interpreter.load(source_text)
        if args.debug:
            print()
            print(f"Interpretando o programa: {program_name}")
            print()
        interpreter.run(program)
    except SilliError as error:
        print(error.format(), file=sys.stderr)
        print(file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run_cli())
