from registry import default_registry, NO_MATCH
from statements import Comment
from errors import SilliSyntaxError, DuplicateLabelError

class RunState:
    """Tabelas compartilhadas por todos os comandos de uma execução."""
    def __init__(self):
        self.labels = {}
        self.variables = {}

    def register_label(self, label, line_number, raw_line):
        # Cada rótulo só pode aparecer uma vez, senão um desvio não saberia para onde ir
        if label in self.labels:
            raise DuplicateLabelError(f"O rótulo {label} já foi definido.", line_number, raw_line)
        self.labels[label] = line_number

class Program:
    """
    Comandos indexados pelo número da linha. A posição 0 é um comentário
    de enchimento que nunca executa, assim program[k] é a linha k.

    Cada programa carregado tem as próprias tabelas de rótulos e variáveis.
    """
    def __init__(self, lines=None, state=None):
        self.lines = [Comment(0, "# FILLER", None, "# FILLER")]
        self.lines.extend(lines or [])
        self.state = state if state is not None else RunState()

    def append(self, statement):
        self.lines.append(statement)

    def statements(self):
        return self.lines[1:]

    def __getitem__(self, line_number):
        return self.lines[line_number]

    def __len__(self):
        return len(self.lines)

def split_lines(source):
    """
    Quebra o código só em LF, removendo o CR de um CRLF. Outros
    separadores, como form feed ou tab vertical, ficam dentro da linha.
    """
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]

class Interpreter:
    def __init__(self, registry=None, verbose=False, output=None):
        self.registry = registry or default_registry()
        self.state = RunState()
        self.verbose = verbose
        self.output = output
        self.pc = 1

    def _print(self, text=""):
        print(text, file=self.output)

    def load(self, source):
        program = Program()
        self.state = program.state
        for line_number, line in enumerate(split_lines(source), start=1):
            raw_line = line.upper()
            statement = self.registry.classify(line_number, raw_line, program.state)
            if statement is NO_MATCH:
                raise SilliSyntaxError("Comando não reconhecido.", line_number, raw_line)
            program.append(statement)
        return program

    def run(self, program):
        self.state = program.state
        if self.verbose:
            self.print_program(program)
            if self.state.labels:
                self.print_labels()
            self._print()
            self._print("Saída da execução:")
            self._print()

        self.pc = 1
        while 1 <= self.pc < len(program):
            self.pc = program[self.pc].execute(self.state)

        if self.verbose:
            self._print()
            self.print_variables()
        return self.state

    def execute(self, source):
        return self.run(self.load(source))

    def print_program(self, program):
        self._print("Programa:")
        for statement in program.statements():
            self._print(str(statement))

    def print_labels(self):
        self._print()
        self._print("Rótulos:")
        self._print("Rótulo\tLinha")
        self._print("---------------")
        for label, line_number in self.state.labels.items():
            self._print(f"{label}\t{line_number}")

    def print_variables(self):
        self._print("Variáveis:")
        self._print("Var\tValor")
        self._print("---------------")
        for name, value in self.state.variables.items():
            self._print(f"{name}\t{value}")
