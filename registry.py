from statements import Blank, Comment, Declaration, split_label

NO_MATCH = None

class StatementRegistry:
    """
    Lista ordenada dos tipos de comando conhecidos.

    A ordem de registro é a ordem de prioridade: o primeiro tipo cujo
    matches() aceitar o corpo da linha é o escolhido, e os seguintes não
    são consultados. Novos tipos entram sempre no fim da lista.
    """
    def __init__(self, kinds=()):
        self._kinds = []
        for kind in kinds:
            self.register(kind)

    def register(self, kind):
        if kind in self._kinds:
            raise ValueError(f"Tipo de comando já registrado: {kind.__name__}")
        self._kinds.append(kind)
        return kind

    @property
    def kinds(self):
        return tuple(self._kinds)

    def match(self, body):
        for kind in self._kinds:
            if kind.matches(body):
                return kind
        return NO_MATCH

    def classify(self, line_number, raw_line, state):
        """
        Cria o comando da linha ou devolve NO_MATCH.

        O rótulo é registrado antes da classificação, mesmo que nenhum
        tipo reconheça o corpo.
        """
        label, body = split_label(raw_line)
        if label is not None:
            state.register_label(label, line_number, raw_line)

        kind = self.match(body)
        if kind is NO_MATCH:
            return NO_MATCH
        return kind(line_number, raw_line, label, body)

def default_registry():
    return StatementRegistry([Blank, Comment, Declaration])
