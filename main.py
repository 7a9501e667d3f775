from fastapi import FastAPI, Depends
from pydantic import BaseModel
from io import StringIO

from interpreter import Interpreter
from errors import SilliError
from config import Settings, get_settings, VERSION

app = FastAPI(title="Silli Language IDE", version=VERSION)

# --- Modelos de Dados ---
class CodeRequest(BaseModel):
    code: str

# --- Lógica Auxiliar ---

def statement_to_dict(statement):
    return {
        "line": statement.line_number,
        "kind": statement.kind,
        "label": statement.label,
        "body": statement.body,
        "text": statement.raw_line,
    }

# --- Endpoints da API ---
@app.get("/api/health")
async def health():
    return {"status": "ok", "version": VERSION}

@app.post("/api/run")
async def run_code(request: CodeRequest, settings: Settings = Depends(get_settings)):
    """Carrega e executa o programa, devolvendo as tabelas finais."""
    output = StringIO()
    interpreter = Interpreter(verbose=settings.debug, output=output)
    try:
        program = interpreter.load(request.code)
    except SilliError as e:
        # O programa não chegou a ser carregado: nenhuma tabela vale
        return {"success": False, "error": e.to_dict(), "variables": {}, "labels": {}}

    result = {"success": True, "error": None}
    try:
        interpreter.run(program)
    except SilliError as e:
        # Sem rollback: as variáveis declaradas antes do erro continuam na resposta
        result = {"success": False, "error": e.to_dict()}
    result["variables"] = dict(program.state.variables)
    result["labels"] = dict(program.state.labels)
    if settings.debug:
        result["listing"] = output.getvalue()
    return result

@app.post("/api/compile")
async def compile_code(request: CodeRequest):
    """Só classifica as linhas, sem executar nada."""
    interpreter = Interpreter()
    try:
        program = interpreter.load(request.code)
    except SilliError as e:
        return {"success": False, "errors": [e.to_dict()]}
    return {
        "success": True,
        "statements": [statement_to_dict(s) for s in program.statements()],
        "labels": dict(interpreter.state.labels),
    }

@app.get("/api/examples")
async def get_examples():
    return {
        "declare": {"name": "Declaração", "code": "# Declara duas variaveis\nlet a = 5\nlet b = 3"},
        "labels": {"name": "Rótulos", "code": "inicio: let x = 1\n\nfim: # acabou"},
        "duplicate": {"name": "Erro: declaração repetida", "code": "let a = 5\nlet a = 2"},
    }
