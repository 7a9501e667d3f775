#!/usr/bin/env python3
"""
Script para iniciar a IDE Silli
"""
import os
import sys
import webbrowser
from threading import Timer

import uvicorn

from config import get_settings

def open_browser(port):
    """Abre a documentação da API após um pequeno delay"""
    print("🌐 Abrindo navegador...")
    webbrowser.open(f'http://localhost:{port}/docs')

def main():
    print("🚀 Silli Language IDE")
    print("=" * 50)

    # Verificar se os arquivos necessários existem
    required_files = [
        'main.py', 'interpreter.py', 'registry.py',
        'statements.py', 'lexer.py', 'errors.py', 'config.py'
    ]

    missing_files = [file for file in required_files if not os.path.exists(file)]
    if missing_files:
        print("❌ Arquivos necessários não encontrados:")
        for file in missing_files:
            print(f"   - {file}")
        print("\nCertifique-se de ter todos os arquivos do projeto na pasta atual.")
        return 1

    settings = get_settings()
    print("✅ Todos os arquivos encontrados!")
    print(f"🔄 Iniciando servidor FastAPI em {settings.host}:{settings.port}...")

    # Agendar abertura do navegador
    timer = Timer(2.0, open_browser, args=(settings.port,))
    timer.start()

    try:
        uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.reload)
    except KeyboardInterrupt:
        print("\n👋 Servidor interrompido. Até logo!")
    return 0

if __name__ == "__main__":
    sys.exit(main())
