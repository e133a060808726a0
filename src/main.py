"""`python -m main` con `src/` en el path (p.ej. dentro de un agente de CI)."""

from __future__ import annotations

import sys

from cli.main import run


def main() -> None:
    # Los agentes Windows suelen arrancar con cp1252; el cuerpo de la respuesta
    # del deployment puede traer caracteres fuera de ese juego.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    run()


if __name__ == "__main__":
    main()
