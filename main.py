"""Atajo para ejecutar octo-dispatch desde un checkout sin instalarlo.

`python -m main deploy -p Acme -r 2.3.1 -e Prod` desde la raíz del repo.
Con el paquete instalado se usa el script `octo-dispatch`.
"""

from __future__ import annotations

import sys
from pathlib import Path

_SRC = Path(__file__).resolve().parent / "src"


def main() -> None:
    # Layout src/: sin editable install `cli` y `core` no son importables.
    if str(_SRC) not in sys.path:
        sys.path.insert(0, str(_SRC))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
