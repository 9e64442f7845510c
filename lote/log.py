# lote/log.py
#
# Logger do processamento em lote com tempo decorrido.
#
# Design decisions:
#   - Uma unica funcao log() usada por todas as etapas do lote.
#   - Tempo decorrido no prefixo para o operador ver quanto cada etapa leva.
#   - Sem framework de logging: stdout com flush imediato, o lote e um job batch.
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[lote {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
