"""
Serialización de los valores del formulario a un mapa plano y a JSON.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Union

from termforms.exceptions import FormWriteError
from termforms.form import Form

logger = logging.getLogger(__name__)


def to_flat_map(form: Form) -> Dict[str, Union[str, bool]]:
    """Mapa id -> valor en el orden de declaración de los campos."""
    return {fld.id: fld.value for fld in form.fields}


def to_json(form: Form) -> str:
    """Objeto JSON con los valores del formulario."""
    return json.dumps(to_flat_map(form), indent=2, ensure_ascii=False)


def write(form: Form, path: Union[str, Path]) -> Path:
    """
    Escribe los valores del formulario como JSON.

    Raises:
        FormWriteError: si falla la escritura (el formulario no cambia)
    """
    path = Path(path)
    content = to_json(form)
    try:
        path.write_text(content + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("no se pudo escribir %s: %s", path, exc)
        raise FormWriteError(path, str(exc)) from exc
    logger.info("valores guardados en %s", path)
    return path
