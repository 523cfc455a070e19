import base64
import binascii
import re

from src.core.errors import InvalidImagePayload

# data:<mime>;base64,<payload>
_DATA_URL = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?;base64,(?P<payload>.*)$", re.DOTALL)


def decode_data_url(value) -> bytes:
    """Decodifica una imagen data-URL base64. Lanza InvalidImagePayload si falta o está mal formada."""
    if not isinstance(value, str):
        raise InvalidImagePayload("image debe ser un string data-URL")

    m = _DATA_URL.match(value.strip())
    if not m:
        raise InvalidImagePayload("image no tiene el formato data:<mime>;base64,<datos>")

    payload = "".join(m.group("payload").split())
    if not payload:
        raise InvalidImagePayload("image sin datos")

    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImagePayload(f"base64 inválido: {e}") from e
