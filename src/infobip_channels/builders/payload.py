"""Serialização dos modelos para o formato de fio e de volta.

JSON usa os aliases camelCase e omite campos nulos; parâmetros de query
e campos de formulário multipart são sempre strings.
"""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel

from infobip_channels.models.email import SendEmailRequest
from infobip_channels.utils.errors import BuildError

ModelT = TypeVar("ModelT", bound=BaseModel)

FormPart = tuple[str, tuple[str | None, bytes | str] | tuple[str, bytes, str]]

# Campos do email enviados como arquivo, não como texto (nomes de fio)
EMAIL_FILE_FIELDS: tuple[str, ...] = ("attachment", "inlineImage")


def to_payload(model: BaseModel) -> dict[str, Any]:
    """Converte o modelo no corpo JSON da requisição.

    Args:
        model: Modelo de requisição

    Returns:
        Dicionário com nomes de fio (camelCase), sem campos nulos
    """
    return model.model_dump(by_alias=True, exclude_none=True, mode="json")


def from_payload(model_type: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Reconstrói um modelo a partir do dicionário de fio.

    Raises:
        pydantic.ValidationError: Se o dicionário não corresponde ao modelo.
    """
    return model_type.model_validate(data)


def to_query(model: BaseModel) -> dict[str, str]:
    """Converte um modelo de consulta em parâmetros de query string.

    Listas viram valores separados por vírgula.
    """
    return {name: _as_text(value) for name, value in to_payload(model).items()}


def to_email_form(request: SendEmailRequest) -> list[FormPart]:
    """Monta as partes multipart de ``POST /email/3/send``.

    Campos de texto viram partes sem filename; anexo e imagem inline são
    lidos do disco neste momento.

    Raises:
        BuildError: Se um arquivo referenciado não puder ser lido.
    """
    parts: list[FormPart] = []
    for wire_name, value in to_payload(request).items():
        if wire_name in EMAIL_FILE_FIELDS:
            parts.append((wire_name, _read_file_part(wire_name, Path(value))))
        else:
            parts.append((wire_name, (None, _as_text(value))))
    return parts


def _read_file_part(wire_name: str, path: Path) -> tuple[str, bytes, str]:
    try:
        content = path.read_bytes()
    except OSError as exc:
        # Mensagem leva só o nome do arquivo, nunca o caminho
        raise BuildError(f"cannot read {wire_name} file: {path.name}") from exc
    content_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
    return path.name, content, content_type


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_as_text(item) for item in value)
    return str(value)
