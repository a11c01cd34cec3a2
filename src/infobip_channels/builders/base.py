"""Base dos builders fluentes.

Setters guardam o valor bruto e retornam o próprio builder. Nenhuma
validação de conteúdo acontece aqui: ``build()`` só confere presença
dos campos obrigatórios e deixa o resto para o motor de validação.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

import pydantic

from infobip_channels.models.common import WireModel
from infobip_channels.utils.errors import BuildError, MissingRequiredField

ModelT = TypeVar("ModelT", bound=WireModel)


class ModelBuilder(Generic[ModelT]):
    """Acumulador de campos com construção adiada.

    Subclasses declaram ``model`` e ``required_fields`` (na ordem em que
    a ausência deve ser reportada).
    """

    model: ClassVar[type[WireModel]]
    required_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def _set(self, field: str, value: Any) -> Any:
        self._values[field] = value
        return self

    def build(self) -> ModelT:
        """Constrói a entidade imutável.

        Returns:
            Instância do modelo com os valores acumulados

        Raises:
            MissingRequiredField: Primeiro obrigatório ainda não informado
            BuildError: Valor de tipo incompatível com o modelo
        """
        for name in self.required_fields:
            if self._values.get(name) is None:
                raise MissingRequiredField(name)
        return construct(self._model_type(), self._payload())

    def _model_type(self) -> type[WireModel]:
        return self.model

    def _payload(self) -> dict[str, Any]:
        return {name: value for name, value in self._values.items() if value is not None}


def construct(model_type: type[WireModel], values: dict[str, Any]) -> Any:
    """Instancia ``model_type`` a partir de nomes de campo Python.

    Raises:
        BuildError: Se o pydantic rejeitar algum tipo.
    """
    try:
        return model_type.model_validate(values)
    except pydantic.ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in exc.errors()
        )
        raise BuildError(f"invalid value for {model_type.__name__}: {fields}") from exc
