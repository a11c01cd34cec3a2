"""Motor de validação declarativo.

Cada tipo de modelo tem uma tupla de restrições (tabela campo→restrição).
O motor percorre o grafo de entidades em profundidade, na ordem das
tabelas, e acumula TODAS as violações. Função pura: mesma entrada,
mesmo resultado.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol

from infobip_channels.utils.errors import ValidationError


class Reason(StrEnum):
    """Código de motivo de uma violação."""

    MISSING_REQUIRED = "missing-required"
    BAD_FORMAT = "bad-format"
    OUT_OF_RANGE = "out-of-range"
    MUTUALLY_EXCLUSIVE_CONFLICT = "mutually-exclusive-conflict"


class ConstraintKind(StrEnum):
    REQUIRED = "Required"
    PATTERN = "Pattern"
    LENGTH = "Length"
    MUTUALLY_EXCLUSIVE = "MutuallyExclusive"
    RANGE = "Range"


@dataclass(frozen=True)
class Violation:
    """Falha de validação: caminho do campo + código de motivo."""

    field: str
    reason: Reason
    constraint: ConstraintKind
    detail: str = ""


@dataclass(frozen=True)
class ValidationResult:
    """Resultado da validação: válido se não houver violações."""

    violations: tuple[Violation, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(v.field for v in self.violations)

    def raise_for_violations(self) -> None:
        """Levanta ValidationError com todas as violações, se houver."""
        if self.violations:
            raise ValidationError(self.violations)


Visit = Callable[[Any, str], list[Violation]]


class Constraint(Protocol):
    """Contrato de uma restrição declarativa."""

    def check(self, entity: Any, prefix: str, visit: Visit) -> list[Violation]: ...


def join_path(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name


def is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, Sequence, Mapping)):
        return len(value) == 0
    return False


class Required:
    """Ao menos um dos campos deve estar preenchido (não-nulo, não-vazio).

    Com um só campo, é a obrigatoriedade simples; com vários, modela
    regras do tipo "texto ou referência de conteúdo".
    """

    def __init__(self, *fields: str) -> None:
        self.fields = fields

    def check(self, entity: Any, prefix: str, visit: Visit) -> list[Violation]:
        if any(not is_empty(getattr(entity, name)) for name in self.fields):
            return []
        detail = "is required" if len(self.fields) == 1 else "one of these fields is required"
        return [
            Violation(
                field=join_path(prefix, "|".join(self.fields)),
                reason=Reason.MISSING_REQUIRED,
                constraint=ConstraintKind.REQUIRED,
                detail=detail,
            )
        ]


class Pattern:
    """Valor string deve casar integralmente com a regex.

    Valores nulos ou vazios são ignorados (obrigatoriedade é papel de
    Required). Em sequências, ou com ``separator``, cada item é verificado.
    """

    def __init__(
        self,
        field: str,
        regex: str | re.Pattern[str],
        description: str,
        separator: str | None = None,
    ) -> None:
        self.field = field
        self.regex = re.compile(regex) if isinstance(regex, str) else regex
        self.description = description
        self.separator = separator

    def check(self, entity: Any, prefix: str, visit: Visit) -> list[Violation]:
        value = getattr(entity, self.field)
        if is_empty(value):
            return []
        if isinstance(value, (tuple, list)):
            items = [str(item) for item in value]
        elif self.separator:
            items = [item.strip() for item in str(value).split(self.separator)]
        else:
            items = [str(value)]
        if all(self.regex.fullmatch(item) for item in items):
            return []
        return [
            Violation(
                field=join_path(prefix, self.field),
                reason=Reason.BAD_FORMAT,
                constraint=ConstraintKind.PATTERN,
                detail=f"must be {self.description}",
            )
        ]


class Length:
    """Tamanho de string ou coleção entre ``min`` e ``max`` (inclusive).

    Valores vazios ficam a cargo de Required e são ignorados aqui.
    """

    def __init__(self, field: str, min: int | None = None, max: int | None = None) -> None:
        self.field = field
        self.min = min
        self.max = max

    def check(self, entity: Any, prefix: str, visit: Visit) -> list[Violation]:
        value = getattr(entity, self.field)
        if is_empty(value):
            return []
        size = len(value)
        if (self.min is not None and size < self.min) or (
            self.max is not None and size > self.max
        ):
            return [
                Violation(
                    field=join_path(prefix, self.field),
                    reason=Reason.OUT_OF_RANGE,
                    constraint=ConstraintKind.LENGTH,
                    detail=f"length must be in [{self.min}, {self.max}], got {size}",
                )
            ]
        return []


class Range:
    """Limites numéricos inclusivos."""

    def __init__(
        self,
        field: str,
        min: float | None = None,
        max: float | None = None,
    ) -> None:
        self.field = field
        self.min = min
        self.max = max

    def check(self, entity: Any, prefix: str, visit: Visit) -> list[Violation]:
        value = getattr(entity, self.field)
        if value is None:
            return []
        if (self.min is not None and value < self.min) or (
            self.max is not None and value > self.max
        ):
            return [
                Violation(
                    field=join_path(prefix, self.field),
                    reason=Reason.OUT_OF_RANGE,
                    constraint=ConstraintKind.RANGE,
                    detail=f"must be in [{self.min}, {self.max}], got {value}",
                )
            ]
        return []


class MutuallyExclusive:
    """No máximo um dos campos pode estar preenchido."""

    def __init__(self, *fields: str) -> None:
        self.fields = fields

    def check(self, entity: Any, prefix: str, visit: Visit) -> list[Violation]:
        present = [name for name in self.fields if not is_empty(getattr(entity, name))]
        if len(present) <= 1:
            return []
        return [
            Violation(
                field=join_path(prefix, "|".join(self.fields)),
                reason=Reason.MUTUALLY_EXCLUSIVE_CONFLICT,
                constraint=ConstraintKind.MUTUALLY_EXCLUSIVE,
                detail=f"at most one may be set, got {', '.join(present)}",
            )
        ]


class Nested:
    """Desce para um modelo filho ou para cada item de uma sequência."""

    def __init__(self, field: str) -> None:
        self.field = field

    def check(self, entity: Any, prefix: str, visit: Visit) -> list[Violation]:
        value = getattr(entity, self.field)
        path = join_path(prefix, self.field)
        if value is None:
            return []
        if isinstance(value, (tuple, list)):
            found: list[Violation] = []
            for index, item in enumerate(value):
                found.extend(visit(item, f"{path}[{index}]"))
            return found
        return visit(value, path)


RuleTable = Mapping[type, Sequence[Constraint]]


class ValidationEngine:
    """Aplica uma tabela de regras sobre uma árvore de entidades."""

    def __init__(self, rules: RuleTable) -> None:
        self._rules = dict(rules)

    def rules_for(self, entity_type: type) -> Sequence[Constraint] | None:
        # Modelos genéricos parametrizados herdam as regras da origem
        for klass in entity_type.__mro__:
            if klass in self._rules:
                return self._rules[klass]
        return None

    def validate(self, entity: Any) -> ValidationResult:
        """Valida a entidade raiz e todos os descendentes.

        Raises:
            TypeError: Se não há regras registradas para o tipo raiz.
        """
        if self.rules_for(type(entity)) is None:
            raise TypeError(f"no validation rules registered for {type(entity).__name__}")
        return ValidationResult(tuple(self._visit(entity, "")))

    def _visit(self, entity: Any, prefix: str) -> list[Violation]:
        found: list[Violation] = []
        for constraint in self.rules_for(type(entity)) or ():
            found.extend(constraint.check(entity, prefix, self._visit))
        return found
