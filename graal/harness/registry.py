"""
Registry — именованные comparator/predicate/equality функции

Тестовые векторы ссылаются на функции по имени (поле fn), так как JSON
не может хранить callable. resolve() переводит имя в функцию.
"""

import operator
from typing import Any, Callable, Dict

from graal.core.domain.vectors import CallableKind


class UnknownCallableError(KeyError):
    """Имя функции отсутствует в registry для данного вида."""


# =============================================================================
# COMPARATORS (strict weak ordering)
# =============================================================================

COMPARATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "less": operator.lt,
    "greater": operator.gt,
    "abs_less": lambda a, b: abs(a) < abs(b),
}

# =============================================================================
# PREDICATES
# =============================================================================

PREDICATES: Dict[str, Callable[[Any], bool]] = {
    "is_even": lambda x: x % 2 == 0,
    "is_odd": lambda x: x % 2 != 0,
    "is_positive": lambda x: x > 0,
    "is_negative": lambda x: x < 0,
    "is_zero": lambda x: x == 0,
    "always": lambda x: True,
    "never": lambda x: False,
}

# =============================================================================
# EQUALITIES
# =============================================================================

EQUALITIES: Dict[str, Callable[[Any, Any], bool]] = {
    "equal": operator.eq,
    "same_parity": lambda a, b: a % 2 == b % 2,
    "casefold_equal": lambda a, b: a.casefold() == b.casefold(),
}

_REGISTRY: Dict[CallableKind, Dict[str, Callable[..., bool]]] = {
    CallableKind.COMPARATOR: COMPARATORS,
    CallableKind.PREDICATE: PREDICATES,
    CallableKind.EQUALITY: EQUALITIES,
}


def resolve(kind: CallableKind, name: str) -> Callable[..., bool]:
    """
    Функция по виду и имени.

    Args:
        kind: Вид функции (comparator/predicate/equality)
        name: Имя в registry

    Returns:
        Зарегистрированная функция

    Raises:
        UnknownCallableError: Если имя не зарегистрировано для данного вида
    """
    table = _REGISTRY[kind]
    try:
        return table[name]
    except KeyError:
        raise UnknownCallableError(
            f"unknown {kind.value} {name!r}; known: {sorted(table)}"
        ) from None
