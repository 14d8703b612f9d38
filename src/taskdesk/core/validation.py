"""
Валидация входных данных запросов.

Правила задаются строкой в стиле ``"sometimes|string|max:255"``.
Функция ``validate`` чистая: она не обращается к БД и не бросает
исключений, а возвращает пару (проверенные поля, ошибки).
"""
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

FieldErrors = Dict[str, List[str]]
ValidatedFields = Dict[str, Any]

_TRUE_INPUTS = (1, "1")
_FALSE_INPUTS = (0, "0")


class _Missing:
    def __repr__(self) -> str:
        return "<missing>"


MISSING = _Missing()


def normalize_input(data: Any) -> Dict[str, Any]:
    """
    Приводит тело запроса к словарю.

    Строки обрезаются, пустые строки превращаются в None. Все, что не
    является объектом, считается пустым вводом.
    """
    if not isinstance(data, Mapping):
        return {}

    normalized = {}
    for key, value in data.items():
        if isinstance(value, str):
            value = value.strip()
            if value == "":
                value = None
        normalized[str(key)] = value
    return normalized


def parse_rules(rules: str) -> List[Tuple[str, Optional[str]]]:
    parsed = []
    for rule in rules.split("|"):
        rule = rule.strip()
        if not rule:
            continue
        name, _, arg = rule.partition(":")
        parsed.append((name, arg or None))
    return parsed


def _check_string(field: str, value: Any, arg: Optional[str]) -> Tuple[Any, Optional[str]]:
    if not isinstance(value, str):
        return value, f"The {field} field must be a string."
    return value, None


def _check_boolean(field: str, value: Any, arg: Optional[str]) -> Tuple[Any, Optional[str]]:
    # bool - подкласс int, поэтому сначала проверяем точное совпадение типа
    if isinstance(value, bool):
        return value, None
    if isinstance(value, (int, str)):
        if value in _TRUE_INPUTS:
            return True, None
        if value in _FALSE_INPUTS:
            return False, None
    return value, f"The {field} field must be true or false."


def _check_max(field: str, value: Any, arg: Optional[str]) -> Tuple[Any, Optional[str]]:
    limit = int(arg or 0)
    if isinstance(value, str) and len(value) > limit:
        return value, f"The {field} field must not be greater than {limit} characters."
    return value, None


_CHECKS: Dict[str, Callable[[str, Any, Optional[str]], Tuple[Any, Optional[str]]]] = {
    "string": _check_string,
    "boolean": _check_boolean,
    "max": _check_max,
}


def validate(
    data: Any,
    rules: Mapping[str, str]
) -> Tuple[ValidatedFields, FieldErrors]:
    """
    Проверка данных по набору правил.

    Args:
        data: Тело запроса (любой JSON)
        rules: Поле -> строка правил

    Returns:
        Кортеж (validated, errors). В validated попадают только поля,
        перечисленные в rules и присутствующие во вводе.
    """
    values = normalize_input(data)
    validated: ValidatedFields = {}
    errors: FieldErrors = {}

    for field, rule_string in rules.items():
        parsed = parse_rules(rule_string)
        names = [name for name, _ in parsed]
        value = values.get(field, MISSING)

        if value is MISSING and "sometimes" in names:
            continue

        if "required" in names and (value is MISSING or value is None):
            errors[field] = [f"The {field} field is required."]
            continue

        if value is MISSING:
            continue

        field_errors = []
        for name, arg in parsed:
            check = _CHECKS.get(name)
            if check is None:
                continue
            value, error = check(field, value, arg)
            if error:
                field_errors.append(error)
                # Тип не совпал - остальные правила не имеют смысла
                if name in ("string", "boolean"):
                    break

        if field_errors:
            errors[field] = field_errors
        else:
            validated[field] = value

    return validated, errors
