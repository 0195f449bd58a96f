"""Commit lint rules - per-field validation messages.

Rules use the commitlint shape ``"<field>-<rule>": [level, when, value]``.
Only error level rules (2) produce messages; unknown rules are ignored.
"""

import re
from typing import Any, Callable, Dict, List, Optional, Tuple

ERROR_LEVEL = 2

Check = Callable[[str, str, bool, Any], Tuple[bool, str]]


def _is_case(value: str, case: str) -> bool:
    if case == 'lower-case':
        return value == value.lower()
    if case == 'upper-case':
        return value == value.upper()
    if case == 'sentence-case':
        return value[:1] == value[:1].upper() and value[1:] == value[1:].lower()
    if case == 'start-case':
        return all(word[:1] == word[:1].upper() for word in value.split())
    if case == 'pascal-case':
        return re.fullmatch(r'(?:[A-Z][a-z0-9]*)+', value) is not None
    if case == 'camel-case':
        return re.fullmatch(r'[a-z][a-z0-9]*(?:[A-Z][a-z0-9]*)*', value) is not None
    if case == 'kebab-case':
        return re.fullmatch(r'[a-z0-9]+(?:-[a-z0-9]+)*', value) is not None
    if case == 'snake-case':
        return re.fullmatch(r'[a-z0-9]+(?:_[a-z0-9]+)*', value) is not None
    return True


def _empty(field, value, always, _):
    empty = not value.strip()
    return empty == always, f"{field} {'must' if always else 'may not'} be empty"


def _max_length(field, value, _always, limit):
    return len(value) <= limit, (
        f"{field} must not be longer than {limit} characters, current length is {len(value)}"
    )


def _min_length(field, value, _always, limit):
    return not value or len(value) >= limit, (
        f"{field} must not be shorter than {limit} characters, current length is {len(value)}"
    )


def _max_line_length(field, value, _always, limit):
    return all(len(line) <= limit for line in value.splitlines()), (
        f"{field}'s lines must not be longer than {limit} characters"
    )


def _full_stop(field, value, always, stop):
    stop = stop or '.'
    if not value:
        return True, ''
    return value.endswith(stop) == always, f"{field} {'must' if always else 'may not'} end with full stop"


def _case(field, value, always, cases):
    if not value:
        return True, ''
    cases = cases if isinstance(cases, list) else [cases]
    matched = any(_is_case(value, case) for case in cases)
    return matched == always, f"{field} must {'' if always else 'not '}be {', '.join(cases)}"


def _enum(field, value, always, allowed):
    if not value:
        return True, ''
    allowed = allowed or []
    return (value in allowed) == always, (
        f"{field} must {'' if always else 'not '}be one of [{', '.join(map(str, allowed))}]"
    )


def _trim(field, value, _always, _):
    return value == value.strip(), f"{field} must not have leading or trailing whitespace"


CHECKS: Dict[str, Check] = {
    'empty': _empty,
    'max-length': _max_length,
    'min-length': _min_length,
    'max-line-length': _max_line_length,
    'full-stop': _full_stop,
    'case': _case,
    'enum': _enum,
    'trim': _trim,
}


def lint_field(field: str, value: str, rules: Dict[str, List[Any]]) -> Optional[str]:
    """Validate one commit field against the configured rules.

    Args:
        field: Field name (e.g., 'subject')
        value: Text entered for the field
        rules: Rule table from the lint settings

    Returns:
        Comma separated error messages, or None when the value passes

    Examples:
        >>> lint_field('subject', 'Add x.', {'subject-full-stop': [2, 'never', '.']})
        'subject may not end with full stop'
    """
    value = value or ''
    messages = []
    for name, rule in rules.items():
        if not name.startswith(f"{field}-"):
            continue
        check = CHECKS.get(name[len(field) + 1:])
        if check is None or not rule:
            continue
        level = rule[0]
        when = rule[1] if len(rule) > 1 else 'always'
        setting = rule[2] if len(rule) > 2 else None
        if level != ERROR_LEVEL:
            continue
        valid, message = check(field, value, when == 'always', setting)
        if not valid and message:
            messages.append(message)
    return ','.join(messages) or None
