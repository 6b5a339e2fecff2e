"""Unit classifier - decides whether a file declares a component, hook or utility.

Detection runs in a fixed order and the first kind that matches wins:

1. Component: uppercase arrow declarations, uppercase function declarations,
   uppercase classes extending a component base class
2. Hook: ``useX`` function or assignable declaration (first match only)
3. Utility: exported lowercase functions and assignable declarations

Files matching none of the three produce no unit at all.
"""

from componentgraph.analysis.config import (
    COMPONENT_BASE_CLASSES,
    DECLARATION_KEYWORDS,
    EFFECT_REGISTRARS,
    EXTERNAL_PARAMETER_NAME,
    FRAMEWORK_NAMESPACE,
    HOOK_PREFIX,
    MAX_ANNOTATION_TOKENS,
    STATE_INITIALIZERS,
)
from componentgraph.analysis.lexer import (
    IDENT,
    find_at_depth_zero,
    scan,
    skip_balanced,
    token_at,
)
from componentgraph.graph.types import Unit, UnitKind, unit_id_for_path


def is_component_name(name: str) -> bool:
    return bool(name) and "A" <= name[0] <= "Z"


def is_hook_name(name: str) -> bool:
    prefix = len(HOOK_PREFIX)
    return (
        len(name) > prefix
        and name.startswith(HOOK_PREFIX)
        and "A" <= name[prefix] <= "Z"
    )


def is_utility_name(name: str) -> bool:
    return bool(name) and "a" <= name[0] <= "z"


def _unique(names: list[str]) -> list[str]:
    return list(dict.fromkeys(names))


def _assignment_index(tokens, index: int) -> int:
    """Index of the ``=`` binding a declared name, stepping over ``: Type``."""
    tok = token_at(tokens, index)
    if tok is None:
        return -1
    if tok.is_punct("="):
        return index
    if tok.is_punct(":"):
        return find_at_depth_zero(tokens, index + 1, "=", MAX_ANNOTATION_TOKENS)
    return -1


def _declared_names(tokens, accept) -> list[tuple[str, int]]:
    """(name, index of ``=``) for every ``const|let|var name [: T] =``."""
    found = []
    for i, tok in enumerate(tokens):
        if tok.kind != IDENT or tok.value not in DECLARATION_KEYWORDS:
            continue
        name_tok = token_at(tokens, i + 1)
        if name_tok is None or name_tok.kind != IDENT or not accept(name_tok.value):
            continue
        eq = _assignment_index(tokens, i + 2)
        if eq != -1:
            found.append((name_tok.value, eq))
    return found


def _is_arrow_body(tokens, index: int) -> bool:
    """True if tokens from index read ``(params) [: T] =>`` or ``param =>``."""
    tok = token_at(tokens, index)
    if tok is None:
        return False
    if tok.is_punct("("):
        after = skip_balanced(tokens, index, "(", ")")
        if after == -1:
            return False
    elif tok.kind == IDENT:
        after = index + 1
    else:
        return False

    nxt = token_at(tokens, after)
    if nxt is None:
        return False
    if nxt.is_punct(":"):
        return find_at_depth_zero(tokens, after + 1, "=>", MAX_ANNOTATION_TOKENS) != -1
    return nxt.is_punct("=>")


def _opens_parameter_list(tokens, index: int) -> bool:
    """``(`` directly, or after a generic parameter list ``<T>``."""
    tok = token_at(tokens, index)
    if tok is None:
        return False
    if tok.is_punct("<"):
        index = skip_balanced(tokens, index, "<", ">")
        tok = token_at(tokens, index)
    return tok is not None and tok.is_punct("(")


def _function_names(tokens, accept, exported_only: bool = False) -> list[str]:
    """Names of ``function name (`` declarations."""
    names = []
    for i, tok in enumerate(tokens):
        if not tok.is_ident("function"):
            continue
        if exported_only:
            prev = token_at(tokens, i - 1)
            if prev is not None and prev.is_ident("async"):
                prev = token_at(tokens, i - 2)
            if prev is None or not prev.is_ident("export"):
                continue
        name_tok = token_at(tokens, i + 1)
        if name_tok is None or name_tok.kind != IDENT or not accept(name_tok.value):
            continue
        if _opens_parameter_list(tokens, i + 2):
            names.append(name_tok.value)
    return names


def _component_class_names(tokens) -> list[str]:
    names = []
    for i, tok in enumerate(tokens):
        if not tok.is_ident("class"):
            continue
        name_tok = token_at(tokens, i + 1)
        if name_tok is None or name_tok.kind != IDENT or not is_component_name(name_tok.value):
            continue
        extends = token_at(tokens, i + 2)
        if extends is None or not extends.is_ident("extends"):
            continue
        j = i + 3
        base = token_at(tokens, j)
        if base is not None and base.is_ident(FRAMEWORK_NAMESPACE):
            dot = token_at(tokens, j + 1)
            if dot is None or not dot.is_punct("."):
                continue
            base = token_at(tokens, j + 2)
        if base is not None and base.kind == IDENT and base.value in COMPONENT_BASE_CLASSES:
            names.append(name_tok.value)
    return names


def detect_component_names(tokens) -> list[str]:
    """All component names in pattern order: arrows, functions, classes."""
    arrows = [
        name for name, eq in _declared_names(tokens, is_component_name)
        if _is_arrow_body(tokens, eq + 1)
    ]
    functions = _function_names(tokens, is_component_name)
    classes = _component_class_names(tokens)
    return _unique(arrows + functions + classes)


def detect_hook_name(tokens) -> str | None:
    """First hook-style function, else first hook-style assignable declaration."""
    functions = _function_names(tokens, is_hook_name)
    if functions:
        return functions[0]
    declared = _declared_names(tokens, is_hook_name)
    if declared:
        return declared[0][0]
    return None


def detect_utility_names(tokens) -> list[str]:
    """Exported lowercase functions, then exported lowercase declarations."""
    functions = _function_names(tokens, is_utility_name, exported_only=True)
    declared = []
    for i, tok in enumerate(tokens):
        if not tok.is_ident("export"):
            continue
        keyword = token_at(tokens, i + 1)
        name_tok = token_at(tokens, i + 2)
        if keyword is None or name_tok is None:
            continue
        if keyword.kind != IDENT or keyword.value not in DECLARATION_KEYWORDS:
            continue
        if name_tok.kind != IDENT or not is_utility_name(name_tok.value):
            continue
        if _assignment_index(tokens, i + 3) != -1:
            declared.append(name_tok.value)
    return _unique(functions + declared)


def _has_identifier(tokens, names) -> bool:
    return any(tok.kind == IDENT and tok.value in names for tok in tokens)


def _uses_external_parameters(tokens) -> bool:
    """``props.x``, ``... = props`` or a destructured ``({ ... })`` parameter list."""
    for i, tok in enumerate(tokens):
        nxt = token_at(tokens, i + 1)
        if nxt is None:
            break
        if tok.is_ident(EXTERNAL_PARAMETER_NAME) and nxt.is_punct("."):
            return True
        if tok.is_punct("=") and nxt.is_ident(EXTERNAL_PARAMETER_NAME):
            return True
        if tok.is_punct("(") and nxt.is_punct("{"):
            return True
    return False


def classify(file_text: str, file_path: str) -> Unit | None:
    """Classify one file, or return None when nothing recognisable is declared.

    The returned unit has no imported names yet; the analyzer fills them in
    from the import extractor.
    """
    tokens = scan(file_text)
    unit_id = unit_id_for_path(file_path)

    components = detect_component_names(tokens)
    if components:
        return Unit(
            id=unit_id,
            display_name=components[0],
            kind=UnitKind.COMPONENT,
            file_path=file_path,
            exported_names=components,
            uses_state=_has_identifier(tokens, STATE_INITIALIZERS),
            uses_effectful_lifecycle=_has_identifier(tokens, EFFECT_REGISTRARS),
            uses_external_parameters=_uses_external_parameters(tokens),
        )

    hook = detect_hook_name(tokens)
    if hook is not None:
        return Unit(
            id=unit_id,
            display_name=hook,
            kind=UnitKind.HOOK,
            file_path=file_path,
            exported_names=[hook],
            uses_state=_has_identifier(tokens, STATE_INITIALIZERS),
            uses_effectful_lifecycle=_has_identifier(tokens, EFFECT_REGISTRARS),
        )

    utilities = detect_utility_names(tokens)
    if utilities:
        return Unit(
            id=unit_id,
            display_name=utilities[0],
            kind=UnitKind.UTILITY,
            file_path=file_path,
            exported_names=utilities,
        )

    return None
