"""Import extractor - names a file imports from inside the project.

Recognised shapes::

    import { A, B as C } from './module'
    import Default from '@/module'
    import Default, { A } from '../module'

A default binding is kept only when it starts with an uppercase letter, so
``import api from './api'`` contributes nothing and
``import api, { A } from './api'`` contributes only ``A``.

Only specifiers starting with a local prefix (relative path or project-root
alias) are kept. ``x as y`` keeps ``x``, the name the exporting unit declares.
"""

from componentgraph.analysis.config import LOCAL_IMPORT_PREFIXES
from componentgraph.analysis.lexer import IDENT, STRING, scan, token_at


def is_local_specifier(specifier: str, local_prefixes=LOCAL_IMPORT_PREFIXES) -> bool:
    return any(specifier.startswith(prefix) for prefix in local_prefixes)


def _named_list(tokens, index: int) -> tuple[list[str], int]:
    """Parse ``{ A, type B, C as D }`` starting at ``{``.

    Returns the original names and the index past ``}`` (-1 if unclosed).
    """
    names = []
    entry: list = []
    i = index + 1
    while i < len(tokens):
        tok = tokens[i]
        if tok.is_punct("}") or tok.is_punct(","):
            name = _entry_name(entry)
            if name:
                names.append(name)
            entry = []
            if tok.is_punct("}"):
                return names, i + 1
        else:
            entry.append(tok)
        i += 1
    return names, -1


def _entry_name(entry) -> str | None:
    idents = [tok for tok in entry if tok.kind == IDENT]
    # Inline modifier: { type Props }
    if len(idents) >= 2 and idents[0].value == "type" and idents[1].value != "as":
        idents = idents[1:]
    return idents[0].value if idents else None


def _parse_import(tokens, index: int) -> tuple[list[str], str] | None:
    """Parse one import declaration at ``import``; None if unrecognised."""
    i = index + 1
    tok = token_at(tokens, i)
    # import type { X } / import type X
    if tok is not None and tok.is_ident("type"):
        nxt = token_at(tokens, i + 1)
        if nxt is not None and not nxt.is_ident("from"):
            i += 1
            tok = nxt

    names: list[str] = []
    if tok is not None and tok.kind == IDENT and not tok.is_ident("from"):
        # Default binding: uppercase-initial only
        if tok.value[:1].isupper():
            names.append(tok.value)
        i += 1
        tok = token_at(tokens, i)
        if tok is not None and tok.is_punct(","):
            i += 1
            tok = token_at(tokens, i)

    if tok is not None and tok.is_punct("{"):
        named, i = _named_list(tokens, i)
        if i == -1:
            return None
        names.extend(named)
        tok = token_at(tokens, i)

    if not names or tok is None or not tok.is_ident("from"):
        return None
    specifier = token_at(tokens, i + 1)
    if specifier is None or specifier.kind != STRING:
        return None
    return names, specifier.value


def extract_imports(file_text: str, local_prefixes=LOCAL_IMPORT_PREFIXES) -> list[str]:
    """Locally imported names in order of appearance, duplicates kept."""
    tokens = scan(file_text)
    imported = []
    for i, tok in enumerate(tokens):
        if not tok.is_ident("import"):
            continue
        parsed = _parse_import(tokens, i)
        if parsed is None:
            continue
        names, specifier = parsed
        if is_local_specifier(specifier, local_prefixes):
            imported.extend(names)
    return imported
