"""State-flow tracer - state slots and the units they are passed into.

First pass: every ``const [value, setValue] = useState(...)`` inside a
unit's file becomes a StateSlot owned by that unit.

Second pass: for each edge source -> target, any slot whose value name
appears as an identifier inside one of the target's invocation tags in the
source text gains the target as a consumer.
"""

from componentgraph.analysis.config import (
    FRAMEWORK_NAMESPACE,
    STATE_DECLARATION_KEYWORDS,
    STATE_INITIALIZERS,
)
from componentgraph.analysis.lexer import IDENT, find_markup_invocations, scan, token_at
from componentgraph.graph.types import StateSlot, Unit


def _initializer_at(tokens, index: int) -> bool:
    """``useState`` or ``React.useState`` at index."""
    tok = token_at(tokens, index)
    if tok is not None and tok.is_ident(FRAMEWORK_NAMESPACE):
        dot = token_at(tokens, index + 1)
        if dot is None or not dot.is_punct("."):
            return False
        tok = token_at(tokens, index + 2)
    return tok is not None and tok.kind == IDENT and tok.value in STATE_INITIALIZERS


def detect_state_slots(file_text: str, owner: Unit) -> list[StateSlot]:
    """State slots declared anywhere in the owner's file, in file order."""
    tokens = scan(file_text)
    slots = []
    for i, tok in enumerate(tokens):
        if tok.kind != IDENT or tok.value not in STATE_DECLARATION_KEYWORDS:
            continue
        shape = [token_at(tokens, i + k) for k in range(1, 7)]
        if any(t is None for t in shape):
            continue
        open_bracket, value, comma, updater, close_bracket, equals = shape
        if not (
            open_bracket.is_punct("[")
            and value.kind == IDENT
            and comma.is_punct(",")
            and updater.kind == IDENT
            and close_bracket.is_punct("]")
            and equals.is_punct("=")
        ):
            continue
        if _initializer_at(tokens, i + 7):
            slots.append(StateSlot(
                value_name=value.value,
                updater_name=updater.value,
                owner_unit_id=owner.id,
                owner_display_name=owner.display_name,
            ))
    return slots


def trace_consumers(source_text: str, target: Unit, slots) -> list[StateSlot]:
    """Slots whose value is passed to target somewhere in source_text.

    Every invocation of the target is inspected. The caller records the
    target as a consumer on each returned slot.
    """
    invocations = find_markup_invocations(source_text, target.display_name)
    if not invocations:
        return []
    return [
        slot for slot in slots
        if any(invocation.mentions(slot.value_name) for invocation in invocations)
    ]
