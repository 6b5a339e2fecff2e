"""Token scanner for JavaScript/TypeScript source text.

Every rule in the classifier, import extractor and state-flow tracer is
expressed over the small token stream produced here instead of over raw
regular expressions. Scanning is an explicit character-level state machine:

    DEFAULT --quote--> STRING --matching quote--> DEFAULT
    DEFAULT --letter/_/$--> IDENT --non-ident char--> DEFAULT
    DEFAULT --digit--> NUMBER --non-number char--> DEFAULT

Markup invocations (``<Name ...>``) are located on the raw text by a second
scanner that tracks brace depth and string state to find where the opening
tag ends.

Known limitation: comment stripping is purely textual, so a string literal
containing ``//`` or ``/*`` loses its tail. This mirrors how the rest of the
pipeline treats the input - best effort, never an error.
"""

from dataclasses import dataclass

IDENT = "ident"
STRING = "string"
NUMBER = "number"
PUNCT = "punct"

QUOTES = ("'", '"', "`")

# Longest first so "===" wins over "=="
MULTI_CHAR_PUNCT = ("===", "!==", "...", "=>", "==", "!=", "</", "/>")


@dataclass(frozen=True)
class Token:
    """One lexical token with its offsets in the scanned text."""

    kind: str
    value: str
    start: int
    end: int

    def is_ident(self, value: str | None = None) -> bool:
        return self.kind == IDENT and (value is None or self.value == value)

    def is_punct(self, value: str) -> bool:
        return self.kind == PUNCT and self.value == value


def strip_comments(text: str) -> str:
    """Remove ``/* ... */`` blocks, then ``//`` to end of line."""
    pieces = []
    pos = 0
    while True:
        start = text.find("/*", pos)
        if start == -1:
            pieces.append(text[pos:])
            break
        end = text.find("*/", start + 2)
        if end == -1:
            # Unterminated block comment is left as-is
            pieces.append(text[pos:])
            break
        pieces.append(text[pos:start])
        pos = end + 2
    without_blocks = "".join(pieces)

    return "\n".join(line.split("//", 1)[0] for line in without_blocks.split("\n"))


def _is_ident_start(ch: str) -> bool:
    return ch.isalpha() or ch in "_$"


def _is_ident_part(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"


def _skip_string(text: str, start: int) -> tuple[int, bool]:
    """Return (index past the literal, closed?) for a literal opening at start.

    Single and double quoted literals stop at a newline; template literals
    may span lines.
    """
    quote = text[start]
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1, True
        if ch == "\n" and quote != "`":
            return i, False
        i += 1
    return n, False


def tokenize(text: str) -> list[Token]:
    """Scan text into identifiers, strings, numbers and punctuation."""
    tokens: list[Token] = []
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if ch.isspace():
            i += 1
            continue

        if _is_ident_start(ch):
            j = i + 1
            while j < n and _is_ident_part(text[j]):
                j += 1
            tokens.append(Token(IDENT, text[i:j], i, j))
            i = j
            continue

        if ch.isdigit():
            j = i + 1
            while j < n and (text[j].isalnum() or text[j] in "._"):
                j += 1
            tokens.append(Token(NUMBER, text[i:j], i, j))
            i = j
            continue

        if ch in QUOTES:
            j, closed = _skip_string(text, i)
            body_end = j - 1 if closed else j
            tokens.append(Token(STRING, text[i + 1:body_end], i, j))
            i = j
            continue

        for punct in MULTI_CHAR_PUNCT:
            if text.startswith(punct, i):
                tokens.append(Token(PUNCT, punct, i, i + len(punct)))
                i += len(punct)
                break
        else:
            tokens.append(Token(PUNCT, ch, i, i + 1))
            i += 1

    return tokens


def scan(text: str) -> tuple[Token, ...]:
    """Comment-stripped token stream for a file."""
    return tuple(tokenize(strip_comments(text)))


def token_at(tokens, index: int) -> Token | None:
    if 0 <= index < len(tokens):
        return tokens[index]
    return None


def skip_balanced(tokens, index: int, open_char: str, close_char: str) -> int:
    """Given tokens[index] == open_char, return the index past its match or -1."""
    depth = 0
    for i in range(index, len(tokens)):
        tok = tokens[i]
        if tok.is_punct(open_char):
            depth += 1
        elif tok.is_punct(close_char):
            depth -= 1
            if depth == 0:
                return i + 1
    return -1


def find_at_depth_zero(tokens, index: int, target: str, limit: int) -> int:
    """Index of the first ``target`` punct at bracket depth zero, or -1.

    Used to step over a type annotation such as ``: React.FC<Props>``.
    Gives up at a statement terminator or after ``limit`` tokens.
    """
    depth = 0
    end = min(len(tokens), index + limit)
    for i in range(index, end):
        tok = tokens[i]
        if tok.kind != PUNCT:
            continue
        if depth == 0 and tok.value == target:
            return i
        if tok.value in ("(", "[", "{", "<"):
            depth += 1
        elif tok.value in (")", "]", "}", ">"):
            depth -= 1
            if depth < 0:
                return -1
        elif tok.value == ";" and depth == 0:
            return -1
    return -1


@dataclass(frozen=True)
class MarkupInvocation:
    """One ``<Name ...>`` site with the text between the name and its ``>``."""

    name: str
    start: int
    attributes: str

    def parameter_names(self) -> list[str]:
        """Names bound with ``name=`` at the top level of the attribute region."""
        tokens = tokenize(self.attributes)
        names = []
        depth = 0
        for i, tok in enumerate(tokens):
            if tok.is_punct("{"):
                depth += 1
            elif tok.is_punct("}"):
                depth = max(0, depth - 1)
            elif depth == 0 and tok.kind == IDENT:
                nxt = token_at(tokens, i + 1)
                if nxt is not None and nxt.is_punct("="):
                    names.append(_hyphenated_name(tokens, i))
        return names

    def mentions(self, identifier: str) -> bool:
        """True if identifier appears as an identifier token in the attributes."""
        return any(tok.is_ident(identifier) for tok in tokenize(self.attributes))


def _hyphenated_name(tokens, index: int) -> str:
    """Join ``aria - label`` back into ``aria-label`` when written without spaces."""
    name = tokens[index].value
    i = index
    while i >= 2:
        dash, prev = tokens[i - 1], tokens[i - 2]
        if not (dash.is_punct("-") and prev.kind == IDENT):
            break
        if prev.end != dash.start or dash.end != tokens[i].start:
            break
        name = f"{prev.value}-{name}"
        i -= 2
    return name


def _tag_region_end(text: str, start: int) -> int:
    """Index of the ``>`` closing an opening tag whose attributes begin at start.

    Braces and string literals are tracked so ``=>`` inside ``{...}`` does not
    end the tag. Returns -1 when the tag never closes.
    """
    depth = 0
    quote = None
    i = start
    n = len(text)
    while i < n:
        ch = text[i]
        if quote is not None:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in QUOTES:
            quote = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth = max(0, depth - 1)
        elif ch == ">" and depth == 0:
            return i
        i += 1
    return -1


def find_markup_invocations(text: str, name: str) -> tuple[MarkupInvocation, ...]:
    """Every ``<name`` followed by whitespace, ``/`` or ``>`` in text."""
    if not name:
        return ()
    needle = "<" + name
    found = []
    pos = text.find(needle)
    while pos != -1:
        after = pos + len(needle)
        if after < len(text) and (text[after].isspace() or text[after] in "/>"):
            end = _tag_region_end(text, after)
            region = text[after:end] if end != -1 else ""
            region = region.rstrip()
            if region.endswith("/"):
                region = region[:-1]
            found.append(MarkupInvocation(name=name, start=pos, attributes=region.strip()))
        pos = text.find(needle, after)
    return tuple(found)
