"""Line and file recognizers for C# source.

Every function here is a pure matcher over one line or one file's text.
None of them tokenizes: they recognize the shapes that Unity scripts use in
practice and let everything else fall through as ordinary code.
"""

from __future__ import annotations

import re

from unity_indexer.index.models import FunctionDeclaration

MODIFIERS: tuple[str, ...] = (
    "public",
    "private",
    "protected",
    "internal",
    "static",
    "virtual",
    "override",
    "abstract",
    "sealed",
    "async",
    "extern",
    "unsafe",
    "new",
    "partial",
    "readonly",
    "ref",
)

# Statement keywords that would otherwise pass for a return type
# ("return Foo(x);", "else Bar();", "do Step();").
_NOT_A_TYPE: tuple[str, ...] = (
    *MODIFIERS,
    "return",
    "else",
    "throw",
    "yield",
    "await",
    "case",
    "goto",
    "do",
    "in",
    "out",
    "is",
    "using",
    "namespace",
    "class",
    "struct",
    "interface",
    "enum",
    "delegate",
    "event",
    "operator",
)

# Keywords followed by a parenthesized expression ("if (x)", "catch (e)").
_NOT_A_NAME: tuple[str, ...] = (
    "if",
    "while",
    "for",
    "foreach",
    "switch",
    "catch",
    "lock",
    "using",
    "fixed",
    "return",
    "typeof",
    "sizeof",
    "nameof",
    "default",
    "when",
    "base",
    "this",
)


def _alternation(words: tuple[str, ...]) -> str:
    return "|".join(words)


_ATTRIBUTE = r"\[[^\[\]]*\]"
_TYPE = r"[A-Za-z_][\w.]*(?:<[\w\s,.<>\[\]?]*>)?(?:\[[\s,]*\])*\??"

_DECLARATION_RE = re.compile(
    rf"^\s*(?P<attributes>(?:{_ATTRIBUTE}\s*)*)"
    rf"(?:(?:{_alternation(MODIFIERS)})\s+)*"
    rf"(?!(?:{_alternation(_NOT_A_TYPE)})\b)(?P<return_type>{_TYPE})\s+"
    rf"(?!(?:{_alternation(_NOT_A_NAME)})\b)(?P<name>[A-Za-z_]\w*)\s*(?:<[\w\s,]*>)?\s*"
    r"\((?P<params>[^)]*)\)"
)

_NAMESPACE_RE = re.compile(r"^\s*namespace\s+(?P<name>[A-Za-z_][\w.]*)", re.MULTILINE)

_CLASS_RE = re.compile(
    rf"^\s*(?:{_ATTRIBUTE}\s*)*"
    r"(?:(?:public|private|protected|internal|static|new|unsafe)\s+)*"
    r"(?:(?:sealed|abstract)\s+)?(?:partial\s+)?"
    r"class\s+(?P<name>[A-Za-z_]\w*)",
    re.MULTILINE,
)

# Leading identifier of an attribute, skipping a target such as "field:".
_ATTRIBUTE_NAME_RE = re.compile(r"\[\s*(?:\w+\s*:\s*)?(?P<name>[A-Za-z_][\w.]*)")

_SUMMARY_TAG_RE = re.compile(r"</?summary>")
_PARAM_TAG_RE = re.compile(r'<param name="[^"]+">([^<]*)</param>')
_RETURNS_TAG_RE = re.compile(r"<returns>([^<]*)</returns>")


def is_annotation_line(line: str) -> bool:
    """True when the trimmed line is fully bracket-delimited."""
    trimmed = line.strip()
    return trimmed.startswith("[") and trimmed.endswith("]")


def match_annotation(line: str) -> str | None:
    """Name of the attribute on an attribute-only line.

    ``[Header("Movement")]`` gives ``Header``; arguments are discarded.
    """
    if not is_annotation_line(line):
        return None
    match = _ATTRIBUTE_NAME_RE.match(line.strip())
    return match.group("name") if match else None


def match_doc_comment(line: str) -> str | None:
    """Text after a ``///`` documentation comment marker."""
    trimmed = line.strip()
    if trimmed.startswith("///"):
        return trimmed[3:].strip()
    return None


def match_line_comment(line: str) -> str | None:
    """Text after a ``//`` comment marker; documentation comments excluded."""
    trimmed = line.strip()
    if not trimmed.startswith("//") or match_doc_comment(trimmed) is not None:
        return None
    return trimmed[2:].strip()


def match_function_declaration(line: str) -> FunctionDeclaration | None:
    """Recognize a single-line method declaration.

    Constructors, multi-line parameter lists and expressions that merely call
    something are not declarations.
    """
    match = _DECLARATION_RE.match(line)
    if match is None:
        return None
    inline = tuple(m.group("name") for m in _ATTRIBUTE_NAME_RE.finditer(match.group("attributes")))
    return FunctionDeclaration(
        return_type=match.group("return_type"),
        name=match.group("name"),
        params=match.group("params").strip(),
        inline_annotations=inline,
    )


def match_namespace(text: str) -> str | None:
    """First namespace declared in the file (block or file-scoped)."""
    match = _NAMESPACE_RE.search(text)
    return match.group("name") if match else None


def match_class(text: str) -> str | None:
    """First class declared in the file."""
    match = _CLASS_RE.search(text)
    return match.group("name") if match else None


def clean_doc_markup(text: str) -> str:
    """Strip XML doc tags from one documentation comment line."""
    text = _SUMMARY_TAG_RE.sub("", text)
    text = _PARAM_TAG_RE.sub(r"parameter: \1", text)
    text = _RETURNS_TAG_RE.sub(r"returns: \1", text)
    return text.strip()
