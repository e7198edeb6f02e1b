"""Extracts namespace-level using directives from C# source text."""

from __future__ import annotations

from opinionated_usings.models.directive import ImportDirective
from opinionated_usings.parser.lexer import Token, TokenKind, tokenize

# Trivia that may follow a directive's ';' on the same line.
_TRAILING_TRIVIA_KINDS = frozenset(
    {TokenKind.WHITESPACE, TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT}
)

_NAME_SEPARATORS = frozenset({".", "::"})

_SCOPE_BREAKERS = frozenset({"{", "}", ";"})


class UsingScanner:
    """Finds ``[global] using [static] [Alias =] Name;`` directives.

    The scanner is lexical and forgiving: text that is not valid C# yields
    whatever directives can be recognized, possibly none, and never an
    exception. Only directives at compilation-unit or namespace level are
    reported; ``using`` inside any other brace scope is a statement.
    """

    def scan(self, text: str) -> list[ImportDirective]:
        # A leading byte-order mark does not count as a column.
        text = text.removeprefix("\ufeff")
        tokens = list(tokenize(text))
        significant = [token for token in tokens if not token.is_trivia]
        # Index of every significant token in the full token list, for trivia lookup.
        positions = [i for i, token in enumerate(tokens) if not token.is_trivia]

        directives: list[ImportDirective] = []
        # One entry per open brace: True if it was opened by a namespace declaration.
        scopes: list[bool] = []
        pending_namespace = False

        k = 0
        while k < len(significant):
            token = significant[k]

            if all(scopes) and _starts_directive(significant, k):
                parsed = self._parse_directive(text, tokens, significant, positions, k)
                if parsed is not None:
                    directive, k = parsed
                    directives.append(directive)
                    continue

            if token.kind is TokenKind.IDENTIFIER and token.text == "namespace":
                pending_namespace = True
            elif token.text == "{":
                scopes.append(pending_namespace)
                pending_namespace = False
            elif token.text == "}":
                if scopes:
                    scopes.pop()
                pending_namespace = False
            elif token.text == ";":
                # File-scoped namespace: the rest of the file stays at namespace level.
                pending_namespace = False
            k += 1

        return directives

    def _parse_directive(
        self,
        text: str,
        tokens: list[Token],
        significant: list[Token],
        positions: list[int],
        start: int,
    ) -> tuple[ImportDirective, int] | None:
        """Parse one directive starting at ``significant[start]``.

        Returns the directive and the index of the first token after its
        ``;``, or ``None`` if the tokens do not form a directive.
        """
        j = start
        if significant[j].text == "global":
            j += 1
        j += 1  # using

        if _text_at(significant, j) == "static":
            j += 1

        alias: str | None = None
        if (
            _kind_at(significant, j) is TokenKind.IDENTIFIER
            and _text_at(significant, j + 1) == "="
        ):
            alias = significant[j].text
            j += 2

        name_start = j
        if alias is None:
            j = _skip_qualified_name(significant, j)
        else:
            # An alias may target any type, e.g. tuples or arrays.
            while j < len(significant) and significant[j].text not in _SCOPE_BREAKERS:
                j += 1
        if j == name_start or _text_at(significant, j) != ";":
            return None

        first = significant[start]
        semicolon = significant[j]
        name = text[significant[name_start].offset : significant[j - 1].end]

        directive = ImportDirective(
            text=text[first.offset : semicolon.end].rstrip(),
            name=name,
            line=first.line,
            column=first.column,
            alias=alias,
            trailing_trivia=_same_line_trivia(tokens, positions[j] + 1, first.line),
        )
        return directive, j + 1


def _text_at(significant: list[Token], index: int) -> str | None:
    if index < len(significant):
        return significant[index].text
    return None


def _kind_at(significant: list[Token], index: int) -> TokenKind | None:
    if index < len(significant):
        return significant[index].kind
    return None


def _starts_directive(significant: list[Token], index: int) -> bool:
    token = significant[index]
    if token.kind is not TokenKind.IDENTIFIER:
        return False
    if token.text == "using":
        return True
    return token.text == "global" and _text_at(significant, index + 1) == "using"


def _skip_qualified_name(significant: list[Token], index: int) -> int:
    """Skip ``A.B::C<T>``; return the index after the name (unchanged if none)."""
    if _kind_at(significant, index) is not TokenKind.IDENTIFIER:
        return index
    j = index + 1
    while j < len(significant):
        current = significant[j].text
        if current == "<":
            closed = _skip_type_arguments(significant, j)
            if closed is None:
                return index
            j = closed
        elif current in _NAME_SEPARATORS and _kind_at(significant, j + 1) is TokenKind.IDENTIFIER:
            j += 2
        else:
            break
    return j


def _skip_type_arguments(significant: list[Token], index: int) -> int | None:
    """Skip a balanced ``<...>`` list; ``None`` if it is not closed before a scope breaker."""
    depth = 0
    j = index
    while j < len(significant):
        current = significant[j].text
        if current == "<":
            depth += 1
        elif current == ">":
            depth -= 1
            if depth == 0:
                return j + 1
        elif current in _SCOPE_BREAKERS:
            return None
        j += 1
    return None


def _same_line_trivia(tokens: list[Token], index: int, line: int) -> tuple[str, ...]:
    """Collect whitespace and comments after a directive, up to the end of its line.

    Only trivia starting on ``line`` counts, so a comment on the next line is
    never taken for the directive's marking.
    """
    collected: list[str] = []
    while index < len(tokens) and tokens[index].kind in _TRAILING_TRIVIA_KINDS:
        if tokens[index].line == line:
            collected.append(tokens[index].text)
        index += 1
    return tuple(collected)
