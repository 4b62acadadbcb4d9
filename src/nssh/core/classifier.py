"""Command-line classification.

nssh accepts plain ssh syntax mixed with a few options of its own::

    nssh [-1246AaCfgKkMNnqsTtVvXxY] [-b bind_address] [-o option] [-p port] ...
         [--list NAME] [--comment TEXT] [--user NAME] (hostname | user@host | next | reset)

Tokens are first tagged by :func:`tokenize` and then folded into a
:class:`ClassifiedArgs` by :func:`build_classified`. Every raw token ends up in
exactly one place: the ssh pass-through words or one of the directive fields.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from nssh.core.types import ClassifiedArgs, Token
from nssh.errors import MissingArgumentValueError, MissingTargetError

SSH_SWITCH_RE = re.compile(r"^-[1246AaCfgKkMNnqsTtVvXxY]$")
SSH_OPTION_RE = re.compile(r"^-[bcDeFiLlmOopRSw]$")
USER_HOST_RE = re.compile(r"^\w+@[-.\w]+$")

LIST_DIRECTIVE = "--list"
COMMENT_DIRECTIVE = "--comment"
USER_DIRECTIVE = "--user"
DIRECTIVES = frozenset({LIST_DIRECTIVE, COMMENT_DIRECTIVE, USER_DIRECTIVE})


def tokenize(argv: Sequence[str]) -> list[Token]:
    """Tag raw argv words, pairing value-taking options with their value."""

    tokens: list[Token] = []
    idx = 0
    while idx < len(argv):
        word = argv[idx]

        if SSH_SWITCH_RE.match(word):
            tokens.append(Token("flag", word))
            idx += 1
            continue

        if SSH_OPTION_RE.match(word) or word in DIRECTIVES:
            if idx + 1 >= len(argv):
                raise MissingArgumentValueError(word)
            kind = "directive" if word in DIRECTIVES else "flag_value"
            tokens.append(Token(kind, word, argv[idx + 1]))
            idx += 2
            continue

        if USER_HOST_RE.match(word):
            tokens.append(Token("user_host", word))
        else:
            tokens.append(Token("positional", word))
        idx += 1

    return tokens


def _user_option(user: str) -> list[str]:
    return ["-o", f"User {user}"]


def build_classified(tokens: Iterable[Token], *, list_prefix: str = "machines.") -> ClassifiedArgs:
    """Fold tagged tokens into a :class:`ClassifiedArgs`.

    When several bare words are present the last one is the target.
    """

    ssh_args: list[str] = []
    list_name: str | None = None
    comment: str | None = None
    user: str | None = None
    target: str | None = None

    for token in tokens:
        if token.kind in ("flag", "flag_value"):
            ssh_args.extend(token.words())
        elif token.kind == "directive":
            value = token.value or ""
            if token.raw == LIST_DIRECTIVE:
                list_name = f"{list_prefix}{value}"
            elif token.raw == COMMENT_DIRECTIVE:
                comment = value
            else:
                user = value
                ssh_args.extend(_user_option(value))
        elif token.kind == "user_host":
            user, _, target = token.raw.partition("@")
            ssh_args.extend(_user_option(user))
        else:
            target = token.raw

    return ClassifiedArgs(ssh_args=tuple(ssh_args), list_name=list_name, comment=comment, user=user, target=target)


def classify(argv: Sequence[str], *, list_prefix: str = "machines.") -> ClassifiedArgs:
    """Classify a raw nssh command line."""

    classified = build_classified(tokenize(argv), list_prefix=list_prefix)
    if not classified.target:
        raise MissingTargetError("no hostname given (expected hostname, user@host, next or reset)")
    return classified
