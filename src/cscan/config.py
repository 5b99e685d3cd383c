"""
Scanner Configuration
=====================

Options that change how the scanner treats the few constructs where more
than one behaviour is reasonable. Configuration can come from:
- Default values (defined here)
- Explicit keyword arguments
- Environment variables (ScannerOptions.from_env)

Environment Variables
---------------------
| Variable              | Values                 | Default |
|-----------------------|------------------------|---------|
| CSCAN_EMIT_EOF        | 1/true/yes, 0/false/no | false   |
| CSCAN_BLOCK_COMMENTS  | pair, legacy           | pair    |
| CSCAN_WHITESPACE      | characters to skip     | " "     |
"""

from dataclasses import dataclass
from enum import Enum
import os

from cscan.errors import ConfigurationError


class BlockCommentMode(Enum):
    """
    How a ``/* ... */`` comment is terminated.

    PAIR:
        Scan until the exact ``*/`` pair and consume it. An unterminated
        comment runs to the end of input.
    LEGACY:
        Stop as soon as the next character is ``*`` or the one after it
        is ``/``, then skip two characters regardless of what they are.
        ``/* a/b */`` therefore ends inside the comment and leaves
        ``b */`` to be scanned as tokens.
    """
    PAIR = "pair"
    LEGACY = "legacy"


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        emit_eof: Append an EOF token after the last real token.
        block_comment_mode: Termination rule for block comments.
        whitespace: Characters skipped silently between tokens. Newlines
                    are always handled separately and always counted.
    """
    emit_eof: bool = False
    block_comment_mode: BlockCommentMode = BlockCommentMode.PAIR
    whitespace: str = " "

    def __post_init__(self):
        if isinstance(self.block_comment_mode, str):
            self.block_comment_mode = parse_block_comment_mode(self.block_comment_mode)
        if "\n" in self.whitespace:
            raise ConfigurationError("newline cannot be configured as whitespace")

    @classmethod
    def from_env(cls, environ=None) -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Unrecognised boolean values are ignored. An unknown block comment
        mode raises ConfigurationError.

        Args:
            environ: Mapping to read instead of os.environ (for tests)
        """
        env = os.environ if environ is None else environ
        options = cls()

        if emit_eof := env.get("CSCAN_EMIT_EOF"):
            value = emit_eof.strip().lower()
            if value in _TRUE_VALUES:
                options.emit_eof = True
            elif value in _FALSE_VALUES:
                options.emit_eof = False

        if mode := env.get("CSCAN_BLOCK_COMMENTS"):
            options.block_comment_mode = parse_block_comment_mode(mode)

        if whitespace := env.get("CSCAN_WHITESPACE"):
            if "\n" in whitespace:
                raise ConfigurationError("CSCAN_WHITESPACE cannot contain a newline")
            options.whitespace = whitespace

        return options


def parse_block_comment_mode(value: str) -> BlockCommentMode:
    """Convert 'pair' / 'legacy' (any case) to a BlockCommentMode."""
    try:
        return BlockCommentMode(value.strip().lower())
    except ValueError:
        choices = ", ".join(mode.value for mode in BlockCommentMode)
        raise ConfigurationError(
            f"invalid block comment mode {value!r} (expected one of: {choices})"
        ) from None
