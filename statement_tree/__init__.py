"""Statement-boundary engine over tree-sitter concrete syntax trees."""

from .tree import StatementNode, StatementTree  # noqa: F401
from .config import BuildConfig  # noqa: F401
from .errors import (  # noqa: F401
    InvalidRangeError,
    ParseFailureError,
    StatementTreeError,
    StatementTreeInvariantError,
    TreeAlreadyBuiltError,
    UnsupportedLanguageError,
)
from .api import (  # noqa: F401
    build_statement_tree,
    statement_spans,
    dump_statements,
)
