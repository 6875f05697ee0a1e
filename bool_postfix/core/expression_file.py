"""
Expression file loading.
File: bool_postfix/core/expression_file.py

Loads boolean expressions from a text file so a batch of expressions can be
converted in one run.

File format:
- One expression per line
- Empty lines ignored
- Lines starting with # are comments (ignored)
"""

from pathlib import Path
from rich.console import Console

console = Console()


class ExpressionFileLoader:
    """Handles loading expressions from files."""

    def __init__(self, base_path: Path = None):
        """
        Initialize expression file loader.

        Args:
            base_path: Base path for resolving relative file paths (defaults to current directory)
        """
        self.base_path = base_path or Path.cwd()
        self._file_cache = {}

    def load(self, file_path_str) -> list[str]:
        """
        Load expressions from a file.

        Lines are returned as written (minus surrounding whitespace); they are
        not validated here, so a bad line is reported by the lexer with its
        own error instead of being silently dropped.

        Raises:
            ValueError: If file doesn't exist, can't be read, or holds no expressions
        """
        file_path = self._resolve_file_path(str(file_path_str))

        cache_key = str(file_path.resolve())
        if cache_key in self._file_cache:
            return self._file_cache[cache_key]

        if not file_path.exists():
            raise ValueError(f"Expression file not found: {file_path}")

        if not file_path.is_file():
            raise ValueError(f"Path is not a file: {file_path}")

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ValueError(f"Cannot read expression file {file_path}: {e}")

        expressions = []
        for line in lines:
            line = line.strip()

            # Skip empty lines and comments
            if not line or line.startswith('#'):
                continue

            expressions.append(line)

        if not expressions:
            raise ValueError(f"No expressions found in file: {file_path}")

        self._file_cache[cache_key] = expressions

        console.print(f"[dim]Loaded {len(expressions)} expressions from {file_path.name}[/dim]")
        return expressions

    def _resolve_file_path(self, file_path_str: str) -> Path:
        """Resolve file path relative to base path."""
        file_path = Path(file_path_str)

        if file_path.is_absolute():
            return file_path
        else:
            return self.base_path / file_path


# End of file #
