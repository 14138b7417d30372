"""Utility functions for FlexForm"""

from pathlib import Path


def canonicalify(p: Path | str) -> Path:
    return Path(p).expanduser().resolve()


def ensure_path(p: Path | str) -> Path:
    path = canonicalify(p)
    path.mkdir(parents=True, exist_ok=True)
    return path


def format_validation_errors(title: str, errors: list[dict]) -> str:
    """Render pydantic error dicts as an indented, one-line-per-location report.

    Args:
        title: First line of the report
        errors: Output of ``ValidationError.errors()``

    Returns:
        Multi-line message suitable for configuration authors
    """
    lines = [title]
    for error in errors:
        loc = " -> ".join(str(item) for item in error["loc"])
        lines.append(f"  - {loc}: {error['msg']}" if loc else f"  - {error['msg']}")
    return "\n".join(lines)
