#!/usr/bin/env python3
"""Architecture boundary checks for the value_converter layers."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/value_converter"

# layer directory -> import prefixes it must not depend on
BOUNDARIES: dict[str, tuple[str, ...]] = {
    "application": (
        "typer",
        "value_converter.adapters",
        "value_converter.plugins",
        "value_converter.cli",
        "value_converter.api",
    ),
    "adapters": (
        "typer",
        "value_converter.plugins",
        "value_converter.cli",
        "value_converter.api",
    ),
    "plugins": ("typer", "value_converter.cli"),
}


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            modules.add(node.module)
    return modules


def find_violations(package: Path = PACKAGE) -> list[str]:
    """Return one message per import that crosses a layer boundary."""
    violations: list[str] = []
    for layer, banned in BOUNDARIES.items():
        for path in sorted((package / layer).glob("*.py")):
            for module in sorted(_imported_modules(path)):
                if module.startswith(banned):
                    violations.append(f"{path.relative_to(package)} imports {module}")
    return violations


def main() -> None:
    """Run repository architecture boundary checks."""
    violations = find_violations()
    if violations:
        raise SystemExit(
            "Architecture violations:\n" + "\n".join(f"- {v}" for v in violations)
        )
    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
