#!/usr/bin/env python3
"""Complexity guard for the batch driver and CLI glue."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
TARGETS = (
    ROOT / "src/ocr_tiff_converter/application/use_cases.py",
    ROOT / "src/ocr_tiff_converter/cli/cli.py",
)
MAX_STATEMENTS = 40
MAX_BRANCHES = 8


def _measure(node: ast.FunctionDef) -> tuple[int, int]:
    statements = 0
    branches = 0
    for child in ast.walk(node):
        if child is node:
            continue
        if isinstance(child, ast.stmt):
            statements += 1
        if isinstance(child, (ast.If, ast.For, ast.While, ast.Try, ast.With)):
            branches += 1
    return statements, branches


def main() -> None:
    """Fail when a top-level function exceeds the statement or branch limits."""
    violations: list[str] = []
    for target in TARGETS:
        tree = ast.parse(target.read_text(encoding="utf-8"))
        for node in tree.body:
            if not isinstance(node, ast.FunctionDef):
                continue
            statements, branches = _measure(node)
            if statements > MAX_STATEMENTS or branches > MAX_BRANCHES:
                violations.append(
                    f"{target.name}:{node.name}: "
                    f"{statements} statements, {branches} branches"
                )
    if violations:
        raise SystemExit(
            "Complexity threshold exceeded:\n" + "\n".join(f"- {v}" for v in violations)
        )
    print("Complexity check passed.")


if __name__ == "__main__":
    main()
