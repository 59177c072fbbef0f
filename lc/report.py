from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FileRow(_Schema):
    path: str
    lines: int


class FileErrorRow(_Schema):
    path: str
    error: str


class CountReport(_Schema):
    """Result of one counting run (JSON keys are camelCase)."""
    root: str
    extension: str
    exclude_comments: bool
    total_files: int = 0
    total_lines: int = 0
    files: List[FileRow] = Field(default_factory=list)
    errors: List[FileErrorRow] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


def render_text(report: CountReport, *, per_file: bool = False) -> str:
    out: List[str] = [
        f"Counting lines for files with extension: {report.extension} in {report.root}",
    ]
    if report.exclude_comments:
        out.append("Excluding comments...")
    if per_file:
        out.extend(f"{row.lines}\t{row.path}" for row in report.files)
    out.append(f"Total files: {report.total_files}")
    out.append(f"Total lines: {report.total_lines}")
    return "\n".join(out) + "\n"


__all__ = ["FileRow", "FileErrorRow", "CountReport", "render_text"]
