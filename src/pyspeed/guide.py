# src/pyspeed/guide.py
"""
Checks that the fenced code blocks of a Markdown guide compile and run.
"""

import logging
import re
import subprocess
import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union

from .exceptions import SnippetError


logger = logging.getLogger(__name__)

PYTHON_LANGUAGES = {"python", "py", "python3"}

_FENCE = re.compile(r"^(`{3,}|~{3,})\s*([\w+-]*)")
_HEADING = re.compile(r"^#{1,6}\s+(.*?)\s*#*\s*$")


@dataclass
class Snippet:
    """One fenced code block."""
    index: int
    language: str
    code: str
    line: int  # 1-based line of the first code line
    heading: str = ""

    @property
    def is_python(self) -> bool:
        return self.language.lower() in PYTHON_LANGUAGES


@dataclass
class GuideReport:
    """Outcome of validating every snippet of a guide."""
    checked: int = 0
    skipped: int = 0
    failures: List[SnippetError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def extract_snippets(markdown: str) -> List[Snippet]:
    """Split Markdown text into its fenced code blocks, in document order."""
    snippets = []
    heading = ""
    fence = None
    language = ""
    body = []
    start = 0

    for lineno, line in enumerate(markdown.splitlines(), start=1):
        if fence is None:
            match = _FENCE.match(line)
            if match:
                fence, language = match.group(1), match.group(2)
                body, start = [], lineno + 1
                continue
            heading_match = _HEADING.match(line)
            if heading_match:
                heading = heading_match.group(1)
        elif line.strip().startswith(fence[0] * len(fence)) and not line.strip().strip(fence[0]):
            snippets.append(Snippet(
                index=len(snippets),
                language=language,
                code="\n".join(body) + "\n",
                line=start,
                heading=heading
            ))
            fence = None
        else:
            body.append(line)

    if fence is not None:
        raise SnippetError(len(snippets), start, "unterminated code fence")
    return snippets


def check_syntax(snippet: Snippet) -> None:
    """Compile a Python snippet, raising SnippetError on a syntax error."""
    try:
        compile(snippet.code, f"<snippet {snippet.index}>", "exec")
    except SyntaxError as exc:
        line = snippet.line + (exc.lineno or 1) - 1
        raise SnippetError(snippet.index, line, f"syntax error: {exc.msg}") from exc


def run_snippet(snippet: Snippet, timeout: float = 60) -> str:
    """Execute a snippet in a fresh interpreter and return what it printed."""
    # Run from a real file so spawned pool workers can re-import __main__
    with tempfile.TemporaryDirectory() as workdir:
        script = Path(workdir) / f"snippet_{snippet.index}.py"
        script.write_text(snippet.code, encoding="utf-8")
        try:
            completed = subprocess.run(
                [sys.executable, str(script)],
                capture_output=True,
                text=True,
                timeout=timeout,
                cwd=workdir
            )
        except subprocess.TimeoutExpired as exc:
            raise SnippetError(snippet.index, snippet.line, f"timed out after {timeout}s") from exc

    if completed.returncode != 0:
        last_line = completed.stderr.strip().splitlines()[-1:] or ["no output"]
        raise SnippetError(snippet.index, snippet.line,
                           f"exited with {completed.returncode}: {last_line[0]}")
    return completed.stdout


def validate_guide(path: Union[str, Path], run: bool = False, timeout: float = 60) -> GuideReport:
    """Check every Python snippet of the guide at ``path``; optionally run them."""
    text = Path(path).read_text(encoding="utf-8")
    report = GuideReport()

    try:
        snippets = extract_snippets(text)
    except SnippetError as exc:
        logger.warning(f"{path}: {exc}")
        report.failures.append(exc)
        return report

    for snippet in snippets:
        if not snippet.is_python:
            report.skipped += 1
            continue
        report.checked += 1
        try:
            check_syntax(snippet)
            if run:
                run_snippet(snippet, timeout=timeout)
        except SnippetError as exc:
            logger.warning(f"{snippet.heading or 'guide'}: {exc}")
            report.failures.append(exc)

    logger.info(f"Checked {report.checked} snippets, skipped {report.skipped}, "
                f"{len(report.failures)} failed")
    return report


def snippets_by_heading(path: Union[str, Path]) -> List[Tuple[str, Snippet]]:
    """Python snippets of the guide paired with their section heading."""
    text = Path(path).read_text(encoding="utf-8")
    return [(s.heading, s) for s in extract_snippets(text) if s.is_python]
