"""Render the system instructions in tahrirchi/prompt/promptFiles using pystache.

Each operation has one template. Templates may pull in the shared
``output_rules`` partial; partial files may be wrapped in a code fence, which
is stripped before rendering.

Usage:
    python -m tahrirchi.prompt.render_prompt [operation] [language]

Prints the rendered instruction (default: grammar, EN) to stdout.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pystache

from tahrirchi.models import Language, Operation

PROMPTS_DIR = Path(__file__).parent / "promptFiles"

TEMPLATES = {
    Operation.GRAMMAR: "grammar_check.md",
    Operation.SIMPLIFY: "simplify.md",
}

PARTIALS = ["output_rules"]


def _read_prompt(name: str) -> str:
    p = PROMPTS_DIR / name
    if not p.exists():
        raise FileNotFoundError(f"Prompt file not found: {p}")
    return p.read_text(encoding="utf-8")


def _strip_code_fences(s: str) -> str:
    """Strip a single leading and trailing code-fence block if present.

    Handles fences like ``` or ```` optionally followed by a language tag.
    """
    lines = s.splitlines()
    if not lines:
        return s
    first = lines[0].lstrip()
    last = lines[-1].lstrip()
    if first.startswith("```"):
        lines = lines[1:]
    if lines and last.startswith("```"):
        lines = lines[:-1]
    return "\n".join(lines).strip()


def render_template(template_name: str, context: dict | None = None) -> str:
    template = _read_prompt(template_name)
    partials = {
        name: _strip_code_fences(_read_prompt(f"{name}.md")) for name in PARTIALS
    }
    renderer = pystache.Renderer(partials=partials, escape=lambda u: u)
    return renderer.render(template, context or {}).strip()


def render_instruction(operation: Operation, language: Language) -> str:
    """Return the system instruction for ``operation`` written for ``language``."""
    language = Language.parse(language)
    template_name = TEMPLATES[Operation(operation)]
    return render_template(template_name, {"language": language.display_name})


if __name__ == "__main__":
    op = Operation(sys.argv[1]) if len(sys.argv) > 1 else Operation.GRAMMAR
    lang = Language.parse(sys.argv[2]) if len(sys.argv) > 2 else Language.EN
    print(render_instruction(op, lang))
