"""Jinja environment for README and documentation templates."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATES_DIR = Path(__file__).with_name("templates")

_env: Environment | None = None


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Return an environment searching ``templates_dir`` before the packaged templates."""
    directories = []
    if templates_dir:
        directories.append(str(templates_dir))
    directories.append(str(TEMPLATES_DIR))
    loader = FileSystemLoader(directories)
    return Environment(
        loader=loader,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


def render(template_name: str, **context: object) -> str:
    global _env
    if _env is None:
        _env = create_environment()
    return _env.get_template(template_name).render(**context)


__all__ = ["TEMPLATES_DIR", "create_environment", "render"]
