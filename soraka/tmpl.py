"""Code file generation from templates for model names, with a command-line entry point."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .stringx import camel_to_snake, first_lower

__all__ = ["FOLDERS", "FILE_MAP", "TemplateData", "select_folders", "render_template", "generate", "main"]

FOLDERS: tuple[str, ...] = ("dal/req", "dal/vo", "dal/repo", "biz", "service")
FILE_MAP: dict[str, str] = {
    "dal/req": "req",
    "dal/vo": "vo",
    "dal/repo": "repo",
    "biz": "biz",
    "service": "service",
}

_DEFAULT_PROJECT = "go-kgin-platform"
_DEFAULT_PKG = "basic"
_DEFAULT_TEMPLATE_DIR = "pkg/cmd/template"
_DEFAULT_TARGET_DIR = "./internal"

_ACTION = re.compile(r"\{\{-?\s*(.*?)\s*-?\}\}", re.DOTALL)
_FIELD = re.compile(r"\.(\w+)")
_COMMENT = re.compile(r"/\*.*\*/", re.DOTALL)


@dataclass
class TemplateData:
    """Values a template can refer to as ``{{.ProjectName}}`` and so on."""

    project_name: str
    pkg_name: str
    model_name: str
    snake_model_name: str

    def fields(self) -> dict[str, str]:
        return {
            "ProjectName": self.project_name,
            "PkgName": self.pkg_name,
            "ModelName": self.model_name,
            "SnakeModelName": self.snake_model_name,
        }


def select_folders(to: str = "") -> list[str]:
    """Return the target folders, limited to those containing ``to`` when it is given."""
    if not to:
        return list(FOLDERS)
    return [folder for folder in FOLDERS if to in folder]


def render_template(text: str, data: TemplateData) -> str:
    """Substitute ``{{.Field}}`` references in ``text``; comments render as nothing.

    Raises ValueError for an unknown field or an unsupported action.
    """
    values = data.fields()

    def substitute(match: re.Match[str]) -> str:
        inner = match[1]
        if _COMMENT.fullmatch(inner):
            return ""
        field = _FIELD.fullmatch(inner)
        if field is None:
            raise ValueError(f"unsupported template action {inner!r}")
        if field[1] not in values:
            raise ValueError(f"template refers to unknown field {field[1]!r}")
        return values[field[1]]

    return _ACTION.sub(substitute, text)


def generate(
    models: str | Sequence[str],
    base_dir: str | Path,
    template_dir: str = _DEFAULT_TEMPLATE_DIR,
    target_dir: str = _DEFAULT_TARGET_DIR,
    project: str = _DEFAULT_PROJECT,
    pkg: str = _DEFAULT_PKG,
    to: str = "",
) -> list[Path]:
    """Render each folder's template for every model and write the files.

    ``models`` is a comma-separated string or a list of names. Files go to
    ``base_dir/target_dir/<folder>/<pkg>/<snake_name>.go``. Returns the paths
    written. Raises ValueError when no models are given and OSError when a
    template cannot be read or a file cannot be written.
    """
    if isinstance(models, str):
        if not models:
            raise ValueError("models is empty")
        model_list = models.split(",")
    else:
        model_list = list(models)
        if not model_list:
            raise ValueError("models is empty")

    base = Path(base_dir)
    written: list[Path] = []
    for model_name in model_list:
        for folder in select_folders(to):
            template_path = base / template_dir / f"{FILE_MAP[folder]}.go.tpl"
            data = TemplateData(
                project_name=project,
                pkg_name=pkg,
                model_name=model_name,
                snake_model_name=first_lower(model_name),
            )
            template = template_path.read_text(encoding="utf-8")
            out_dir = base / target_dir / folder / pkg
            out_dir.mkdir(exist_ok=True)
            out_file = out_dir / f"{camel_to_snake(model_name)}.go"
            out_file.write_text(render_template(template, data), encoding="utf-8")
            print(f"生成文件成功: {out_file}")
            written.append(out_file)
    return written


def _build_parser() -> argparse.ArgumentParser:
    shared = argparse.ArgumentParser(add_help=False)
    shared.add_argument("--project", default=argparse.SUPPRESS, help="eg: --project go-kgin-platform")
    shared.add_argument("--pkg", default=argparse.SUPPRESS, help="eg: --pkg basic")

    parser = argparse.ArgumentParser(prog="go-utils")
    parser.add_argument("--project", default=_DEFAULT_PROJECT, help="eg: --project go-kgin-platform")
    parser.add_argument("--pkg", default=_DEFAULT_PKG, help="eg: --pkg basic")
    commands = parser.add_subparsers(dest="command")

    gen = commands.add_parser("generate", parents=[shared], help="generate")
    gen_commands = gen.add_subparsers(dest="generator")
    tmpl = gen_commands.add_parser("tmpl", parents=[shared], help="tmpl")
    tmpl.add_argument("--models", default="", help="eg: --models BaseUser")
    tmpl.add_argument("--to", default="", help="eg: --to biz/repo/req/vo/service")
    tmpl.add_argument("--defaultTempPath", dest="template_dir", default=_DEFAULT_TEMPLATE_DIR)
    tmpl.add_argument("--targetPkgPath", dest="target_dir", default=_DEFAULT_TARGET_DIR)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    if args.generator is None:
        print("generate called")
        return 0
    try:
        generate(
            args.models,
            Path.cwd().parent,
            template_dir=args.template_dir,
            target_dir=args.target_dir,
            project=args.project,
            pkg=args.pkg,
            to=args.to,
        )
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0