"""Scaffold a new command: handler module and markdown skill file."""

from __future__ import annotations

import keyword
from pathlib import Path

from ...commands.naming import camelize
from ...commands.registry import command
from ...constants import ACRONYMS, PROGRAM_NAME
from ..interface import Command

HANDLER_TEMPLATE = '''{description!r}

from jikko.commands.registry import command
from jikko.handlers.interface import Command


@command({path})
class {class_name}(Command):
    {description!r}

    def run(self) -> None:
        self.info("Not implemented yet")
'''

SKILL_TEMPLATE = """---
description: {description}
---
```bash
{program} {cli_command} $ARGUMENTS
```
"""


def is_module_name(segment: str) -> bool:
    """Tell whether `segment` can name a handler module."""
    return segment.isidentifier() and not keyword.iskeyword(segment)


def class_name_for(name: str, acronyms: frozenset[str]) -> str:
    """Handler class name of the command `name`, e.g. "pages_list" -> "PagesList"."""
    class_name = camelize(name, acronyms)
    if not class_name.isidentifier() or keyword.iskeyword(class_name):
        class_name = f"Cmd{class_name}"
    return class_name


@command("commands", "init")
class Init(Command):
    """<category> <name> [description] Create the files of a new command.

    The handler module goes to jikko/handlers/<category>/<name>.py and the
    skill file to commands/<category>/<name>.md, both under the `repo_root`
    setting. Nested categories use "/", e.g. "ai/sd". Existing files are
    never overwritten.
    """

    created = False
    """ set once both files are written """

    @property
    def acronyms(self) -> frozenset[str]:
        return self.context.registry.acronyms if self.context else ACRONYMS

    def run(self) -> None:
        if len(self.args) < 2:  # noqa: PLR2004
            self.err(f"Usage: {PROGRAM_NAME} commands init <category> <name> [description]")
            return
        category, name = self.args[0].strip("/"), self.args[1]
        description = self.args[2] if len(self.args) > 2 else "TODO"  # noqa: PLR2004

        segments = [*category.split("/"), name]
        invalid = [segment for segment in segments if not is_module_name(segment)]
        if invalid:
            self.err(f"Invalid command name: {', '.join(invalid)} (letters, digits and _ only)")
            return
        handler_dir = self.repo_root.joinpath(PROGRAM_NAME, "handlers", *category.split("/"))
        handler_file = handler_dir / f"{name}.py"
        skill_dir = self.repo_root.joinpath("commands", *category.split("/"))
        skill_file = skill_dir / f"{name}.md"

        if handler_file.exists():
            self.err(f"Handler already exists: {self.home(handler_file)}")
            return
        if skill_file.exists():
            self.err(f"Skill file already exists: {self.home(skill_file)}")
            return

        self._make_package(handler_dir)
        handler_file.write_text(
            HANDLER_TEMPLATE.format(
                description=description,
                path=", ".join(repr(segment) for segment in segments),
                class_name=class_name_for(name, self.acronyms),
            ),
            encoding="utf-8",
        )
        self.ok(f"Created: {self.home(handler_file)}")

        skill_dir.mkdir(parents=True, exist_ok=True)
        skill_file.write_text(
            SKILL_TEMPLATE.format(description=description, program=PROGRAM_NAME, cli_command=" ".join(segments)),
            encoding="utf-8",
        )
        self.ok(f"Created: {self.home(skill_file)}")

        self.info(f"Usage: /{category.replace('/', ':')}:{name}")
        self.puts("---")
        self.puts(f"HANDLER_FILE={handler_file}")
        self.puts(f"MD_FILE={skill_file}")
        self.created = True

    def _make_package(self, handler_dir: Path) -> None:
        """Create `handler_dir` and the missing `__init__.py` files up to the handlers package."""
        handlers_root = self.repo_root / PROGRAM_NAME / "handlers"
        handler_dir.mkdir(parents=True, exist_ok=True)
        current = handler_dir
        while current != handlers_root and handlers_root in current.parents:
            init_file = current / "__init__.py"
            if not init_file.exists():
                init_file.write_text(f'"""{current.name} commands."""\n', encoding="utf-8")
            current = current.parent
