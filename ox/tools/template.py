"""Generator that creates empty plush templates."""

from __future__ import annotations

import os

from ox import log

__all__ = ["TemplateError", "TemplateGenerator"]


class TemplateError(Exception):
    """Raised when a template cannot be generated."""


class TemplateGenerator:
    """Creates an empty ``[name].plush.html`` under app/templates."""

    name = "buffalo/generate-template"
    invocation_name = "template"

    def generate(self, root: str, args: list[str]) -> None:
        """Generate the template named by ``args[2]`` inside ``root``."""
        if len(args) < 3:
            raise TemplateError(
                "no name specified, please use `ox generate template [name]`"
            )

        self.generate_template(root, args[2])
        log.info(f"Template generated in app/templates/{args[2]}.plush.html \n")

    def generate_template(self, root: str, filename: str) -> None:
        """Create the empty template file, with any sub folders it needs."""
        dir_path = os.path.join(root, "app", "templates")
        if not os.path.lexists(dir_path):
            raise TemplateError(
                f"folder '{dir_path}' do not exists on your buffalo app, "
                "please ensure the folder exists in order to proceed"
            )

        path = self.generate_file_path(dir_path, filename)
        if os.path.lexists(path):
            raise TemplateError("template already exists")

        try:
            os.makedirs(os.path.dirname(path), mode=0o755, exist_ok=True)
        except OSError as exc:
            raise TemplateError(f"error creating subfolders: {exc}") from exc

        try:
            with open(path, "w", encoding="utf-8"):
                pass
        except OSError as exc:
            raise TemplateError(f"error creating file: {exc}") from exc

    def generate_file_path(self, dir_path: str, filename: str) -> str:
        """Return the template path, replacing any extension with .plush.html."""
        base = filename.split(".")[0]
        return os.path.join(dir_path, base + ".plush.html")