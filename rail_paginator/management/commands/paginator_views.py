"""
Copy the bundled paginator partials into a project template directory.
"""

import shutil
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from rail_paginator.defaults import TEMPLATE_NAMES, THEMES

TEMPLATES_ROOT = Path(__file__).resolve().parents[2] / "templates" / "rail_paginator"


class Command(BaseCommand):
    help = "Copy the rail-paginator partial templates of a theme into your project for customization."

    def add_arguments(self, parser):
        parser.add_argument(
            "theme",
            nargs="?",
            default="default",
            help=f"Theme to copy ({', '.join(THEMES)}; default: default).",
        )
        parser.add_argument(
            "--target",
            dest="target",
            help="Template directory to copy into (default: the first DIRS entry of TEMPLATES).",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite existing files.",
        )

    def handle(self, *args, **options):
        theme = options["theme"]
        if theme not in THEMES:
            raise CommandError(
                f"Unknown theme '{theme}'. Available themes: {', '.join(THEMES)}"
            )

        target_root = self._resolve_target(options.get("target"))
        destination = target_root / "rail_paginator" / theme
        source = TEMPLATES_ROOT / theme

        files = [source / f"_{name}.html" for name in TEMPLATE_NAMES]
        existing = [destination / f.name for f in files if (destination / f.name).exists()]
        if existing and not options["force"]:
            raise CommandError(
                f"{len(existing)} template(s) already exist in {destination}; use --force to overwrite."
            )

        destination.mkdir(parents=True, exist_ok=True)
        for template_file in files:
            shutil.copyfile(template_file, destination / template_file.name)
            self.stdout.write(f"  create {destination / template_file.name}")

        self.stdout.write(
            self.style.SUCCESS(f"Copied {len(files)} '{theme}' templates to {destination}")
        )

    def _resolve_target(self, target):
        if target:
            return Path(target)
        for backend in getattr(settings, "TEMPLATES", []):
            dirs = backend.get("DIRS") or []
            if dirs:
                return Path(dirs[0])
        raise CommandError(
            "No template directory configured; pass --target or set TEMPLATES[0]['DIRS']."
        )
