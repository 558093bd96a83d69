"""
Unit tests for the paginator_views management command.
"""

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

from rail_paginator.defaults import TEMPLATE_NAMES

pytestmark = pytest.mark.unit


class TestPaginatorViewsCommand:
    def test_copies_default_theme(self, tmp_path):
        out = StringIO()
        call_command("paginator_views", target=str(tmp_path), stdout=out)

        destination = tmp_path / "rail_paginator" / "default"
        copied = sorted(p.name for p in destination.iterdir())
        assert copied == sorted(f"_{name}.html" for name in TEMPLATE_NAMES)
        assert "Copied 7 'default' templates" in out.getvalue()

    def test_copies_named_theme(self, tmp_path):
        call_command("paginator_views", "bootstrap", target=str(tmp_path), stdout=StringIO())

        page = tmp_path / "rail_paginator" / "bootstrap" / "_page.html"
        assert "page-link" in page.read_text(encoding="utf-8")

    def test_unknown_theme(self, tmp_path):
        with pytest.raises(CommandError, match="Unknown theme"):
            call_command("paginator_views", "material", target=str(tmp_path))

    def test_refuses_to_overwrite_without_force(self, tmp_path):
        call_command("paginator_views", target=str(tmp_path), stdout=StringIO())
        page = tmp_path / "rail_paginator" / "default" / "_page.html"
        page.write_text("custom", encoding="utf-8")

        with pytest.raises(CommandError, match="--force"):
            call_command("paginator_views", target=str(tmp_path), stdout=StringIO())
        assert page.read_text(encoding="utf-8") == "custom"

        call_command("paginator_views", target=str(tmp_path), force=True, stdout=StringIO())
        assert page.read_text(encoding="utf-8") != "custom"

    def test_uses_first_template_dir(self, tmp_path, settings):
        settings.TEMPLATES = [
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "DIRS": [str(tmp_path)],
                "APP_DIRS": True,
            }
        ]
        call_command("paginator_views", stdout=StringIO())

        assert (tmp_path / "rail_paginator" / "default" / "_paginator.html").exists()

    def test_requires_a_target(self):
        with override_settings(TEMPLATES=[{"BACKEND": "django.template.backends.django.DjangoTemplates", "DIRS": [], "APP_DIRS": True}]):
            with pytest.raises(CommandError, match="No template directory"):
                call_command("paginator_views", stdout=StringIO())
