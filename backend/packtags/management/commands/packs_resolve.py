"""Print the chunks a set of packs resolves to, in load order."""

from __future__ import annotations

from dataclasses import replace

from django.core.management.base import BaseCommand, CommandError

from packtags.conf import current_config
from packtags.errors import PackError
from packtags.manifest import AssetType, get_manifest
from packtags.sources import SourceListAssembler


class Command(BaseCommand):
    help = "Resolve pack names through the bundler manifest and print their chunks in load order."

    def add_arguments(self, parser):
        parser.add_argument("names", nargs="+", help="Pack names, as passed to the template tags.")
        parser.add_argument(
            "--type",
            dest="asset_type",
            choices=[AssetType.JAVASCRIPT.value, AssetType.STYLESHEET.value],
            default=AssetType.JAVASCRIPT.value,
        )
        order = parser.add_mutually_exclusive_group()
        order.add_argument("--topological", dest="topological", action="store_true", default=None)
        order.add_argument("--first-seen", dest="topological", action="store_false")
        parser.set_defaults(topological=None)
        parser.add_argument(
            "--available",
            action="store_true",
            help="Skip unknown packs instead of failing, like appended packs.",
        )

    def handle(self, *args, **options):
        config = current_config()
        if options["topological"] is not None:
            config = replace(config, use_topological_order=options["topological"])
        assembler = SourceListAssembler.from_config(get_manifest(config), config)
        asset_type = AssetType(options["asset_type"])

        try:
            if options["available"]:
                sources = assembler.available_sources(options["names"], asset_type)
            else:
                sources = assembler.sources(options["names"], asset_type)
        except PackError as exc:
            raise CommandError(str(exc)) from exc

        mode = "topological" if config.use_topological_order else "first-seen"
        if options["verbosity"] > 1:
            self.stdout.write(f"# {config.manifest_path} ({mode}, {asset_type.value})")
        for source in sources:
            self.stdout.write(source)
