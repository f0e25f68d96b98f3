from packtags.errors import UnknownPackError
from packtags.manifest import AssetType, Manifest
from packtags.sources import (
    PackRequest,
    SourceListAssembler,
    first_seen_order,
    ordering_for,
    topological_order,
)
from packtags.tests.base import (
    APPLICATION_JS,
    APPLICATION_RUNTIME_JS,
    CALENDAR_CSS,
    CALENDAR_JS,
    CALENDAR_RUNTIME_JS,
    FIXTURE_MANIFEST,
    MAP_CSS,
    MAP_JS,
    MAP_RUNTIME_JS,
    VENDOR_CSS,
    VENDOR_JS,
    PacksTestCase,
)


class OrderingTests(PacksTestCase):
    def test_first_seen_flattens_and_dedupes(self):
        chunk_lists = [["v", "a"], ["v", "b", "a"], None, ["c", None]]
        self.assertEqual(first_seen_order(chunk_lists), ["v", "a", "b", "c"])

    def test_topological_respects_every_list(self):
        chunk_lists = [["a", "b"], ["shared", "a"]]
        self.assertEqual(first_seen_order(chunk_lists), ["a", "b", "shared"])
        self.assertEqual(topological_order(chunk_lists), ["shared", "a", "b"])

    def test_ordering_follows_config(self):
        self.assertIs(ordering_for(self.make_config(use_topological_order=True)), topological_order)
        self.assertIs(ordering_for(self.make_config(use_topological_order=False)), first_seen_order)


class SourceListAssemblerTests(PacksTestCase):
    def setUp(self):
        self.manifest = Manifest(FIXTURE_MANIFEST)

    def assembler(self, topological):
        return SourceListAssembler.from_config(
            self.manifest, self.make_config(use_topological_order=topological)
        )

    def test_first_seen_sources(self):
        sources = self.assembler(False).sources(["calendar", "map"], AssetType.JAVASCRIPT)
        self.assertEqual(
            sources,
            [VENDOR_JS, CALENDAR_RUNTIME_JS, CALENDAR_JS, MAP_RUNTIME_JS, MAP_JS],
        )

    def test_topological_sources(self):
        sources = self.assembler(True).sources(["calendar", "map"], AssetType.JAVASCRIPT)
        self.assertEqual(
            sources,
            [VENDOR_JS, CALENDAR_RUNTIME_JS, MAP_RUNTIME_JS, CALENDAR_JS, MAP_JS],
        )

    def test_repeated_names_resolve_once(self):
        for topological in (False, True):
            sources = self.assembler(topological).sources(["map", "map"], AssetType.JAVASCRIPT)
            self.assertEqual(sources, [VENDOR_JS, MAP_RUNTIME_JS, MAP_JS])

    def test_stylesheet_sources(self):
        sources = self.assembler(False).sources(["map", "calendar"], AssetType.STYLESHEET)
        self.assertEqual(sources, [MAP_CSS, VENDOR_CSS, CALENDAR_CSS])

    def test_strict_unknown_pack_raises(self):
        for topological in (False, True):
            with self.assertRaises(UnknownPackError) as ctx:
                self.assembler(topological).sources(["calendar", "nope"], AssetType.JAVASCRIPT)
            self.assertEqual(ctx.exception.name, "nope")

    def test_strict_lookup_needs_chunks_of_that_type(self):
        with self.assertRaises(UnknownPackError):
            self.assembler(False).sources(["hello_stimulus"], AssetType.JAVASCRIPT)

    def test_available_sources_skip_unknown_packs(self):
        for topological in (False, True):
            sources = self.assembler(topological).available_sources(
                ["nope", "map", "hello_stimulus"], AssetType.JAVASCRIPT
            )
            self.assertEqual(sources, [VENDOR_JS, MAP_RUNTIME_JS, MAP_JS])

    def test_resolve_mixes_strict_and_best_effort(self):
        requests = [PackRequest("ghost", strict=False), PackRequest("application")]
        sources = self.assembler(True).resolve(requests, AssetType.JAVASCRIPT)
        self.assertEqual(sources, [VENDOR_JS, APPLICATION_RUNTIME_JS, APPLICATION_JS])

    def test_object_entries_resolve_to_src(self):
        sources = self.assembler(False).sources(["signed"], AssetType.JAVASCRIPT)
        self.assertEqual(sources, ["/packs/js/signed-77aa01bc.chunk.js"])

    def test_same_input_same_output(self):
        assembler = self.assembler(True)
        names = ["map", "application", "calendar"]
        first = assembler.sources(names, AssetType.JAVASCRIPT)
        self.assertEqual(assembler.sources(names, AssetType.JAVASCRIPT), first)
        self.assertEqual(len(first), len(set(first)))
