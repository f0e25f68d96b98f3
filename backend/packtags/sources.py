"""Turn pack names into the ordered list of chunk sources to load."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from packtags.conf import PacksConfig
from packtags.graph import DependencyGraph, resolve_order
from packtags.manifest import AssetType, Manifest

logger = logging.getLogger(__name__)

ChunkLists = Sequence[Optional[Sequence[str]]]
Ordering = Callable[[ChunkLists], List[str]]


@dataclass(frozen=True)
class PackRequest:
    """A pack name to look up; ``strict`` requests raise when the pack is unknown."""

    name: str
    strict: bool = True


def first_seen_order(chunk_lists: ChunkLists) -> List[str]:
    """Concatenate the chunk lists and drop repeats, keeping first occurrences."""
    seen = set()
    ordered = []
    for chunks in chunk_lists:
        for chunk in chunks or ():
            if chunk is None or chunk in seen:
                continue
            seen.add(chunk)
            ordered.append(chunk)
    return ordered


def topological_order(chunk_lists: ChunkLists) -> List[str]:
    """Merge the chunk lists into one graph and return its load order."""
    return resolve_order(DependencyGraph.from_chains(chunk_lists))


def ordering_for(config: PacksConfig) -> Ordering:
    return topological_order if config.use_topological_order else first_seen_order


class SourceListAssembler:
    def __init__(self, manifest: Manifest, ordering: Ordering = first_seen_order):
        self.manifest = manifest
        self.ordering = ordering

    @classmethod
    def from_config(cls, manifest: Manifest, config: PacksConfig) -> "SourceListAssembler":
        return cls(manifest, ordering_for(config))

    def chunk_lists(self, requests: Iterable[PackRequest], asset_type: AssetType) -> List[List[str]]:
        chunk_lists = []
        for request in requests:
            name = str(request.name)
            if request.strict:
                chunk_lists.append(self.manifest.lookup_pack_with_chunks_strict(name, asset_type))
                continue
            chunks = self.manifest.lookup_pack_with_chunks(name, asset_type)
            if chunks:
                chunk_lists.append(chunks)
            else:
                logger.debug("Skipping unknown %s pack %r.", AssetType(asset_type).value, name)
        return chunk_lists

    def resolve(self, requests: Iterable[PackRequest], asset_type: AssetType) -> List[str]:
        return self.ordering(self.chunk_lists(requests, asset_type))

    def sources(self, names: Iterable[str], asset_type: AssetType) -> List[str]:
        return self.resolve([PackRequest(name) for name in names], asset_type)

    def available_sources(self, names: Iterable[str], asset_type: AssetType) -> List[str]:
        return self.resolve([PackRequest(name, strict=False) for name in names], asset_type)
