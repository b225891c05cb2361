"""Validation stages — one external tool each."""

from validator.stages.generate import build_source_url, generate_document
from validator.stages.links import check_links
from validator.stages.manifest import load_manifest, parse_manifest
from validator.stages.markup import check_markup

__all__ = [
    "build_source_url",
    "generate_document",
    "check_markup",
    "check_links",
    "load_manifest",
    "parse_manifest",
]
