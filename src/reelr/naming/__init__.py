"""
Naming template engine.

Turns a ``{Token}`` pattern plus a series/episode/file snapshot into a
filesystem-safe relative path.

Modules:
    - builder: FileNameBuilder (two-pass evaluation, path assembly)
    - tokens: token matching and rendering rules
    - resolvers: token groups and the per-render registry
    - numbering: season/episode sub-patterns and multi-episode styles
    - titles: title helpers and the episode title composer
    - languages: language code normalization
    - mediainfo: media info labels and schema revision checks
    - sanitize: filename sanitization pipeline
    - pattern_cache: single-flight cache of pattern facts
    - interfaces: collaborator protocols and defaults
    - samples: sample data for previews
"""

from reelr.naming.builder import FileNameBuilder
from reelr.naming.interfaces import (
    CustomFormatCalculator,
    DefaultQualityDefinitionService,
    MediaInfoUpdater,
    NamingConfigService,
    QualityDefinitionService,
    StaticNamingConfigService,
)
from reelr.naming.pattern_cache import PatternCache
from reelr.naming.sanitize import clean_file_name, clean_folder_name
from reelr.naming.titles import clean_title, slug_title, title_the, title_without_year, title_year

__all__ = [
    "FileNameBuilder",
    "PatternCache",
    # Collaborators
    "NamingConfigService",
    "QualityDefinitionService",
    "MediaInfoUpdater",
    "CustomFormatCalculator",
    "StaticNamingConfigService",
    "DefaultQualityDefinitionService",
    # Text utilities
    "clean_file_name",
    "clean_folder_name",
    "clean_title",
    "slug_title",
    "title_the",
    "title_year",
    "title_without_year",
]
