"""Configuration loading."""

from solrscout.config.settings import ObservabilitySettings, SearchSettings, Settings, SolrSettings

__all__ = ["ObservabilitySettings", "SearchSettings", "Settings", "SolrSettings"]
