"""solrscout — Apache Solr driver for a model search abstraction."""

__version__ = "0.1.0"
