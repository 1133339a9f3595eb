"""Plugin metadata header."""
from dataclasses import dataclass


@dataclass(frozen=True)
class PluginMetadata:
    """Descriptive header for a plugin, as shown to the host."""

    name: str
    version: str
    author: str = ""
    author_uri: str = ""
    description: str = ""
    uri: str = ""
    text_domain: str = ""
    license: str = ""
    license_uri: str = ""


PLUGIN = PluginMetadata(
    name="opensums-wp-plugin",
    version="1.0.0-dev",
    author="OpenSums",
    author_uri="https://opensums.com/",
    description="Template for plugins created by OpenSums.",
    uri="https://github.com/opensums/opensums-wp-plugin",
    text_domain="opensums-wp-plugin",
    license="MIT",
    license_uri="https://github.com/opensums/opensums-wp-plugin/LICENSE",
)
