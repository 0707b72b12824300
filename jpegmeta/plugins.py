"""
Parser registries

`file_parsers` maps a container type to the class that recognises it and
locates its metadata; `segment_parsers` maps a segment type (tiff, iptc,
xmp) to its decoder. Both are filled in the package `__init__`.
"""


class PluginRegistry:
    """Parser classes keyed by the type they handle"""

    def __init__(self, kind):
        self.kind = kind
        self._parsers = {}

    def register(self, key, parser_class):
        self._parsers[key] = parser_class
        return parser_class

    def get(self, key):
        try:
            return self._parsers[key]
        except KeyError:
            raise KeyError(f"No {self.kind} parser registered for '{key}'") from None

    def __contains__(self, key):
        return key in self._parsers

    def __iter__(self):
        """Iterate over (key, parser class) pairs in registration order"""
        return iter(self._parsers.items())


file_parsers = PluginRegistry("file")
segment_parsers = PluginRegistry("segment")
